class InvalidDateError(ValueError):
    """Raised in strict mode when a date is not a valid YYYY-MM-DD value."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid date: {value!r}")
        self.value = value
