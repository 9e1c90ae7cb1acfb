"""
monthgrid: month-grid calendar rendering with date-ranged events.

Typical use:

    from monthgrid import CalendarGrid

    html = CalendarGrid().add_event("2021-02-10", "2021-02-12", "Trip", True, ["trip"]).draw("2021-02-01")
"""

from monthgrid.exceptions import InvalidDateError
from monthgrid.grid import CalendarGrid

__all__ = ["CalendarGrid", "InvalidDateError"]
