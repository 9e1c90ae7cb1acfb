# config.py
# Project-wide constants: date format, labels and CSS class names

DATE_FORMAT = "%Y-%m-%d"

# Sunday-first week, fixed English labels (no localization)
WEEKDAY_LABELS = ("S", "M", "T", "W", "T", "F", "S")
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# weekday index (Sunday=0) that closes a grid row
LAST_WEEKDAY = 6
DAYS_PER_WEEK = 7

# HTML class names
TABLE_CLASS = "calendar"
TITLE_ROW_CLASS = "calendar-title"
HEADER_ROW_CLASS = "calendar-header"
DAY_CLASS = "day"
PAD_CLASS = "pad"
TODAY_CLASS = "today"

# edge classes, only emitted for events with mask=True
MASK_START_CLASS = "mask-start"
MASK_INTERIOR_CLASS = "mask"
MASK_END_CLASS = "mask-end"

# terminal preview markers per edge class
PREVIEW_MARKERS = {
    MASK_START_CLASS: "[",
    MASK_INTERIOR_CLASS: "=",
    MASK_END_CLASS: "]",
}
