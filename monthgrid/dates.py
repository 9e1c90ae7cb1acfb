"""
Date arithmetic helpers.

All values are calendar dates (datetime.date); any time component is dropped,
so equality and ordering compare year, month and day only.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Optional

from monthgrid.config import DATE_FORMAT, MONTH_NAMES
from monthgrid.exceptions import InvalidDateError


def as_date(value: date) -> date:
    # datetime is a subclass of date, strip the time part
    if isinstance(value, datetime):
        return value.date()
    return value


def parse_date(value: object) -> Optional[date]:
    """
    Parse 'YYYY-MM-DD' (or pass a date through).
    Returns None for anything that is not a valid calendar date.
    """
    if isinstance(value, date):
        return as_date(value)
    if not isinstance(value, str):
        return None
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError:
        return None


def parse_date_strict(value: object) -> date:
    parsed = parse_date(value)
    if parsed is None:
        raise InvalidDateError(value)
    return parsed


def first_of_month(d: date) -> date:
    return d.replace(day=1)


def weekday_index(d: date) -> int:
    """
    Day-of-week index with Sunday=0 ... Saturday=6.
    """
    return (d.weekday() + 1) % 7


def days_in_month(d: date) -> int:
    return calendar.monthrange(d.year, d.month)[1]


def add_days(d: date, n: int = 1) -> date:
    return d + timedelta(days=n)


def month_title(d: date) -> str:
    """
    'February 2021' style title, independent of the process locale.
    """
    return f"{MONTH_NAMES[d.month - 1]} {d.year:04d}"


def today() -> date:
    return date.today()
