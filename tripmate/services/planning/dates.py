"""
Calendar-day helpers.

All day arithmetic is done on datetime.date, never on wall-clock datetimes, so
DST changes and server time zone cannot move a day boundary.
"""

import re
from datetime import date, datetime, timedelta, timezone
from typing import Iterator
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import InputError

DAY_FORMAT = "%Y-%m-%d"
_DAY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_day(value: str, field_name: str = "date") -> date:
    """Parse a strict YYYY-MM-DD string into a date."""
    if not isinstance(value, str) or not _DAY_PATTERN.match(value.strip()):
        raise InputError(f"Invalid {field_name}: expected YYYY-MM-DD, got {value!r}")
    try:
        return datetime.strptime(value.strip(), DAY_FORMAT).date()
    except ValueError:
        raise InputError(f"Invalid {field_name}: {value!r} is not a calendar date") from None


def format_day(day: date) -> str:
    return day.strftime(DAY_FORMAT)


def to_calendar_day(moment: datetime, tz_name: str = "UTC") -> date:
    """
    Normalize a point in time to the calendar day it falls on in a fixed zone.
    Naive datetimes are taken to be UTC.
    """
    try:
        tz = ZoneInfo(tz_name)
    except ZoneInfoNotFoundError:
        raise InputError(f"Unknown time zone: {tz_name}") from None
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(tz).date()


def add_days(day: date, count: int) -> date:
    return day + timedelta(days=count)


def days_between(start: date, end: date) -> int:
    """Inclusive number of days in [start, end]."""
    return (end - start).days + 1


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every day from start to end inclusive. Never steps past end."""
    for offset in range(max(days_between(start, end), 0)):
        yield start + timedelta(days=offset)
