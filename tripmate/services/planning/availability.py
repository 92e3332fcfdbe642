"""
Per-day work status lookup.
Determines whether a member is working on a given calendar day.
"""

from datetime import date
from typing import Optional

from .types import DayStatus, ScheduleEntry


def build_status_index(entries: list[ScheduleEntry]) -> dict[date, DayStatus]:
    """Map day -> status. A later entry for the same day replaces an earlier one."""
    return {entry.day: entry.status for entry in entries}


def get_status_for_day(
    status_index: dict[date, DayStatus],
    day: date,
) -> Optional[DayStatus]:
    """
    Returns:
        DayStatus if the member has an entry for the day, None otherwise
        (no entry = not working by default)
    """
    return status_index.get(day)


def is_working_status(status: Optional[DayStatus], assume_unspecified_working: bool = False) -> bool:
    if status == DayStatus.WORKING:
        return True
    if status == DayStatus.UNSPECIFIED and assume_unspecified_working:
        return True
    return False


def working_days_in(
    status_index: dict[date, DayStatus],
    days: list[date],
    assume_unspecified_working: bool = False,
) -> list[date]:
    """Days (in the given order) on which the indexed member works."""
    return [
        day for day in days
        if is_working_status(get_status_for_day(status_index, day), assume_unspecified_working)
    ]
