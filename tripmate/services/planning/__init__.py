"""
Best-date planning package.

Usage:
    from tripmate.services.planning import find_best_dates

    # Load the group snapshot and scan in one call
    result = find_best_dates(db, duration=3, search_start="2025-07-01",
                             search_end="2025-08-31", group_id=1)
    if result.success:
        for option in result.options:
            ...
    else:
        print(result.error_message)

    # Or scan a snapshot you already have
    from tripmate.services.planning import find_best_dates_for_members
    result = find_best_dates_for_members(members, 3, "2025-07-01", "2025-08-31")
"""

from .types import (
    DayStatus,
    ScheduleEntry,
    Member,
    CandidateSpan,
    VacationRequirement,
    VacationOption,
    SearchRequest,
    SearchResult,
)
from .errors import (
    PlanningError,
    InputError,
    NoDataError,
    NoValidRangeError,
    UpstreamError,
)
from .data_loader import load_group_members
from .finder import find_best_dates, find_best_dates_for_members
from .scanner import WindowScanner, OptionAggregator, scan_best_ranges
from .calendar_link import build_google_calendar_url
from .dates import format_day
from .search_state import SearchSession, SearchState, InvalidTransition

__all__ = [
    # Types
    "DayStatus",
    "ScheduleEntry",
    "Member",
    "CandidateSpan",
    "VacationRequirement",
    "VacationOption",
    "SearchRequest",
    "SearchResult",
    # Errors
    "PlanningError",
    "InputError",
    "NoDataError",
    "NoValidRangeError",
    "UpstreamError",
    # Main entry points
    "find_best_dates",
    "find_best_dates_for_members",
    # Lower-level functions
    "load_group_members",
    "scan_best_ranges",
    "WindowScanner",
    "OptionAggregator",
    "build_google_calendar_url",
    "format_day",
    "SearchSession",
    "SearchState",
    "InvalidTransition",
]
