"""
Best-date finder - main orchestration layer.

This module is the boundary of the planning package: it validates raw input,
loads the group snapshot, runs the window scan and returns a SearchResult.
Planning errors never propagate past it; they come back as values.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from tripmate.core.config import settings

from .data_loader import load_group_members
from .dates import parse_day
from .errors import InputError, NoDataError, PlanningError, UpstreamError
from .scanner import scan_best_ranges
from .types import Member, SearchRequest, SearchResult


logger = logging.getLogger(__name__)


def validate_search_request(
    duration: int,
    search_start: Optional[str],
    search_end: Optional[str],
    max_search_days: Optional[int] = None,
) -> SearchRequest:
    """
    Turn raw request values into a SearchRequest.

    Raises:
        InputError: with a distinct message for each kind of bad input
    """
    if not search_start or not search_end:
        raise InputError("Specify the date range to search.")

    start = parse_day(search_start, "search start date")
    end = parse_day(search_end, "search end date")

    if isinstance(duration, bool) or not isinstance(duration, int) or duration < 1:
        raise InputError("Duration must be a positive number of days.")
    if end < start:
        raise InputError("Search end date must not be before the start date.")

    request = SearchRequest(duration=duration, search_start=start, search_end=end)

    limit = max_search_days if max_search_days is not None else settings.MAX_SEARCH_DAYS
    if limit and request.window_length > limit:
        raise InputError(f"Search range may not exceed {limit} days.")

    return request


def _run_scan(
    members: list[Member],
    request: SearchRequest,
    assume_unspecified_working: Optional[bool],
) -> SearchResult:
    if not members:
        raise NoDataError("The group has no members.")

    if assume_unspecified_working is None:
        assume_unspecified_working = settings.ASSUME_UNSPECIFIED_WORKING

    options = scan_best_ranges(
        members,
        request.duration,
        request.search_start,
        request.search_end,
        assume_unspecified_working=assume_unspecified_working,
    )
    logger.debug(
        f"Best-date search: {len(members)} members, {request.window_length} day window, "
        f"duration {request.duration} -> {len(options)} options at {options[0].vacation_days} vacation days"
    )
    return SearchResult.ok(options)


def find_best_dates_for_members(
    members: list[Member],
    duration: int,
    search_start: Optional[str],
    search_end: Optional[str],
    assume_unspecified_working: Optional[bool] = None,
    max_search_days: Optional[int] = None,
) -> SearchResult:
    """
    Run the search on an already loaded member snapshot.

    Useful for testing or when the caller fetched schedules some other way.
    """
    try:
        request = validate_search_request(duration, search_start, search_end, max_search_days)
        return _run_scan(members, request, assume_unspecified_working)
    except PlanningError as e:
        logger.info(f"Best-date search failed ({e.code}): {e}")
        return SearchResult.failed(e)


def find_best_dates(
    db: Session,
    duration: int,
    search_start: Optional[str],
    search_end: Optional[str],
    group_id: Optional[int],
    assume_unspecified_working: Optional[bool] = None,
    max_search_days: Optional[int] = None,
) -> SearchResult:
    """
    Find the date ranges that cost a group the fewest vacation days.

    main entry point for the search. This function:
    1. Validates the group selection, date bounds and duration
    2. Loads the group's members and schedules from the database
    3. Scans every candidate span and keeps the cheapest ones

    Args:
        db: Database session
        duration: Number of consecutive days for the trip
        search_start: First day of the search window, YYYY-MM-DD
        search_end: Last day of the search window, YYYY-MM-DD
        group_id: The group to plan for
        assume_unspecified_working: Count UNSPECIFIED entries as working days.
            Defaults to settings.ASSUME_UNSPECIFIED_WORKING.

    Returns:
        SearchResult with either:
        - success=True and the tied best options in chronological order
        - success=False and an InputError, NoDataError, NoValidRangeError
          or UpstreamError describing what went wrong
    """
    try:
        if group_id is None:
            raise InputError("Select a group first.")
        request = validate_search_request(duration, search_start, search_end, max_search_days)
        members = load_group_members(db, group_id, request.search_start, request.search_end)
        return _run_scan(members, request, assume_unspecified_working)
    except UpstreamError as e:
        logger.error(f"Best-date search for group {group_id} could not load data: {e}")
        return SearchResult.failed(UpstreamError("Failed to load group member information."))
    except PlanningError as e:
        logger.info(f"Best-date search for group {group_id} failed ({e.code}): {e}")
        return SearchResult.failed(e)
