"""
Best date range scanner.

Strategy:
1. Slide a fixed-length span one day at a time across the search window
2. For each span, collect every (member, day) where the member is working
3. Keep only the spans with the lowest total, ties included
"""

from datetime import date
from typing import Iterator, Optional

from .types import (
    CandidateSpan,
    DayStatus,
    Member,
    VacationOption,
    VacationRequirement,
)
from .availability import build_status_index, working_days_in
from .dates import add_days, days_between
from .errors import InputError, NoValidRangeError


def iter_candidate_spans(duration: int, search_start: date, search_end: date) -> Iterator[CandidateSpan]:
    """Yield every span of `duration` days that fits inside [search_start, search_end]."""
    window_length = days_between(search_start, search_end)
    if duration < 1 or duration > window_length:
        return
    # Never builds a day past search_end
    for offset in range(window_length - duration + 1):
        start = add_days(search_start, offset)
        yield CandidateSpan(start=start, end=add_days(start, duration - 1))


class OptionAggregator:
    """Tracks the minimum vacation-day count and every option that reaches it."""

    def __init__(self):
        self.best_vacation_days: Optional[int] = None
        self.options: list[VacationOption] = []
        self.evaluated = 0

    def offer(self, option: VacationOption) -> None:
        self.evaluated += 1
        if self.best_vacation_days is None or option.vacation_days < self.best_vacation_days:
            self.best_vacation_days = option.vacation_days
            self.options = [option]
        elif option.vacation_days == self.best_vacation_days:
            self.options.append(option)


class WindowScanner:
    """
    Scores every candidate span in a window for a fixed group snapshot.
    """

    def __init__(self, members: list[Member], assume_unspecified_working: bool = False):
        self.members = members
        self.assume_unspecified_working = assume_unspecified_working
        # One index per member, in input order
        self._indexes: list[dict[date, DayStatus]] = [
            build_status_index(m.entries) for m in members
        ]

    def requirements_for(self, span: CandidateSpan) -> list[VacationRequirement]:
        """Non-empty vacation requirements for a span, members in input order."""
        days = span.days
        requirements = []
        for member, index in zip(self.members, self._indexes):
            working = working_days_in(index, days, self.assume_unspecified_working)
            if working:
                requirements.append(VacationRequirement(
                    member_id=member.id,
                    member_name=member.display_name,
                    dates=working,
                ))
        return requirements

    def score(self, span: CandidateSpan) -> VacationOption:
        requirements = self.requirements_for(span)
        return VacationOption(
            span=span,
            vacation_days=sum(len(r.dates) for r in requirements),
            required_vacations=requirements,
        )

    def scan(self, duration: int, search_start: date, search_end: date) -> list[VacationOption]:
        """
        Return every option with the minimal total vacation days.

        Raises:
            InputError: duration < 1 or search_end before search_start
            NoValidRangeError: no span of `duration` days fits in the window
        """
        if duration < 1:
            raise InputError("Duration must be a positive number of days.")
        if search_end < search_start:
            raise InputError("Search end date must not be before the start date.")

        aggregator = OptionAggregator()
        for span in iter_candidate_spans(duration, search_start, search_end):
            aggregator.offer(self.score(span))

        if not aggregator.options:
            raise NoValidRangeError("No suitable dates found within the given range.")
        return aggregator.options


def scan_best_ranges(
    members: list[Member],
    duration: int,
    search_start: date,
    search_end: date,
    assume_unspecified_working: bool = False,
) -> list[VacationOption]:
    """Convenience wrapper for a single scan."""
    scanner = WindowScanner(members, assume_unspecified_working=assume_unspecified_working)
    return scanner.scan(duration, search_start, search_end)
