"""
Internal data types for the best-date search.
decoupled from SQLAlchemy models so the scan runs on plain snapshots.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Hashable, Optional

from .dates import days_between, iter_days
from .errors import PlanningError


class DayStatus(str, Enum):
    WORKING = "WORKING"
    OFF = "OFF"
    UNSPECIFIED = "UNSPECIFIED"


@dataclass
class ScheduleEntry:
    day: date
    status: DayStatus
    shift_code: Optional[str] = None


@dataclass
class Member:
    id: Hashable
    name: Optional[str] = None
    entries: list[ScheduleEntry] = field(default_factory=list)

    @property
    def display_name(self) -> str:
        if self.name:
            return self.name
        return f"User({str(self.id)[:6]})"


@dataclass(frozen=True)
class CandidateSpan:
    """A contiguous run of calendar days, both ends inclusive."""
    start: date
    end: date

    @property
    def length(self) -> int:
        return days_between(self.start, self.end)

    @property
    def days(self) -> list[date]:
        return list(iter_days(self.start, self.end))


@dataclass
class VacationRequirement:
    """Days inside a span on which one member is scheduled to work."""
    member_id: Hashable
    member_name: str
    dates: list[date] = field(default_factory=list)


@dataclass
class VacationOption:
    span: CandidateSpan
    vacation_days: int
    required_vacations: list[VacationRequirement] = field(default_factory=list)

    @property
    def start_date(self) -> date:
        return self.span.start

    @property
    def end_date(self) -> date:
        return self.span.end


@dataclass
class SearchRequest:
    """Validated search parameters."""
    duration: int
    search_start: date
    search_end: date

    @property
    def window_length(self) -> int:
        return days_between(self.search_start, self.search_end)


@dataclass
class SearchResult:
    """Output of a best-date search. Exactly one of options/error is meaningful."""
    success: bool
    options: list[VacationOption] = field(default_factory=list)
    error: Optional[PlanningError] = None

    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error else None

    @classmethod
    def ok(cls, options: list[VacationOption]) -> "SearchResult":
        return cls(success=True, options=options)

    @classmethod
    def failed(cls, error: PlanningError) -> "SearchResult":
        return cls(success=False, error=error)
