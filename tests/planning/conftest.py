import pytest
from datetime import date, timedelta

from tripmate.services.planning.types import (
    DayStatus,
    Member,
    ScheduleEntry,
)


WINDOW_START = date(2025, 7, 1)  # fixed for deterministic tests


def nth_day(n: int) -> date:
    # day 1 is WINDOW_START
    return WINDOW_START + timedelta(days=n - 1)


def make_member(member_id, working_days=(), off_days=(), unspecified_days=(), name=None) -> Member:
    entries = (
        [ScheduleEntry(day=nth_day(n), status=DayStatus.WORKING) for n in working_days]
        + [ScheduleEntry(day=nth_day(n), status=DayStatus.OFF) for n in off_days]
        + [ScheduleEntry(day=nth_day(n), status=DayStatus.UNSPECIFIED) for n in unspecified_days]
    )
    return Member(id=member_id, name=name, entries=sorted(entries, key=lambda e: e.day))


@pytest.fixture
def day():
    return nth_day


@pytest.fixture
def member():
    return make_member


@pytest.fixture
def solo_member() -> list[Member]:
    # works days 5-7 of the window, off on 1-2
    return [make_member("alice-1234", working_days=[5, 6, 7], off_days=[1, 2], name="Alice")]


@pytest.fixture
def two_members() -> list[Member]:
    # disjoint working days
    return [
        make_member(1, working_days=[1, 2, 3, 8], name="Alice"),
        make_member(2, working_days=[4, 5, 9, 10], name="Bob"),
    ]


@pytest.fixture
def idle_members() -> list[Member]:
    return [make_member(1, name="Alice"), make_member(2, name="Bob"), make_member(3)]
