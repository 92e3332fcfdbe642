"""
Data loader for the best-date search.
Fetches group members and their schedules and converts them to internal types.
"""

import logging
from collections import defaultdict
from datetime import date
from typing import Optional

from sqlalchemy import String, and_, select, type_coerce
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tripmate.db.models.group_members import GroupMembers
from tripmate.db.models.schedules import Schedules
from tripmate.db.models.users import Users

from .errors import UpstreamError
from .types import DayStatus, Member, ScheduleEntry


logger = logging.getLogger(__name__)


def load_member_rows(db: Session, group_id: int) -> list[tuple[int, Optional[str]]]:
    """(user_id, username) for every member of a group, in join order."""
    stmt = (
        select(Users.id, Users.username)
        .join(GroupMembers, GroupMembers.user_id == Users.id)
        .where(GroupMembers.group_id == group_id)
        .order_by(GroupMembers.id)
    )
    return [(row.id, row.username) for row in db.execute(stmt).all()]


def load_schedule_entries(
    db: Session,
    user_ids: list[int],
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> dict[int, list[ScheduleEntry]]:
    """Load schedule rows for a set of users, optionally limited to [start, end]."""

    if not user_ids:
        return {}

    conditions = [Schedules.user_id.in_(user_ids)]
    if start is not None:
        conditions.append(Schedules.day >= start)
    if end is not None:
        conditions.append(Schedules.day <= end)

    # Raw label, so values outside the enum reach the check below
    stmt = (
        select(
            Schedules.user_id,
            Schedules.day,
            type_coerce(Schedules.status, String).label("status"),
            Schedules.shift_code,
        )
        .where(and_(*conditions))
        .order_by(Schedules.user_id, Schedules.day)
    )
    rows = db.execute(stmt).all()

    entries: dict[int, list[ScheduleEntry]] = defaultdict(list)
    for r in rows:
        try:
            status = DayStatus(r.status)
        except ValueError:
            raise UpstreamError(f"Unknown schedule status {r.status!r} for user {r.user_id}") from None
        if not isinstance(r.day, date):
            raise UpstreamError(f"Malformed schedule day {r.day!r} for user {r.user_id}")
        entries[r.user_id].append(ScheduleEntry(day=r.day, status=status, shift_code=r.shift_code))
    return entries


def load_group_members(
    db: Session,
    group_id: int,
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> list[Member]:
    """
    Load a snapshot of a group's members with their schedules.

    Raises:
        UpstreamError: the database lookup failed or returned malformed rows
    """
    try:
        member_rows = load_member_rows(db, group_id)
        entries = load_schedule_entries(db, [user_id for user_id, _ in member_rows], start, end)
    except SQLAlchemyError as e:
        logger.error(f"Failed to load members for group {group_id}: {e}")
        raise UpstreamError("Failed to load group member information.") from e

    return [
        Member(id=user_id, name=username, entries=entries.get(user_id, []))
        for user_id, username in member_rows
    ]
