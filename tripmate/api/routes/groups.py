from datetime import date, datetime, timezone
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tripmate.api.deps import get_db, get_current_user, require_group_member, require_group_creator
from tripmate.core.config import settings
from tripmate.db.models.groups import Groups
from tripmate.db.models.group_members import GroupMembers
from tripmate.db.models.schedules import Schedules
from tripmate.db.models.users import Users
from tripmate.schemas.groups import GroupCreate, GroupUpdate, GroupResponse
from tripmate.schemas.schedules import GroupScheduleResponse
from tripmate.services.planning.dates import to_calendar_day

router = APIRouter(prefix="/groups", tags=["groups"])


def _clean_name(name: str) -> str:
    name = name.strip()
    if not name:
        raise HTTPException(status_code=400, detail="Group name cannot be empty")
    return name


@router.post("", response_model=GroupResponse, status_code=status.HTTP_201_CREATED)
def create_group(
    payload: GroupCreate,
    db: Session = Depends(get_db),
    current_user: Users = Depends(get_current_user),
):
    """Create a group - the creator is added as its first member in the same transaction"""
    group = Groups(name=_clean_name(payload.name), created_by_user_id=current_user.id)
    try:
        db.add(group)
        db.flush()  # get id before adding the membership
        db.add(GroupMembers(group_id=group.id, user_id=current_user.id))
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create group: {str(e)}",
        )
    db.refresh(group)
    return group


@router.get("", response_model=List[GroupResponse])
def list_my_groups(
    db: Session = Depends(get_db),
    current_user: Users = Depends(get_current_user),
):
    """Groups the current user belongs to, oldest first"""
    return db.query(Groups).join(
        GroupMembers, GroupMembers.group_id == Groups.id
    ).filter(
        GroupMembers.user_id == current_user.id
    ).order_by(Groups.id).all()


@router.get("/{group_id}", response_model=GroupResponse)
def get_group(group: Groups = Depends(require_group_member)):
    return group


@router.put("/{group_id}", response_model=GroupResponse)
def update_group(
    payload: GroupUpdate,
    db: Session = Depends(get_db),
    group: Groups = Depends(require_group_creator),
):
    group.name = _clean_name(payload.name)
    db.commit()
    db.refresh(group)
    return group


@router.delete("/{group_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_group(
    db: Session = Depends(get_db),
    group: Groups = Depends(require_group_creator),
):
    db.query(GroupMembers).filter(GroupMembers.group_id == group.id).delete()
    db.delete(group)
    db.commit()


@router.get("/{group_id}/schedules", response_model=List[GroupScheduleResponse])
def list_group_schedules(
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    db: Session = Depends(get_db),
    group: Groups = Depends(require_group_member),
):
    """Every member's schedule entries for the shared calendar"""
    if start_date and end_date and end_date < start_date:
        raise HTTPException(status_code=400, detail="end_date must not be before start_date")

    query = db.query(Schedules, Users.username).join(
        GroupMembers, GroupMembers.user_id == Schedules.user_id
    ).join(
        Users, Users.id == Schedules.user_id
    ).filter(GroupMembers.group_id == group.id)

    if start_date:
        query = query.filter(Schedules.day >= start_date)
    if end_date:
        query = query.filter(Schedules.day <= end_date)

    rows = query.order_by(Schedules.day, GroupMembers.id).all()
    return [
        GroupScheduleResponse(
            day=s.day,
            status=s.status,
            shift_code=s.shift_code,
            user_id=s.user_id,
            username=username,
        )
        for s, username in rows
    ]


@router.get("/{group_id}/schedules/today", response_model=List[GroupScheduleResponse])
def list_group_schedules_today(
    db: Session = Depends(get_db),
    group: Groups = Depends(require_group_member),
):
    """Members' entries for today's calendar day in the configured display zone"""
    today = to_calendar_day(datetime.now(timezone.utc), settings.DISPLAY_TIMEZONE)
    return list_group_schedules(start_date=today, end_date=today, db=db, group=group)
