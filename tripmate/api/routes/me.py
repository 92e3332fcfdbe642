# tripmate/api/routes/me.py

from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from tripmate.api.deps import get_db, get_current_user
from tripmate.db.models.users import Users
from tripmate.db.models.schedules import Schedules, ScheduleStatus
from tripmate.db.models.work_patterns import WorkPatterns
from tripmate.schemas.schedules import ScheduleUpsert, ScheduleBulkUpsert, ScheduleResponse
from tripmate.schemas.work_patterns import WorkPatternUpdate, WorkPatternResponse, WorkShift

router = APIRouter(prefix="/me", tags=["me"])


def _validate_entry(entry: ScheduleUpsert) -> None:
    if entry.shift_code and entry.status != ScheduleStatus.WORKING:
        raise HTTPException(status_code=400, detail=f"{entry.day}: shift_code is only allowed on WORKING days")


def _upsert_schedule(db: Session, user_id: int, entry: ScheduleUpsert) -> Schedules:
    schedule = db.query(Schedules).filter(
        Schedules.user_id == user_id,
        Schedules.day == entry.day,
    ).first()
    if schedule:
        schedule.status = entry.status
        schedule.shift_code = entry.shift_code
    else:
        schedule = Schedules(user_id=user_id, **entry.model_dump())
        db.add(schedule)
    return schedule


@router.get("/schedules", response_model=List[ScheduleResponse])
def get_my_schedules(
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    db: Session = Depends(get_db),
    current_user: Users = Depends(get_current_user),
):
    """Get current user's schedule entries"""
    query = db.query(Schedules).filter(Schedules.user_id == current_user.id)

    if start_date:
        query = query.filter(Schedules.day >= start_date)
    if end_date:
        query = query.filter(Schedules.day <= end_date)

    return query.order_by(Schedules.day).all()


@router.put("/schedules", response_model=ScheduleResponse)
def upsert_my_schedule(
    payload: ScheduleUpsert,
    db: Session = Depends(get_db),
    current_user: Users = Depends(get_current_user),
):
    """Set the status for one day - replaces any existing entry for that day"""
    _validate_entry(payload)
    schedule = _upsert_schedule(db, current_user.id, payload)
    db.commit()
    db.refresh(schedule)
    return schedule


@router.post("/schedules/bulk", response_model=List[ScheduleResponse])
def bulk_upsert_my_schedules(
    payload: ScheduleBulkUpsert,
    db: Session = Depends(get_db),
    current_user: Users = Depends(get_current_user),
):
    """Upsert many days at once. If a day appears twice the last entry wins."""
    by_day: dict[date, ScheduleUpsert] = {}
    for entry in payload.entries:
        _validate_entry(entry)
        by_day[entry.day] = entry

    schedules = [_upsert_schedule(db, current_user.id, entry) for entry in by_day.values()]
    db.commit()
    for schedule in schedules:
        db.refresh(schedule)
    return sorted(schedules, key=lambda s: s.day)


@router.delete("/schedules/{day}", status_code=status.HTTP_204_NO_CONTENT)
def delete_my_schedule(
    day: date,
    db: Session = Depends(get_db),
    current_user: Users = Depends(get_current_user),
):
    schedule = db.query(Schedules).filter(
        Schedules.user_id == current_user.id,
        Schedules.day == day,
    ).first()
    if not schedule:
        raise HTTPException(status_code=404, detail="Schedule entry not found")

    db.delete(schedule)
    db.commit()


@router.get("/work-pattern", response_model=WorkPatternResponse)
def get_my_work_pattern(
    db: Session = Depends(get_db),
    current_user: Users = Depends(get_current_user),
):
    """Get current user's shift definitions"""
    rows = db.query(WorkPatterns).filter(
        WorkPatterns.user_id == current_user.id
    ).order_by(WorkPatterns.id).all()

    if not rows:
        return WorkPatternResponse()

    return WorkPatternResponse(
        pattern_name=rows[0].pattern_name,
        shifts=[
            WorkShift(shift_name=r.shift_name, shift_code=r.shift_code, start_time=r.start_time, end_time=r.end_time)
            for r in rows
        ],
    )


@router.put("/work-pattern", response_model=WorkPatternResponse)
def replace_my_work_pattern(
    payload: WorkPatternUpdate,
    db: Session = Depends(get_db),
    current_user: Users = Depends(get_current_user),
):
    """Replace all of the current user's shift definitions"""
    if not payload.pattern_name.strip():
        raise HTTPException(status_code=400, detail="Pattern name cannot be empty")

    codes = [s.shift_code.strip() for s in payload.shifts]
    if any(not code for code in codes):
        raise HTTPException(status_code=400, detail="Every shift needs a code")
    if len(set(codes)) != len(codes):
        raise HTTPException(status_code=400, detail="Shift codes must be unique")

    db.query(WorkPatterns).filter(WorkPatterns.user_id == current_user.id).delete()
    for shift, code in zip(payload.shifts, codes):
        db.add(WorkPatterns(
            user_id=current_user.id,
            pattern_name=payload.pattern_name.strip(),
            shift_name=shift.shift_name,
            shift_code=code,
            start_time=shift.start_time,
            end_time=shift.end_time,
        ))
    db.commit()

    return get_my_work_pattern(db=db, current_user=current_user)
