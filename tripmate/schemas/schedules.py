from pydantic import BaseModel
from datetime import date, datetime
from typing import Optional
from tripmate.db.models.schedules import ScheduleStatus


class ScheduleBase(BaseModel):
    day: date
    status: ScheduleStatus
    shift_code: Optional[str] = None


class ScheduleUpsert(ScheduleBase):
    pass


class ScheduleBulkUpsert(BaseModel):
    entries: list[ScheduleUpsert]


class ScheduleResponse(ScheduleBase):
    id: int
    user_id: int
    updated_at: datetime

    class Config:
        from_attributes = True


class GroupScheduleResponse(ScheduleBase):
    """A schedule entry as seen on the shared group calendar"""
    user_id: int
    username: Optional[str] = None
