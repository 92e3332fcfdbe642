from pydantic import BaseModel
from datetime import time
from typing import Optional


class WorkShift(BaseModel):
    shift_name: str
    shift_code: str
    start_time: Optional[time] = None
    end_time: Optional[time] = None


class WorkPatternUpdate(BaseModel):
    pattern_name: str
    shifts: list[WorkShift]


class WorkPatternResponse(BaseModel):
    pattern_name: Optional[str] = None
    shifts: list[WorkShift] = []
