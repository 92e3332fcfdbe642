from pydantic import BaseModel
from datetime import date
from typing import Optional


class BestDatesRequest(BaseModel):
    # Dates stay strings so the planner reports malformed values itself
    duration: int
    search_start: Optional[str] = None
    search_end: Optional[str] = None
    assume_unspecified_working: Optional[bool] = None


class RequiredVacationResponse(BaseModel):
    member_id: int
    member_name: str
    dates: list[date]


class BestDateOptionResponse(BaseModel):
    start_date: date
    end_date: date
    vacation_days: int
    required_vacations: list[RequiredVacationResponse]
    calendar_url: Optional[str] = None
