from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class UserUpdate(BaseModel):
    username: str


class UserSummary(BaseModel):
    id: int
    username: Optional[str]
    email: str

    class Config:
        from_attributes = True


class UserResponse(UserSummary):
    is_active: bool
    created_at: datetime
    updated_at: datetime
