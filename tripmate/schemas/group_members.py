from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class GroupMemberCreate(BaseModel):
    user_id: int


class GroupMemberResponse(BaseModel):
    id: int
    group_id: int
    user_id: int
    username: Optional[str] = None
    joined_at: datetime

    class Config:
        from_attributes = True
