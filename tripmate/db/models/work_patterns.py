from typing import Optional
from datetime import datetime, time
from sqlalchemy import DateTime, ForeignKey, Integer, String, Time, func
from sqlalchemy.orm import Mapped, mapped_column

from tripmate.db.database import Base


class WorkPatterns(Base):
    """One named shift in a user's work pattern, e.g. code "A" = 06:00-14:00."""
    __tablename__ = "work_patterns"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    pattern_name: Mapped[str] = mapped_column(String(100), nullable=False)
    shift_name: Mapped[str] = mapped_column(String(100), nullable=False)
    shift_code: Mapped[str] = mapped_column(String(10), nullable=False)
    start_time: Mapped[Optional[time]] = mapped_column(Time, nullable=True)
    end_time: Mapped[Optional[time]] = mapped_column(Time, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
