from sqlalchemy import Integer, DateTime, ForeignKey, UniqueConstraint, func
from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column
from tripmate.db.database import Base

class GroupMembers(Base):
    __tablename__ = "group_members"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    group_id: Mapped[int] = mapped_column(Integer, ForeignKey("groups.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    joined_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        UniqueConstraint('group_id', 'user_id'),
    )
