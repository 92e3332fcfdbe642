from tripmate.db.database import Base

# Import models
from tripmate.db.models.users import Users
from tripmate.db.models.groups import Groups
from tripmate.db.models.group_members import GroupMembers
from tripmate.db.models.schedules import Schedules, ScheduleStatus
from tripmate.db.models.work_patterns import WorkPatterns

__all__ = [
    "Base",
    # Models
    "Users",
    "Groups",
    "GroupMembers",
    "Schedules",
    "WorkPatterns",
    # Enums
    "ScheduleStatus",
]
