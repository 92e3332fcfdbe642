from typing import Generator, Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from tripmate.db.database import SessionLocal
from tripmate.core.security import decode_access_token
from tripmate.db.models.users import Users
from tripmate.db.models.groups import Groups
from tripmate.db.models.group_members import GroupMembers

security = HTTPBearer()


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db),
) -> Users:
    token_data = decode_access_token(credentials.credentials)
    if token_data is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

    user = db.query(Users).filter(Users.id == token_data.user_id).first()
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")

    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Account disabled")

    return user


def get_membership(db: Session, group_id: int, user_id: int) -> Optional[GroupMembers]:
    return db.query(GroupMembers).filter(
        GroupMembers.group_id == group_id,
        GroupMembers.user_id == user_id,
    ).first()


def is_group_member(db: Session, group_id: int, user: Users) -> bool:
    return get_membership(db, group_id, user.id) is not None


def get_group_or_404(db: Session, group_id: int) -> Groups:
    group = db.query(Groups).filter(Groups.id == group_id).first()
    if not group:
        raise HTTPException(status_code=404, detail="Group not found")
    return group


class GroupAccessChecker:
    """Dependency class for checking group access from path parameter"""
    def __init__(self, require_creator: bool = False):
        self.require_creator = require_creator

    def __call__(
        self,
        group_id: int,
        db: Session = Depends(get_db),
        current_user: Users = Depends(get_current_user),
    ) -> Groups:
        group = get_group_or_404(db, group_id)

        if self.require_creator:
            if group.created_by_user_id != current_user.id:
                raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Only the group creator can do this")
            return group

        if not is_group_member(db, group_id, current_user):
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not a member of this group")

        return group


# Instances of GroupAccessChecker for reuse
require_group_member = GroupAccessChecker(require_creator=False)
require_group_creator = GroupAccessChecker(require_creator=True)
