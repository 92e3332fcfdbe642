from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from tripmate.api.deps import get_db, get_current_user, get_membership, require_group_member, get_group_or_404
from tripmate.db.models.groups import Groups
from tripmate.db.models.group_members import GroupMembers
from tripmate.db.models.users import Users
from tripmate.schemas.group_members import GroupMemberCreate, GroupMemberResponse

router = APIRouter(prefix="/groups/{group_id}/members", tags=["group-members"])


def _to_response(membership: GroupMembers, username) -> GroupMemberResponse:
    return GroupMemberResponse(
        id=membership.id,
        group_id=membership.group_id,
        user_id=membership.user_id,
        username=username,
        joined_at=membership.joined_at,
    )


@router.get("", response_model=List[GroupMemberResponse])
def list_members(
    db: Session = Depends(get_db),
    group: Groups = Depends(require_group_member),
):
    rows = db.query(GroupMembers, Users.username).join(
        Users, Users.id == GroupMembers.user_id
    ).filter(
        GroupMembers.group_id == group.id
    ).order_by(GroupMembers.id).all()
    return [_to_response(m, username) for m, username in rows]


@router.post("", response_model=GroupMemberResponse, status_code=status.HTTP_201_CREATED)
def invite_member(
    payload: GroupMemberCreate,
    db: Session = Depends(get_db),
    group: Groups = Depends(require_group_member),
):
    """Invite a user - any member of the group can invite"""
    invitee = db.query(Users).filter(Users.id == payload.user_id).first()
    if not invitee or not invitee.is_active:
        raise HTTPException(status_code=404, detail="User not found")

    if get_membership(db, group.id, invitee.id):
        raise HTTPException(status_code=400, detail="User is already a member of this group")

    membership = GroupMembers(group_id=group.id, user_id=invitee.id)
    db.add(membership)
    db.commit()
    db.refresh(membership)
    return _to_response(membership, invitee.username)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_member(
    group_id: int,
    user_id: int,
    db: Session = Depends(get_db),
    current_user: Users = Depends(get_current_user),
):
    """Leave a group (self) or remove someone (group creator only)"""
    group = get_group_or_404(db, group_id)

    is_self = user_id == current_user.id
    is_creator = group.created_by_user_id == current_user.id
    if not is_self and not is_creator:
        raise HTTPException(status_code=403, detail="Only the group creator can remove other members")

    membership = get_membership(db, group_id, user_id)
    if not membership:
        raise HTTPException(status_code=404, detail="Membership not found")

    db.delete(membership)
    db.commit()
