from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from tripmate.api.deps import get_db, get_current_user
from tripmate.db.models.users import Users
from tripmate.schemas.users import UserUpdate, UserResponse, UserSummary

router = APIRouter(prefix="/users", tags=["users"])

MAX_USERNAME_LENGTH = 50


@router.get("/me", response_model=UserResponse)
def get_me(current_user: Users = Depends(get_current_user)):
    return current_user


@router.put("/me", response_model=UserResponse)
def update_me(
    payload: UserUpdate,
    db: Session = Depends(get_db),
    current_user: Users = Depends(get_current_user),
):
    """Set or change the display name shown to group members"""
    username = payload.username.strip()
    if not username:
        raise HTTPException(status_code=400, detail="Username cannot be empty")
    if len(username) > MAX_USERNAME_LENGTH:
        raise HTTPException(status_code=400, detail=f"Username must be at most {MAX_USERNAME_LENGTH} characters")

    taken = db.query(Users).filter(Users.username == username, Users.id != current_user.id).first()
    if taken:
        raise HTTPException(status_code=400, detail="Username already taken")

    current_user.username = username
    db.commit()
    db.refresh(current_user)
    return current_user


@router.get("", response_model=List[UserSummary])
def list_users(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    current_user: Users = Depends(get_current_user),
):
    """All active profiles, used to pick someone to invite"""
    return db.query(Users).filter(Users.is_active == True).order_by(Users.id).offset(skip).limit(limit).all()
