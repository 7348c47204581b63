"""
Users router - directory of display labels and per-user vote lookups
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import List

from app.database import get_db
from app.models.user import User
from app.schemas.user import UserCreate, UserResponse
from app.services import report_store

router = APIRouter()

def email_conflict() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail="Email already registered to another user"
    )

@router.post("/", response_model=UserResponse)
async def register_user(
    user: UserCreate,
    db: Session = Depends(get_db)
):
    """Register a user, or update their email if already known"""
    if user.email is not None:
        taken = db.query(User).filter(
            User.email == user.email,
            User.id != user.user_id
        ).first()
        if taken:
            raise email_conflict()

    db_user = db.get(User, user.user_id)
    if db_user is None:
        db_user = User(id=user.user_id, email=user.email)
        db.add(db_user)
    else:
        db_user.email = user.email
    try:
        db.commit()
    except IntegrityError:
        # Another registration claimed the email between check and commit
        db.rollback()
        raise email_conflict()
    db.refresh(db_user)

    return UserResponse(user_id=db_user.id, email=db_user.email)

@router.get("/", response_model=List[UserResponse])
async def list_users(db: Session = Depends(get_db)):
    """List the user directory"""
    users = db.query(User).order_by(User.id).all()
    return [UserResponse(user_id=u.id, email=u.email) for u in users]

@router.get("/{user_id}/votes", response_model=List[str])
async def get_user_votes(user_id: str, db: Session = Depends(get_db)):
    """Report IDs this user has already upvoted"""
    return sorted(report_store.get_user_votes(db, user_id))
