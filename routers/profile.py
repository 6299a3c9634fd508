# routers/profile.py
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_current_user, get_language
from models import User
from schemas.common import MessageResponse
from schemas.user import PasswordChange, ProfileUpdate, UserResponse
from services.user_service import UserService
from utils.messages import get_message

router = APIRouter(prefix="/api", tags=["profile"])


@router.get("/profile", response_model=UserResponse, summary="Current user's profile")
def get_profile(user: User = Depends(get_current_user)):
     return user


@router.put("/profile", response_model=UserResponse, summary="Update the current user's profile")
def update_profile(
     body: ProfileUpdate,
     db: Session = Depends(get_session),
     user: User = Depends(get_current_user)
):
     UserService.update_profile(db, user, body.model_dump(exclude_unset=True))
     db.commit()
     return user


@router.put("/profile/change-password", response_model=MessageResponse, summary="Change password")
def change_password(
     body: PasswordChange,
     db: Session = Depends(get_session),
     user: User = Depends(get_current_user),
     lang: Optional[str] = Depends(get_language)
):
     UserService.change_password(db, user, body.current_password, body.new_password, body.confirm_password)
     db.commit()
     return MessageResponse(message=get_message("password_changed", lang))
