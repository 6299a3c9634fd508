# routers/users.py
"""
Account routes: registration, email confirmation and login.
"""
from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_language
from schemas.user import LoginResponse, RegisterResponse, UserLogin, UserRegister, UserResponse
from schemas.common import MessageResponse
from services.user_service import UserService
from utils.messages import get_message

router = APIRouter(prefix="/api/user", tags=["users"])


@router.post(
     "/register",
     response_model=RegisterResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Register a new account"
)
def register(
     body: UserRegister,
     db: Session = Depends(get_session),
     lang: Optional[str] = Depends(get_language)
):
     """
     Create an inactive account and email a six-digit confirmation code.
     """
     user, _ = UserService.register_user(db, body.model_dump())
     db.commit()
     return RegisterResponse(message=get_message("registration_success", lang), user=UserResponse.model_validate(user))


@router.get("/confirm/{token}", response_model=MessageResponse, summary="Confirm email address")
def confirm_email(
     token: str,
     db: Session = Depends(get_session),
     lang: Optional[str] = Depends(get_language)
):
     UserService.confirm_email(db, token)
     db.commit()
     return MessageResponse(message=get_message("email_confirmed", lang))


@router.post("/login", response_model=LoginResponse, summary="Log in and receive an access token")
def login(
     body: UserLogin,
     db: Session = Depends(get_session),
     lang: Optional[str] = Depends(get_language)
):
     user, token = UserService.authenticate(db, body.email, body.password)
     return LoginResponse(
          message=get_message("login_success", lang),
          token=token,
          user=UserResponse.model_validate(user),
     )
