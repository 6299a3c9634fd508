# routers/admin/users.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_language, require_admin
from models import RecordStatus, User, UserRole
from schemas.common import MessageResponse
from schemas.user import AdminUserCreate, AdminUserUpdate, UserResponse
from services.user_service import UserService
from utils.messages import get_message

router = APIRouter(prefix="/api/admin/users", tags=["admin"])


@router.get("", response_model=List[UserResponse], summary="List users")
def list_users(
     role: Optional[UserRole] = Query(None),
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin)
):
     return UserService.list_users(db, role=role)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED, summary="Create a user")
def create_user(
     body: AdminUserCreate,
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin)
):
     user = UserService.create_user(db, body.model_dump())
     db.commit()
     return user


@router.get("/{user_id}", response_model=UserResponse, summary="Get a user")
def get_user(
     user_id: int,
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin)
):
     return UserService.get_user(db, user_id)


@router.put("/{user_id}", response_model=UserResponse, summary="Update a user")
def update_user(
     user_id: int,
     body: AdminUserUpdate,
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin)
):
     user = UserService.get_user(db, user_id)
     UserService.update_user(db, user, body.model_dump(exclude_unset=True))
     db.commit()
     return user


@router.delete("/{user_id}", response_model=MessageResponse, summary="Delete a user")
def delete_user(
     user_id: int,
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin),
     lang: Optional[str] = Depends(get_language)
):
     user = UserService.get_user(db, user_id)
     UserService.delete_user(db, user, admin)
     db.commit()
     return MessageResponse(message=get_message("user_deleted", lang))


@router.put("/{user_id}/activate", response_model=MessageResponse, summary="Activate a user")
def activate_user(
     user_id: int,
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin),
     lang: Optional[str] = Depends(get_language)
):
     user = UserService.get_user(db, user_id)
     UserService.set_status(db, user, RecordStatus.ACTIVE)
     db.commit()
     return MessageResponse(message=get_message("user_activated", lang))


@router.put("/{user_id}/inactivate", response_model=MessageResponse, summary="Inactivate a user")
def inactivate_user(
     user_id: int,
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin),
     lang: Optional[str] = Depends(get_language)
):
     user = UserService.get_user(db, user_id)
     UserService.set_status(db, user, RecordStatus.INACTIVE)
     db.commit()
     return MessageResponse(message=get_message("user_inactivated", lang))
