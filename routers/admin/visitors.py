# routers/admin/visitors.py
from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_language, require_admin
from models import RecordStatus, User
from schemas.common import MessageResponse
from schemas.visitor import VisitorCreate, VisitorResponse, VisitorUpdate
from services.visitor_service import VisitorService
from utils.messages import get_message

router = APIRouter(prefix="/api/admin/visitors", tags=["admin"])


@router.get("", response_model=List[VisitorResponse], summary="List visitors")
def list_visitors(
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin)
):
     return VisitorService.list_visitors(db)


@router.post("", response_model=VisitorResponse, status_code=status.HTTP_201_CREATED, summary="Create a visitor")
def create_visitor(
     body: VisitorCreate,
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin)
):
     visitor = VisitorService.create_visitor(db, body.model_dump())
     db.commit()
     return visitor


@router.get("/{visitor_id}", response_model=VisitorResponse, summary="Get a visitor")
def get_visitor(
     visitor_id: int,
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin)
):
     return VisitorService.get_visitor(db, visitor_id)


@router.put("/{visitor_id}", response_model=VisitorResponse, summary="Update a visitor")
def update_visitor(
     visitor_id: int,
     body: VisitorUpdate,
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin)
):
     visitor = VisitorService.get_visitor(db, visitor_id)
     VisitorService.update_visitor(db, visitor, body.model_dump(exclude_unset=True))
     db.commit()
     return visitor


@router.delete("/{visitor_id}", response_model=MessageResponse, summary="Delete a visitor")
def delete_visitor(
     visitor_id: int,
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin),
     lang: Optional[str] = Depends(get_language)
):
     visitor = VisitorService.get_visitor(db, visitor_id)
     VisitorService.delete_visitor(db, visitor)
     db.commit()
     return MessageResponse(message=get_message("visitor_deleted", lang))


@router.put("/{visitor_id}/activate", response_model=MessageResponse, summary="Activate a visitor")
def activate_visitor(
     visitor_id: int,
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin),
     lang: Optional[str] = Depends(get_language)
):
     visitor = VisitorService.get_visitor(db, visitor_id)
     VisitorService.set_status(db, visitor, RecordStatus.ACTIVE)
     db.commit()
     return MessageResponse(message=get_message("visitor_activated", lang))


@router.put("/{visitor_id}/inactivate", response_model=MessageResponse, summary="Inactivate a visitor")
def inactivate_visitor(
     visitor_id: int,
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin),
     lang: Optional[str] = Depends(get_language)
):
     visitor = VisitorService.get_visitor(db, visitor_id)
     VisitorService.set_status(db, visitor, RecordStatus.INACTIVE)
     db.commit()
     return MessageResponse(message=get_message("visitor_inactivated", lang))
