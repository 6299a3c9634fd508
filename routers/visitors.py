# routers/visitors.py
from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_language, require_roles
from models import User, UserRole
from schemas.common import MessageResponse
from schemas.visitor import VisitorCreate, VisitorResponse, VisitorUpdate
from services.visitor_service import VisitorService
from utils.messages import get_message

router = APIRouter(prefix="/api/app", tags=["visitors"])

front_desk = require_roles(UserRole.ADMIN, UserRole.DOORMAN)


@router.post("/visitors", response_model=VisitorResponse, status_code=status.HTTP_201_CREATED, summary="Register a visitor")
def create_visitor(
     body: VisitorCreate,
     db: Session = Depends(get_session),
     user: User = Depends(front_desk)
):
     visitor = VisitorService.create_visitor(db, body.model_dump())
     db.commit()
     return visitor


@router.get("/visitors", response_model=List[VisitorResponse], summary="List visitors")
def list_visitors(
     db: Session = Depends(get_session),
     user: User = Depends(front_desk)
):
     return VisitorService.list_visitors(db)


@router.get("/visitors/{visitor_id}", response_model=VisitorResponse, summary="Get a visitor")
def get_visitor(
     visitor_id: int,
     db: Session = Depends(get_session),
     user: User = Depends(front_desk)
):
     return VisitorService.get_visitor(db, visitor_id)


@router.put("/visitors/{visitor_id}", response_model=VisitorResponse, summary="Update a visitor")
def update_visitor(
     visitor_id: int,
     body: VisitorUpdate,
     db: Session = Depends(get_session),
     user: User = Depends(front_desk)
):
     visitor = VisitorService.get_visitor(db, visitor_id)
     VisitorService.update_visitor(db, visitor, body.model_dump(exclude_unset=True))
     db.commit()
     return visitor


@router.delete("/visitors/{visitor_id}", response_model=MessageResponse, summary="Delete a visitor")
def delete_visitor(
     visitor_id: int,
     db: Session = Depends(get_session),
     user: User = Depends(front_desk),
     lang: Optional[str] = Depends(get_language)
):
     visitor = VisitorService.get_visitor(db, visitor_id)
     VisitorService.delete_visitor(db, visitor)
     db.commit()
     return MessageResponse(message=get_message("visitor_deleted", lang))
