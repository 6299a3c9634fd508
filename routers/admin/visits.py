# routers/admin/visits.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_language, require_admin
from models import User
from schemas.common import MessageResponse
from schemas.visit import AdminVisitUpdate, VisitCreate, VisitResponse
from services.visit_service import VisitService
from utils.messages import get_message

router = APIRouter(prefix="/api/admin/visits", tags=["admin"])


@router.get("", response_model=List[VisitResponse], summary="List all visits")
def list_visits(
     building_id: Optional[int] = Query(None),
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin)
):
     return VisitService.list_visits(db, building_id=building_id)


@router.post("", response_model=VisitResponse, status_code=status.HTTP_201_CREATED, summary="Record a visit")
def create_visit(
     body: VisitCreate,
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin)
):
     visit = VisitService.create_visit(db, admin, body.model_dump())
     db.commit()
     return visit


@router.get("/{visit_id}", response_model=VisitResponse, summary="Get any visit")
def get_visit(
     visit_id: int,
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin)
):
     return VisitService.get_visit(db, visit_id)


@router.put("/{visit_id}", response_model=VisitResponse, summary="Update any visit")
def update_visit(
     visit_id: int,
     body: AdminVisitUpdate,
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin)
):
     visit = VisitService.get_visit(db, visit_id)
     VisitService.update_visit(db, visit, body.model_dump(exclude_unset=True))
     db.commit()
     return visit


@router.delete("/{visit_id}", response_model=MessageResponse, summary="Delete a visit")
def delete_visit(
     visit_id: int,
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin),
     lang: Optional[str] = Depends(get_language)
):
     visit = VisitService.get_visit(db, visit_id)
     VisitService.delete_visit(db, visit)
     db.commit()
     return MessageResponse(message=get_message("visit_deleted", lang))
