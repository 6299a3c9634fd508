# routers/visits.py
"""
Visit API routes for the app surface.

Admins, building owners and doormen actively assigned to the building may
record and manage its visits.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_current_user
from models import User
from schemas.visit import VisitCreate, VisitResponse, VisitUpdate
from services.access_control import ensure_can_operate_building
from services.visit_service import VisitService

router = APIRouter(prefix="/api/app", tags=["visits"])


def _operable_visit(db: Session, visit_id: int, user: User):
     visit = VisitService.get_visit(db, visit_id)
     ensure_can_operate_building(db, user, visit.building)
     return visit


@router.post("/visits", response_model=VisitResponse, status_code=status.HTTP_201_CREATED, summary="Record a check-in")
def create_visit(
     body: VisitCreate,
     db: Session = Depends(get_session),
     user: User = Depends(get_current_user)
):
     """
     Record a visitor check-in at a building.

     - **building_id** / **visitor_id** must exist
     - (building, visitor, check-in time) must be unique
     """
     visit = VisitService.create_visit(db, user, body.model_dump())
     db.commit()
     return visit


@router.get("/visits", response_model=List[VisitResponse], summary="List visits of buildings I operate")
def list_visits(
     building_id: Optional[int] = Query(None),
     db: Session = Depends(get_session),
     user: User = Depends(get_current_user)
):
     return VisitService.list_visits(db, requester=user, building_id=building_id)


@router.get("/visits/{visit_id}", response_model=VisitResponse, summary="Get a visit")
def get_visit(
     visit_id: int,
     db: Session = Depends(get_session),
     user: User = Depends(get_current_user)
):
     return _operable_visit(db, visit_id, user)


@router.put("/visits/{visit_id}", response_model=VisitResponse, summary="Update a visit")
def update_visit(
     visit_id: int,
     body: VisitUpdate,
     db: Session = Depends(get_session),
     user: User = Depends(get_current_user)
):
     visit = _operable_visit(db, visit_id, user)
     VisitService.update_visit(db, visit, body.model_dump(exclude_unset=True))
     db.commit()
     return visit


@router.put("/visits/{visit_id}/complete", response_model=VisitResponse, summary="Check the visitor out")
def complete_visit(
     visit_id: int,
     db: Session = Depends(get_session),
     user: User = Depends(get_current_user)
):
     visit = _operable_visit(db, visit_id, user)
     VisitService.complete_visit(db, visit)
     db.commit()
     return visit


@router.put("/visits/{visit_id}/cancel", response_model=VisitResponse, summary="Cancel a visit")
def cancel_visit(
     visit_id: int,
     db: Session = Depends(get_session),
     user: User = Depends(get_current_user)
):
     visit = _operable_visit(db, visit_id, user)
     VisitService.cancel_visit(db, visit)
     db.commit()
     return visit
