# routers/admin/plans.py
from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_language, require_admin
from models import RecordStatus, User
from schemas.common import MessageResponse
from schemas.plan import PlanCreate, PlanResponse, PlanUpdate
from services.plan_service import PlanService
from utils.messages import get_message

router = APIRouter(prefix="/api/admin/plans", tags=["admin"])


@router.get("", response_model=List[PlanResponse], summary="List all plans")
def list_plans(
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin)
):
     return PlanService.list_plans(db, active_only=False)


@router.post("", response_model=PlanResponse, status_code=status.HTTP_201_CREATED, summary="Create a plan")
def create_plan(
     body: PlanCreate,
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin)
):
     plan = PlanService.create_plan(db, body.model_dump())
     db.commit()
     return plan


@router.get("/{plan_id}", response_model=PlanResponse, summary="Get a plan")
def get_plan(
     plan_id: int,
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin)
):
     return PlanService.get_plan(db, plan_id)


@router.put("/{plan_id}", response_model=PlanResponse, summary="Update a plan")
def update_plan(
     plan_id: int,
     body: PlanUpdate,
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin)
):
     """
     Grants already issued keep the quotas they were created with.
     """
     plan = PlanService.get_plan(db, plan_id)
     PlanService.update_plan(db, plan, body.model_dump(exclude_unset=True))
     db.commit()
     return plan


@router.delete("/{plan_id}", response_model=MessageResponse, summary="Delete an unused plan")
def delete_plan(
     plan_id: int,
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin),
     lang: Optional[str] = Depends(get_language)
):
     plan = PlanService.get_plan(db, plan_id)
     PlanService.delete_plan(db, plan)
     db.commit()
     return MessageResponse(message=get_message("plan_deleted", lang))


@router.put("/{plan_id}/activate", response_model=MessageResponse, summary="Activate a plan")
def activate_plan(
     plan_id: int,
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin),
     lang: Optional[str] = Depends(get_language)
):
     plan = PlanService.get_plan(db, plan_id)
     PlanService.set_status(db, plan, RecordStatus.ACTIVE)
     db.commit()
     return MessageResponse(message=get_message("plan_activated", lang))


@router.put("/{plan_id}/inactivate", response_model=MessageResponse, summary="Inactivate a plan")
def inactivate_plan(
     plan_id: int,
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin),
     lang: Optional[str] = Depends(get_language)
):
     plan = PlanService.get_plan(db, plan_id)
     PlanService.set_status(db, plan, RecordStatus.INACTIVE)
     db.commit()
     return MessageResponse(message=get_message("plan_inactivated", lang))
