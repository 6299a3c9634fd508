# routers/active_plans.py
"""
Plan grant routes for the current user, plus the entitlement summary.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_current_user
from models import User
from schemas.active_plan import ActivePlanCreate, ActivePlanResponse
from schemas.entitlement import EntitlementResponse
from services.access_control import ensure_owner, ensure_owner_or_admin
from services.active_plan_service import ActivePlanService
from services.entitlement_service import resolve_entitlement

router = APIRouter(prefix="/api", tags=["active-plans"])


@router.post(
     "/active-plans",
     response_model=ActivePlanResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Subscribe to a plan"
)
def subscribe(
     body: ActivePlanCreate,
     db: Session = Depends(get_session),
     user: User = Depends(get_current_user)
):
     """
     Create a pending grant. It starts counting once an admin activates it.
     """
     grant = ActivePlanService.subscribe(db, user, body.plan_id)
     db.commit()
     return grant


@router.get("/active-plans", response_model=List[ActivePlanResponse], summary="List my plan grants")
def list_my_active_plans(
     db: Session = Depends(get_session),
     user: User = Depends(get_current_user)
):
     return ActivePlanService.list_active_plans(db, user_id=user.id)


@router.get("/active-plans/{active_plan_id}", response_model=ActivePlanResponse, summary="Get a plan grant")
def get_active_plan(
     active_plan_id: int,
     db: Session = Depends(get_session),
     user: User = Depends(get_current_user)
):
     grant = ActivePlanService.get_active_plan(db, active_plan_id)
     ensure_owner_or_admin(grant, user)
     return grant


@router.put("/active-plans/{active_plan_id}/cancel", response_model=ActivePlanResponse, summary="Cancel a plan grant")
def cancel_active_plan(
     active_plan_id: int,
     db: Session = Depends(get_session),
     user: User = Depends(get_current_user)
):
     grant = ActivePlanService.get_active_plan(db, active_plan_id)
     ensure_owner(grant, user)
     ActivePlanService.cancel(db, grant)
     db.commit()
     return grant


@router.get("/entitlement", response_model=EntitlementResponse, summary="Current quotas and remaining credits")
def get_entitlement(
     db: Session = Depends(get_session),
     user: User = Depends(get_current_user)
):
     return EntitlementResponse.from_entitlement(resolve_entitlement(db, user.id))
