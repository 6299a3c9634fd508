# routers/admin/active_plans.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database import get_session
from dependencies import require_admin
from models import ActivePlanStatus, User
from schemas.active_plan import ActivePlanResponse
from services.active_plan_service import ActivePlanService

router = APIRouter(prefix="/api/admin/active-plans", tags=["admin"])


@router.get("", response_model=List[ActivePlanResponse], summary="List plan grants")
def list_active_plans(
     user_id: Optional[int] = Query(None, alias="userId"),
     grant_status: Optional[ActivePlanStatus] = Query(None, alias="status"),
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin)
):
     return ActivePlanService.list_active_plans(db, user_id=user_id, status=grant_status)


@router.put("/{active_plan_id}/activate", response_model=ActivePlanResponse, summary="Activate a pending grant")
def activate_active_plan(
     active_plan_id: int,
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin)
):
     grant = ActivePlanService.get_active_plan(db, active_plan_id)
     ActivePlanService.activate(db, grant)
     db.commit()
     return grant


@router.put("/{active_plan_id}/expire", response_model=ActivePlanResponse, summary="Expire an active grant")
def expire_active_plan(
     active_plan_id: int,
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin)
):
     grant = ActivePlanService.get_active_plan(db, active_plan_id)
     ActivePlanService.expire(db, grant)
     db.commit()
     return grant
