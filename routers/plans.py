# routers/plans.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database import get_session
from schemas.plan import PlanResponse
from services.plan_service import PlanService

router = APIRouter(prefix="/api", tags=["plans"])


@router.get("/plans", response_model=List[PlanResponse], summary="List subscribable plans")
def list_plans(db: Session = Depends(get_session)):
     return PlanService.list_plans(db, active_only=True)


@router.get("/plans/{plan_id}", response_model=PlanResponse, summary="Get a subscribable plan")
def get_plan(plan_id: int, db: Session = Depends(get_session)):
     return PlanService.get_plan(db, plan_id, active_only=True)
