# schemas/active_plan.py
from datetime import datetime
from typing import Optional

from pydantic import Field

from models import ActivePlanStatus
from schemas.common import CamelModel
from schemas.plan import PlanResponse


class ActivePlanCreate(CamelModel):
     plan_id: int = Field(..., gt=0, description="Catalog plan to subscribe to (must be active)")


class ActivePlanResponse(CamelModel):
     """A plan grant with the quota snapshot taken when it was issued."""
     id: int
     user_id: int
     plan_id: int
     status: ActivePlanStatus
     date: datetime
     building_credit: Optional[int] = None
     user_credit: Optional[int] = None
     monthly_visits: Optional[int] = None
     plan: Optional[PlanResponse] = None
