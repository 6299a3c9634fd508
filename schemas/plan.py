# schemas/plan.py
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import ConfigDict, Field

from models import RecordStatus
from schemas.common import CamelModel


class PlanCreate(CamelModel):
     """Schema for creating a catalog plan."""
     plan_name: str = Field(..., min_length=1, max_length=150)
     building_credit: int = Field(..., ge=0, description="Buildings a subscriber may create")
     user_credit: int = Field(..., ge=0, description="Doormen a subscriber may register")
     monthly_visits: int = Field(..., ge=0)
     price: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
     status: RecordStatus = Field(default=RecordStatus.ACTIVE)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "planName": "Basic",
                    "buildingCredit": 2,
                    "userCredit": 3,
                    "monthlyVisits": 500,
                    "price": 199.00,
               }
          }
     )


class PlanUpdate(CamelModel):
     plan_name: Optional[str] = Field(None, min_length=1, max_length=150)
     building_credit: Optional[int] = Field(None, ge=0)
     user_credit: Optional[int] = Field(None, ge=0)
     monthly_visits: Optional[int] = Field(None, ge=0)
     price: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
     status: Optional[RecordStatus] = None


class PlanResponse(CamelModel):
     id: int
     plan_name: str
     building_credit: int
     user_credit: int
     monthly_visits: int
     price: Decimal
     status: RecordStatus
     created_at: datetime
