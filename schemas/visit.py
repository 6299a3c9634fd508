# schemas/visit.py
"""
Pydantic schemas for Visit API request/response validation.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from models import VisitStatus


class VisitCreate(BaseModel):
     """Schema for recording a check-in."""
     building_id: int = Field(..., gt=0)
     visitor_id: int = Field(..., gt=0)
     purpose: str = Field(..., min_length=1, max_length=255)
     unit: str = Field(..., min_length=1, max_length=50, description="Unit or apartment visited")
     check_in_date: Optional[datetime] = Field(None, description="Defaults to now")

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "building_id": 1,
                    "visitor_id": 3,
                    "purpose": "Delivery",
                    "unit": "12B",
               }
          }
     )


class VisitUpdate(BaseModel):
     purpose: Optional[str] = Field(None, min_length=1, max_length=255)
     unit: Optional[str] = Field(None, min_length=1, max_length=50)
     check_out_date: Optional[datetime] = None
     status: Optional[VisitStatus] = None


class AdminVisitUpdate(VisitUpdate):
     check_in_date: Optional[datetime] = None


class VisitResponse(BaseModel):
     id: int
     building_id: int
     user_id: int
     visitor_id: int
     purpose: str
     unit: str
     check_in_date: datetime
     check_out_date: Optional[datetime] = None
     status: VisitStatus
     created_at: datetime

     model_config = ConfigDict(from_attributes=True)
