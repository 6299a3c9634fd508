# schemas/visitor.py
"""
Pydantic schemas for Visitor API request/response validation.
"""
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from models import Gender, RecordStatus


class VisitorCreate(BaseModel):
     """Schema for registering a visitor."""
     fullname: str = Field(..., min_length=1, max_length=200)
     id_number: str = Field(..., min_length=1, max_length=100, description="ID document number (unique)")
     birthday: date
     gender: Gender
     region: str = Field(..., min_length=1, max_length=100)
     expire_date: date = Field(..., description="ID document expiry date")
     phone: str = Field(..., min_length=3, max_length=50)
     status: RecordStatus = Field(default=RecordStatus.ACTIVE)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "fullname": "Omar Saleh",
                    "id_number": "2234567890",
                    "birthday": "1990-05-14",
                    "gender": "male",
                    "region": "Riyadh",
                    "expire_date": "2030-01-01",
                    "phone": "+966511111111",
               }
          }
     )


class VisitorUpdate(BaseModel):
     fullname: Optional[str] = Field(None, min_length=1, max_length=200)
     id_number: Optional[str] = Field(None, min_length=1, max_length=100)
     birthday: Optional[date] = None
     gender: Optional[Gender] = None
     region: Optional[str] = Field(None, min_length=1, max_length=100)
     expire_date: Optional[date] = None
     phone: Optional[str] = Field(None, min_length=3, max_length=50)


class VisitorResponse(BaseModel):
     id: int
     fullname: str
     id_number: str
     birthday: date
     gender: Gender
     region: str
     expire_date: date
     phone: str
     status: RecordStatus
     created_at: datetime

     model_config = ConfigDict(from_attributes=True)
