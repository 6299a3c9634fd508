# schemas/building.py
"""
Pydantic schemas for Building API request/response validation.
"""
from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from models import BuildingType, RecordStatus
from schemas.common import CamelModel


class BuildingCreate(CamelModel):
     """Schema for creating a building. Consumes one building credit."""
     name: str = Field(..., min_length=1, max_length=255)
     address: str = Field(..., min_length=1, max_length=255)
     city: str = Field(..., min_length=1, max_length=100)
     latitude: float = Field(..., ge=-90, le=90)
     longitude: float = Field(..., ge=-180, le=180)
     type: BuildingType = Field(..., description="building, complex or tower")
     status: RecordStatus = Field(default=RecordStatus.ACTIVE)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "name": "Al Noor Tower",
                    "address": "Olaya Street 12",
                    "city": "Riyadh",
                    "latitude": 24.7136,
                    "longitude": 46.6753,
                    "type": "tower",
               }
          }
     )


class AdminBuildingCreate(BuildingCreate):
     user_id: int = Field(..., gt=0, description="Owner; the building credit is taken from this user")


class BuildingUpdate(CamelModel):
     name: Optional[str] = Field(None, min_length=1, max_length=255)
     address: Optional[str] = Field(None, min_length=1, max_length=255)
     city: Optional[str] = Field(None, min_length=1, max_length=100)
     latitude: Optional[float] = Field(None, ge=-90, le=90)
     longitude: Optional[float] = Field(None, ge=-180, le=180)
     type: Optional[BuildingType] = None
     status: Optional[RecordStatus] = None


class AdminBuildingUpdate(BuildingUpdate):
     user_id: Optional[int] = Field(None, gt=0, description="Reassign the building to another owner")


class BuildingResponse(CamelModel):
     id: int
     user_id: int
     name: str
     address: str
     city: str
     latitude: float
     longitude: float
     type: BuildingType
     status: RecordStatus
     qr_identifier: str
     qr_image: Optional[str] = None
     created_at: datetime
     updated_at: datetime


class BuildingCreateResponse(CamelModel):
     message: str
     building: BuildingResponse
     remaining_building_credits: int
     remaining_user_credits: int
