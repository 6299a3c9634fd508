# schemas/doorman.py
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from models import RecordStatus
from schemas.common import EMAIL_PATTERN, CamelModel
from schemas.user import UserResponse


class DoormanRegister(CamelModel):
     """Schema for registering a doorman. Consumes one user credit of the registrar."""
     fullname: str = Field(..., min_length=1, max_length=200)
     email: str = Field(..., pattern=EMAIL_PATTERN, max_length=255)
     password: str = Field(..., min_length=6, max_length=128)
     phone: str = Field(..., min_length=3, max_length=50)
     id_number: str = Field(..., min_length=1, max_length=100)
     city: Optional[str] = Field(None, max_length=100)
     address: Optional[str] = Field(None, max_length=255)


class DoormanUpdate(CamelModel):
     fullname: Optional[str] = Field(None, min_length=1, max_length=200)
     email: Optional[str] = Field(None, pattern=EMAIL_PATTERN, max_length=255)
     password: Optional[str] = Field(None, min_length=6, max_length=128)
     phone: Optional[str] = Field(None, min_length=3, max_length=50)
     id_number: Optional[str] = Field(None, min_length=1, max_length=100)
     city: Optional[str] = Field(None, max_length=100)
     address: Optional[str] = Field(None, max_length=255)


class AssignedBuilding(CamelModel):
     id: int
     name: str
     city: str


class DoormanResponse(UserResponse):
     assigned_buildings: List[AssignedBuilding] = Field(default_factory=list, description="Active assignments")


class DoormanRegisterResponse(CamelModel):
     message: str
     doorman: DoormanResponse
     remaining_building_credits: int
     remaining_user_credits: int


class AssignmentRequest(CamelModel):
     building_id: int = Field(..., gt=0)
     user_id: int = Field(..., gt=0, description="Doorman user id")


class AssignmentResponse(CamelModel):
     id: int
     building_id: int
     user_id: int
     status: RecordStatus
     assigned_at: datetime
