# schemas/user.py
"""
Pydantic schemas for accounts: registration, login, profile and admin user management.
"""
from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from models import RecordStatus, UserRole
from schemas.common import EMAIL_PATTERN, CamelModel


class UserRegister(CamelModel):
     """Schema for self-registration."""
     fullname: str = Field(..., min_length=1, max_length=200)
     email: str = Field(..., pattern=EMAIL_PATTERN, max_length=255)
     password: str = Field(..., min_length=6, max_length=128)
     phone: str = Field(..., min_length=3, max_length=50)
     id_number: str = Field(..., min_length=1, max_length=100, description="National ID / Iqama number")
     city: Optional[str] = Field(None, max_length=100)
     address: Optional[str] = Field(None, max_length=255)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "fullname": "Sara Al-Harbi",
                    "email": "sara@example.com",
                    "password": "s3cret-pass",
                    "phone": "+966500000001",
                    "idNumber": "1098765432",
                    "city": "Riyadh",
                    "address": "King Fahd Road",
               }
          }
     )


class UserLogin(CamelModel):
     email: str = Field(..., pattern=EMAIL_PATTERN)
     password: str = Field(..., min_length=1)


class UserResponse(CamelModel):
     """Schema for account responses. The password hash is never returned."""
     id: int
     fullname: str
     email: str
     phone: str
     id_number: str
     city: Optional[str] = None
     address: Optional[str] = None
     role: UserRole
     status: RecordStatus
     email_confirmed: bool
     phone_confirmed: bool
     registrar_id: Optional[int] = None
     created_at: datetime


class RegisterResponse(CamelModel):
     message: str
     user: UserResponse


class LoginResponse(CamelModel):
     message: str
     token: str
     user: UserResponse


class ProfileUpdate(CamelModel):
     fullname: Optional[str] = Field(None, min_length=1, max_length=200)
     email: Optional[str] = Field(None, pattern=EMAIL_PATTERN, max_length=255)
     phone: Optional[str] = Field(None, min_length=3, max_length=50)
     id_number: Optional[str] = Field(None, min_length=1, max_length=100)
     city: Optional[str] = Field(None, max_length=100)
     address: Optional[str] = Field(None, max_length=255)


class PasswordChange(CamelModel):
     current_password: str = Field(..., min_length=1)
     new_password: str = Field(..., min_length=6, max_length=128)
     confirm_password: str = Field(..., min_length=6, max_length=128)


class AdminUserCreate(UserRegister):
     """Admin-created accounts skip email confirmation."""
     role: UserRole = Field(default=UserRole.USER)
     status: RecordStatus = Field(default=RecordStatus.ACTIVE)


class AdminUserUpdate(ProfileUpdate):
     password: Optional[str] = Field(None, min_length=6, max_length=128)
     role: Optional[UserRole] = None
     status: Optional[RecordStatus] = None
     email_confirmed: Optional[bool] = None
     phone_confirmed: Optional[bool] = None
