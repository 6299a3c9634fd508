# models/user.py
import enum

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from .base import Base, RecordStatus, TimestampMixin, enum_type


class UserRole(str, enum.Enum):
     USER = "user"
     DOORMAN = "doorman"
     ADMIN = "admin"


class User(TimestampMixin, Base):
     """
     User model - central identity table.

     Email, phone and ID number are unique across every role. Doormen carry a
     back-reference to the user (or admin) who registered them.
     """
     __tablename__ = "users"

     id = Column(Integer, primary_key=True, autoincrement=True)
     fullname = Column(String(200), nullable=False)
     email = Column(String(255), unique=True, nullable=False, index=True)
     password = Column(String(255), nullable=False)
     phone = Column(String(50), unique=True, nullable=False, index=True)
     id_number = Column(String(100), unique=True, nullable=False, index=True)
     city = Column(String(100), nullable=True)
     address = Column(String(255), nullable=True)
     role = Column(enum_type(UserRole, "user_role"), nullable=False)
     status = Column(
          enum_type(RecordStatus, "user_status"),
          default=RecordStatus.INACTIVE,
          nullable=False,
     )
     email_confirmed = Column(Boolean, default=False, nullable=False)
     phone_confirmed = Column(Boolean, default=False, nullable=False)
     registrar_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)

     # Relationships
     registrar = relationship("User", remote_side=[id])
     buildings = relationship("Building", back_populates="owner")
     active_plans = relationship("ActivePlan", back_populates="user", cascade="all, delete-orphan")

     @property
     def is_active(self) -> bool:
          return self.status == RecordStatus.ACTIVE

     def __repr__(self):
          return f"<User(id={self.id}, email='{self.email}', role='{self.role.value}')>"
