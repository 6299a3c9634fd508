# models/building.py
import enum

from sqlalchemy import Column, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from .base import Base, RecordStatus, TimestampMixin, enum_type


class BuildingType(str, enum.Enum):
     BUILDING = "building"
     COMPLEX = "complex"
     TOWER = "tower"


class Building(TimestampMixin, Base):
     """
     Building model - a site owned by exactly one user.

     The QR identifier and image are generated once at creation and never
     regenerated.
     """
     __tablename__ = "buildings"

     id = Column(Integer, primary_key=True, autoincrement=True)
     user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
     name = Column(String(255), nullable=False)
     address = Column(String(255), nullable=False)
     city = Column(String(100), nullable=False)
     latitude = Column(Float, nullable=False)
     longitude = Column(Float, nullable=False)
     type = Column(enum_type(BuildingType, "building_type"), nullable=False)
     status = Column(
          enum_type(RecordStatus, "building_status"),
          default=RecordStatus.ACTIVE,
          nullable=False,
     )
     qr_identifier = Column(String(32), unique=True, nullable=False, index=True)
     qr_image = Column(Text, nullable=True)  # data URL

     # Relationships
     owner = relationship("User", back_populates="buildings")
     doorman_assignments = relationship(
          "DoormanBuilding",
          back_populates="building",
          cascade="all, delete-orphan",
     )
     visits = relationship("Visit", back_populates="building", cascade="all, delete-orphan")

     def __repr__(self):
          return f"<Building(id={self.id}, name='{self.name}', user_id={self.user_id})>"
