# models/doorman_building.py
"""
DoormanBuilding model - assignment of a doorman to a building.

A (building, doorman) pair has at most one row; it is toggled between active
and inactive instead of being duplicated.
"""
from sqlalchemy import Column, DateTime, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship

from .base import Base, RecordStatus, enum_type, utcnow


class DoormanBuilding(Base):
     __tablename__ = "doorman_buildings"
     __table_args__ = (
          UniqueConstraint("building_id", "user_id", name="uq_doorman_buildings_building_user"),
     )

     id = Column(Integer, primary_key=True, autoincrement=True)
     building_id = Column(Integer, ForeignKey("buildings.id", ondelete="CASCADE"), nullable=False, index=True)
     user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
     status = Column(
          enum_type(RecordStatus, "assignment_status"),
          default=RecordStatus.ACTIVE,
          nullable=False,
     )
     assigned_at = Column(DateTime, default=utcnow, nullable=False)

     # Relationships
     building = relationship("Building", back_populates="doorman_assignments")
     doorman = relationship("User")

     def __repr__(self):
          return (
               f"<DoormanBuilding(id={self.id}, building_id={self.building_id}, "
               f"user_id={self.user_id}, status='{self.status.value}')>"
          )
