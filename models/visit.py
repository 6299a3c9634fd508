# models/visit.py
import enum

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from .base import Base, TimestampMixin, enum_type, utcnow


class VisitStatus(str, enum.Enum):
     """Visit lifecycle: pending until the visitor checks out or the visit is cancelled."""
     PENDING = "pending"
     COMPLETED = "completed"
     CANCELLED = "cancelled"


class Visit(TimestampMixin, Base):
     """
     Visit model - one check-in of a visitor at a building.

     (building, visitor, check-in time) is unique so the same check-in cannot
     be recorded twice.
     """
     __tablename__ = "visits"
     __table_args__ = (
          UniqueConstraint("building_id", "visitor_id", "check_in_date", name="uq_visits_building_visitor_checkin"),
     )

     id = Column(Integer, primary_key=True, autoincrement=True)
     building_id = Column(Integer, ForeignKey("buildings.id", ondelete="CASCADE"), nullable=False, index=True)
     user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
     visitor_id = Column(Integer, ForeignKey("visitors.id"), nullable=False, index=True)
     purpose = Column(String(255), nullable=False)
     unit = Column(String(50), nullable=False)
     check_in_date = Column(DateTime, default=utcnow, nullable=False)
     check_out_date = Column(DateTime, nullable=True)
     status = Column(
          enum_type(VisitStatus, "visit_status"),
          default=VisitStatus.PENDING,
          nullable=False,
          index=True,
     )

     # Relationships
     building = relationship("Building", back_populates="visits")
     recorded_by = relationship("User")
     visitor = relationship("Visitor", back_populates="visits")

     @property
     def is_closed(self) -> bool:
          return self.status != VisitStatus.PENDING

     def mark_as_completed(self) -> None:
          """Close the visit and stamp the check-out time."""
          self.status = VisitStatus.COMPLETED
          self.check_out_date = utcnow()

     def mark_as_cancelled(self) -> None:
          """Close the visit without touching the check-out time."""
          self.status = VisitStatus.CANCELLED

     def __repr__(self):
          return f"<Visit(id={self.id}, building_id={self.building_id}, visitor_id={self.visitor_id}, status='{self.status.value}')>"
