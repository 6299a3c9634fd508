# models/active_plan.py
import enum

from sqlalchemy import Column, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship

from .base import Base, TimestampMixin, enum_type, utcnow


class ActivePlanStatus(str, enum.Enum):
     """Lifecycle of a plan grant."""
     PENDING = "pending"
     ACTIVE = "active"
     EXPIRED = "expired"
     CANCELLED = "cancelled"


class ActivePlan(TimestampMixin, Base):
     """
     ActivePlan model - a grant of a Plan to a User.

     Created pending on subscription; promoted to active by an admin (or a
     billing flow). Quotas are copied from the plan when the grant is
     created so that later catalog edits do not change issued grants.
     """
     __tablename__ = "active_plans"

     id = Column(Integer, primary_key=True, autoincrement=True)
     user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
     plan_id = Column(Integer, ForeignKey("plans.id"), nullable=False, index=True)
     status = Column(
          enum_type(ActivePlanStatus, "active_plan_status"),
          default=ActivePlanStatus.PENDING,
          nullable=False,
          index=True,
     )
     date = Column(DateTime, default=utcnow, nullable=False)

     # Quota snapshot
     building_credit = Column(Integer, nullable=True)
     user_credit = Column(Integer, nullable=True)
     monthly_visits = Column(Integer, nullable=True)

     # Relationships
     user = relationship("User", back_populates="active_plans")
     plan = relationship("Plan", back_populates="active_plans")

     @property
     def building_quota(self) -> int:
          if self.building_credit is not None:
               return self.building_credit
          return self.plan.building_credit

     @property
     def user_quota(self) -> int:
          if self.user_credit is not None:
               return self.user_credit
          return self.plan.user_credit

     def __repr__(self):
          return f"<ActivePlan(id={self.id}, user_id={self.user_id}, plan_id={self.plan_id}, status='{self.status.value}')>"
