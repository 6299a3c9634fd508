# models/plan.py
from sqlalchemy import Column, Integer, Numeric, String
from sqlalchemy.orm import relationship

from .base import Base, RecordStatus, TimestampMixin, enum_type


class Plan(TimestampMixin, Base):
     """
     Plan model - admin-managed catalog entry.

     A plan defines how many buildings and doorman users a subscriber may
     provision. Subscriptions snapshot these quotas (see ActivePlan).
     """
     __tablename__ = "plans"

     id = Column(Integer, primary_key=True, autoincrement=True)
     plan_name = Column(String(150), nullable=False)
     building_credit = Column(Integer, nullable=False)
     user_credit = Column(Integer, nullable=False)
     monthly_visits = Column(Integer, nullable=False)
     price = Column(Numeric(12, 2), nullable=False)
     status = Column(
          enum_type(RecordStatus, "plan_status"),
          default=RecordStatus.ACTIVE,
          nullable=False,
     )

     # Relationships
     active_plans = relationship("ActivePlan", back_populates="plan")

     def __repr__(self):
          return f"<Plan(id={self.id}, name='{self.plan_name}', status='{self.status.value}')>"
