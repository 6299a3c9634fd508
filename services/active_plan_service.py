# services/active_plan_service.py
"""
Active Plan Service - plan grants.

Lifecycle: pending -> active -> {expired, cancelled}; pending -> cancelled.
Cancelled and expired grants are terminal.
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from errors import Conflict, NotFound
from models import ActivePlan, ActivePlanStatus, User, utcnow
from services.plan_service import PlanService

logger = logging.getLogger(__name__)


class ActivePlanService:
     """Service class for plan grants."""

     @staticmethod
     def subscribe(db: Session, user: User, plan_id: int) -> ActivePlan:
          """
          Create a pending grant of an active plan for `user`.

          Quotas are copied from the plan so later catalog edits do not change
          what this grant allows.
          """
          plan = PlanService.get_plan(db, plan_id, active_only=True)
          grant = ActivePlan(
               user_id=user.id,
               plan_id=plan.id,
               status=ActivePlanStatus.PENDING,
               date=utcnow(),
               building_credit=plan.building_credit,
               user_credit=plan.user_credit,
               monthly_visits=plan.monthly_visits,
          )
          db.add(grant)
          db.flush()
          logger.info("Plan grant created id=%s user=%s plan=%s", grant.id, user.id, plan.id)
          return grant

     @staticmethod
     def get_active_plan(db: Session, active_plan_id: int) -> ActivePlan:
          grant = db.get(ActivePlan, active_plan_id)
          if grant is None:
               raise NotFound("active_plan_not_found")
          return grant

     @staticmethod
     def list_active_plans(
          db: Session, user_id: Optional[int] = None, status: Optional[ActivePlanStatus] = None
     ) -> List[ActivePlan]:
          query = db.query(ActivePlan)
          if user_id is not None:
               query = query.filter(ActivePlan.user_id == user_id)
          if status is not None:
               query = query.filter(ActivePlan.status == status)
          return query.order_by(ActivePlan.date.desc(), ActivePlan.id.desc()).all()

     @staticmethod
     def _transition(db: Session, grant: ActivePlan, allowed_from: tuple, target: ActivePlanStatus,
                     message_key: str) -> ActivePlan:
          if grant.status not in allowed_from:
               raise Conflict(message_key)
          previous = grant.status
          grant.status = target
          db.flush()
          logger.info("Plan grant id=%s %s -> %s", grant.id, previous.value, target.value)
          return grant

     @staticmethod
     def cancel(db: Session, grant: ActivePlan) -> ActivePlan:
          return ActivePlanService._transition(
               db,
               grant,
               (ActivePlanStatus.PENDING, ActivePlanStatus.ACTIVE),
               ActivePlanStatus.CANCELLED,
               "active_plan_not_cancellable",
          )

     @staticmethod
     def activate(db: Session, grant: ActivePlan) -> ActivePlan:
          return ActivePlanService._transition(
               db, grant, (ActivePlanStatus.PENDING,), ActivePlanStatus.ACTIVE, "active_plan_not_pending"
          )

     @staticmethod
     def expire(db: Session, grant: ActivePlan) -> ActivePlan:
          return ActivePlanService._transition(
               db, grant, (ActivePlanStatus.ACTIVE,), ActivePlanStatus.EXPIRED, "active_plan_not_active"
          )
