# services/plan_service.py
from typing import List

from sqlalchemy.orm import Session

from errors import AlreadyActive, AlreadyInactive, Conflict, NotFound
from models import ActivePlan, Plan, RecordStatus

PLAN_FIELDS = ("plan_name", "building_credit", "user_credit", "monthly_visits", "price", "status")


class PlanService:
     """Plan catalog. Edits never touch grants already issued (they carry a quota snapshot)."""

     @staticmethod
     def list_plans(db: Session, active_only: bool = True) -> List[Plan]:
          query = db.query(Plan)
          if active_only:
               query = query.filter(Plan.status == RecordStatus.ACTIVE)
          return query.order_by(Plan.price, Plan.id).all()

     @staticmethod
     def get_plan(db: Session, plan_id: int, active_only: bool = False) -> Plan:
          plan = db.get(Plan, plan_id)
          if plan is None or (active_only and plan.status != RecordStatus.ACTIVE):
               raise NotFound("plan_not_found")
          return plan

     @staticmethod
     def create_plan(db: Session, data: dict) -> Plan:
          fields = {key: value for key, value in data.items() if key in PLAN_FIELDS and value is not None}
          plan = Plan(**fields)
          db.add(plan)
          db.flush()
          return plan

     @staticmethod
     def update_plan(db: Session, plan: Plan, changes: dict) -> Plan:
          for key, value in changes.items():
               if key in PLAN_FIELDS and value is not None:
                    setattr(plan, key, value)
          db.flush()
          return plan

     @staticmethod
     def delete_plan(db: Session, plan: Plan) -> None:
          if db.query(ActivePlan.id).filter(ActivePlan.plan_id == plan.id).first() is not None:
               raise Conflict("plan_in_use")
          db.delete(plan)
          db.flush()

     @staticmethod
     def set_status(db: Session, plan: Plan, status: RecordStatus) -> Plan:
          if plan.status == status:
               if status == RecordStatus.ACTIVE:
                    raise AlreadyActive("plan_already_active")
               raise AlreadyInactive("plan_already_inactive")
          plan.status = status
          db.flush()
          return plan
