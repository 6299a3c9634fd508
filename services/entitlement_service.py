# services/entitlement_service.py
"""
Entitlement Engine - what a user may still provision.

A user's entitlement is their most recent active plan grant plus the number
of building and user credits already consumed according to the ledger.
"""
import logging
from dataclasses import dataclass, replace
from typing import Optional

from sqlalchemy.orm import Session

from errors import CreditExceeded, NoActivePlan
from models import ActivePlan, ActivePlanStatus, CreditTransaction, CreditType, Plan
from services.ledger_service import acquire_credit_lock, append_credit_transaction, count_consumed

logger = logging.getLogger(__name__)

CREDIT_EXCEEDED_KEYS = {
     CreditType.BUILDING: "building_credit_exceeded",
     CreditType.USER: "user_credit_exceeded",
}


@dataclass(frozen=True)
class Entitlement:
     active_plan: ActivePlan
     plan: Plan
     building_quota: int
     user_quota: int
     consumed_building: int
     consumed_user: int

     @property
     def remaining_building(self) -> int:
          return max(self.building_quota - self.consumed_building, 0)

     @property
     def remaining_user(self) -> int:
          return max(self.user_quota - self.consumed_user, 0)

     def quota(self, kind: CreditType) -> int:
          return self.building_quota if kind == CreditType.BUILDING else self.user_quota

     def consumed(self, kind: CreditType) -> int:
          return self.consumed_building if kind == CreditType.BUILDING else self.consumed_user

     def with_consumed(self, kind: CreditType, consumed: int) -> "Entitlement":
          if kind == CreditType.BUILDING:
               return replace(self, consumed_building=consumed)
          return replace(self, consumed_user=consumed)


def get_current_active_plan(db: Session, user_id: int) -> Optional[ActivePlan]:
     """
     The grant that backs the user's entitlement.

     Nothing prevents several grants from being active at once; the most
     recently issued one wins and quotas are never combined.
     """
     return (
          db.query(ActivePlan)
          .filter(ActivePlan.user_id == user_id, ActivePlan.status == ActivePlanStatus.ACTIVE)
          .order_by(ActivePlan.date.desc(), ActivePlan.id.desc())
          .first()
     )


def resolve_entitlement(db: Session, user_id: int) -> Entitlement:
     """
     Resolve plan, quotas and consumed credits for a user.

     Raises:
          NoActivePlan: if the user holds no active grant.
     """
     active_plan = get_current_active_plan(db, user_id)
     if active_plan is None:
          raise NoActivePlan()

     return Entitlement(
          active_plan=active_plan,
          plan=active_plan.plan,
          building_quota=active_plan.building_quota,
          user_quota=active_plan.user_quota,
          consumed_building=count_consumed(db, user_id, CreditType.BUILDING),
          consumed_user=count_consumed(db, user_id, CreditType.USER),
     )


def reserve_credit(db: Session, user_id: int, kind: CreditType) -> Entitlement:
     """
     Gate a credit-consuming creation.

     Takes the (user, kind) lock first and counts consumed credits after it
     is held. The caller must create the resource and call
     record_consumption() before the transaction commits.

     Raises:
          NoActivePlan: no active grant.
          CreditExceeded: consumed >= quota for `kind`.
     """
     entitlement = resolve_entitlement(db, user_id)
     acquire_credit_lock(db, user_id, kind)
     entitlement = entitlement.with_consumed(kind, count_consumed(db, user_id, kind))

     if entitlement.consumed(kind) >= entitlement.quota(kind):
          logger.info(
               "Credit exceeded user=%s type=%s consumed=%s quota=%s",
               user_id, kind.value, entitlement.consumed(kind), entitlement.quota(kind),
          )
          raise CreditExceeded(CREDIT_EXCEEDED_KEYS[kind])
     return entitlement


def record_consumption(
     db: Session,
     entitlement: Entitlement,
     kind: CreditType,
     purpose: str,
     building_id: Optional[int] = None,
) -> Entitlement:
     """Append the `add` ledger row for a reserved credit; returns the updated entitlement."""
     entry: CreditTransaction = append_credit_transaction(
          db,
          user_id=entitlement.active_plan.user_id,
          kind=kind,
          purpose=purpose,
          building_id=building_id,
     )
     logger.info("Credit consumed user=%s type=%s ledger_id=%s", entry.user_id, kind.value, entry.id)
     return entitlement.with_consumed(kind, entitlement.consumed(kind) + 1)
