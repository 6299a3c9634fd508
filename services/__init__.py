from .access_control import (
     can_operate_building,
     ensure_owner,
     ensure_role,
     has_role,
     is_owner,
)
from .active_plan_service import ActivePlanService
from .building_service import BuildingService
from .doorman_service import DoormanService
from .entitlement_service import Entitlement, reserve_credit, resolve_entitlement
from .ledger_service import (
     acquire_credit_lock,
     append_credit_transaction,
     count_consumed,
     list_transactions,
     restore_transaction,
     soft_delete_transaction,
)
from .plan_service import PlanService
from .user_service import UserService
from .visit_service import VisitService
from .visitor_service import VisitorService

__all__ = [
     "can_operate_building",
     "ensure_owner",
     "ensure_role",
     "has_role",
     "is_owner",
     "ActivePlanService",
     "BuildingService",
     "DoormanService",
     "Entitlement",
     "reserve_credit",
     "resolve_entitlement",
     "acquire_credit_lock",
     "append_credit_transaction",
     "count_consumed",
     "list_transactions",
     "restore_transaction",
     "soft_delete_transaction",
     "PlanService",
     "UserService",
     "VisitService",
     "VisitorService",
]
