from .base import Base, RecordStatus, utcnow
from .user import User, UserRole
from .email_confirmation_token import EmailConfirmationToken
from .plan import Plan
from .active_plan import ActivePlan, ActivePlanStatus
from .credit_transaction import CreditTransaction, CreditType, CreditAction
from .credit_lock import CreditLock
from .building import Building, BuildingType
from .doorman_building import DoormanBuilding
from .visitor import Visitor, Gender
from .visit import Visit, VisitStatus

__all__ = [
     "Base",
     "RecordStatus",
     "utcnow",
     "User",
     "UserRole",
     "EmailConfirmationToken",
     "Plan",
     "ActivePlan",
     "ActivePlanStatus",
     "CreditTransaction",
     "CreditType",
     "CreditAction",
     "CreditLock",
     "Building",
     "BuildingType",
     "DoormanBuilding",
     "Visitor",
     "Gender",
     "Visit",
     "VisitStatus",
]
