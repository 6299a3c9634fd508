from .common import CamelModel, MessageResponse
from .user import UserRegister, UserLogin, UserResponse, LoginResponse
from .plan import PlanCreate, PlanUpdate, PlanResponse
from .active_plan import ActivePlanCreate, ActivePlanResponse
from .credit_transaction import CreditTransactionCreate, CreditTransactionResponse
from .building import BuildingCreate, BuildingUpdate, BuildingResponse, BuildingCreateResponse
from .doorman import DoormanRegister, DoormanResponse, AssignmentRequest, AssignmentResponse
from .visitor import VisitorCreate, VisitorUpdate, VisitorResponse
from .visit import VisitCreate, VisitUpdate, VisitResponse

__all__ = [
     "CamelModel",
     "MessageResponse",
     "UserRegister",
     "UserLogin",
     "UserResponse",
     "LoginResponse",
     "PlanCreate",
     "PlanUpdate",
     "PlanResponse",
     "ActivePlanCreate",
     "ActivePlanResponse",
     "CreditTransactionCreate",
     "CreditTransactionResponse",
     "BuildingCreate",
     "BuildingUpdate",
     "BuildingResponse",
     "BuildingCreateResponse",
     "DoormanRegister",
     "DoormanResponse",
     "AssignmentRequest",
     "AssignmentResponse",
     "VisitorCreate",
     "VisitorUpdate",
     "VisitorResponse",
     "VisitCreate",
     "VisitUpdate",
     "VisitResponse",
]
