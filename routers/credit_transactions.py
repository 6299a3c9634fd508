# routers/credit_transactions.py
"""
Credit ledger routes.

Role-based access:
- Admin: create, soft-delete and restore rows; list everyone's rows
- Other users: list and read their own rows
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_current_user, get_language, require_admin
from models import CreditType, User
from schemas.common import MessageResponse
from schemas.credit_transaction import CreditTransactionCreate, CreditTransactionResponse
from services import ledger_service
from services.access_control import ensure_owner, ensure_owner_or_admin, is_admin
from services.building_service import BuildingService
from services.user_service import UserService
from utils.messages import get_message

router = APIRouter(prefix="/api/credit-transactions", tags=["credit-transactions"])


@router.post(
     "",
     response_model=CreditTransactionResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Append a ledger row"
)
def create_credit_transaction(
     body: CreditTransactionCreate,
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin)
):
     owner = UserService.get_user(db, body.user_id)
     if body.building_id is not None:
          ensure_owner(BuildingService.get_building(db, body.building_id), owner)
     ledger_service.acquire_credit_lock(db, body.user_id, body.type)
     entry = ledger_service.append_credit_transaction(
          db,
          user_id=body.user_id,
          kind=body.type,
          purpose=body.purpose,
          action=body.action,
          building_id=body.building_id,
     )
     db.commit()
     return entry


@router.get("", response_model=List[CreditTransactionResponse], summary="List ledger rows")
def list_credit_transactions(
     include_deleted: bool = Query(False, alias="includeDeleted"),
     user_id: Optional[int] = Query(None, alias="userId"),
     kind: Optional[CreditType] = Query(None, alias="type"),
     db: Session = Depends(get_session),
     user: User = Depends(get_current_user)
):
     """
     Admins see every row (optionally filtered by `userId`); other users see their own.
     """
     if not is_admin(user):
          user_id = user.id
     return ledger_service.list_transactions(db, user_id=user_id, kind=kind, include_deleted=include_deleted)


@router.get("/{transaction_id}", response_model=CreditTransactionResponse, summary="Get a ledger row")
def get_credit_transaction(
     transaction_id: int,
     include_deleted: bool = Query(False, alias="includeDeleted"),
     db: Session = Depends(get_session),
     user: User = Depends(get_current_user)
):
     entry = ledger_service.get_transaction(db, transaction_id, include_deleted=include_deleted)
     ensure_owner_or_admin(entry, user)
     return entry


@router.api_route(
     "/{transaction_id}",
     methods=["DELETE", "POST"],
     response_model=MessageResponse,
     summary="Soft-delete a ledger row"
)
def soft_delete_credit_transaction(
     transaction_id: int,
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin),
     lang: Optional[str] = Depends(get_language)
):
     ledger_service.soft_delete_transaction(db, transaction_id)
     db.commit()
     return MessageResponse(message=get_message("credit_transaction_deleted", lang))


@router.put("/{transaction_id}/restore", response_model=CreditTransactionResponse, summary="Restore a soft-deleted row")
def restore_credit_transaction(
     transaction_id: int,
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin)
):
     entry = ledger_service.restore_transaction(db, transaction_id)
     db.commit()
     return entry
