# services/ledger_service.py
"""
Credit Ledger Service - append-only record of credit consumption.

When a credit-gated resource is created:
1. The caller takes the (user, type) credit lock (acquire_credit_lock)
2. Consumed credits are counted from the ledger (count_consumed)
3. One `add` row is appended in the same transaction as the resource

Rows are never updated except for the soft-delete flag. Consumed counts are
recomputed by aggregation on every call; no running total is stored.
"""
import logging
from typing import List, Optional

from sqlalchemy import func, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from errors import NotFound
from models import CreditAction, CreditLock, CreditTransaction, CreditType, utcnow

logger = logging.getLogger(__name__)


def count_consumed(db: Session, user_id: int, kind: CreditType) -> int:
     """Number of live `add` rows for (user, type) - the consumed quota."""
     return (
          db.query(func.count(CreditTransaction.id))
          .filter(
               CreditTransaction.user_id == user_id,
               CreditTransaction.type == kind,
               CreditTransaction.action == CreditAction.ADD,
               CreditTransaction.deleted.is_(False),
          )
          .scalar()
     ) or 0


def acquire_credit_lock(db: Session, user_id: int, kind: CreditType) -> None:
     """
     Take the write lock on the (user, type) credit key for this transaction.

     The UPDATE holds a row lock until commit/rollback, so a second request
     for the same key blocks here and only counts the ledger after the first
     one has committed its append. The lock row is created on first use.
     """
     bump = (
          update(CreditLock)
          .where(CreditLock.user_id == user_id, CreditLock.type == kind)
          .values(version=CreditLock.version + 1, locked_at=utcnow())
          .execution_options(synchronize_session=False)
     )
     result = db.execute(bump)
     if result.rowcount:
          return

     try:
          with db.begin_nested():
               db.add(CreditLock(user_id=user_id, type=kind, version=1))
     except IntegrityError:
          # Created concurrently by another request; queue behind it.
          db.execute(bump)


def append_credit_transaction(
     db: Session,
     user_id: int,
     kind: CreditType,
     purpose: str,
     action: CreditAction = CreditAction.ADD,
     building_id: Optional[int] = None,
) -> CreditTransaction:
     """
     Append a ledger row. Pure insert: flushed, never committed here.
     """
     entry = CreditTransaction(
          user_id=user_id,
          building_id=building_id,
          purpose=purpose,
          type=kind,
          action=action,
          date=utcnow(),
          deleted=False,
     )
     db.add(entry)
     db.flush()
     logger.info(
          "Ledger append id=%s user=%s type=%s action=%s building=%s",
          entry.id, user_id, kind.value, action.value, building_id,
     )
     return entry


def get_transaction(db: Session, transaction_id: int, include_deleted: bool = False) -> CreditTransaction:
     query = db.query(CreditTransaction).filter(CreditTransaction.id == transaction_id)
     if not include_deleted:
          query = query.filter(CreditTransaction.deleted.is_(False))
     entry = query.first()
     if entry is None:
          raise NotFound("credit_transaction_not_found")
     return entry


def list_transactions(
     db: Session,
     user_id: Optional[int] = None,
     kind: Optional[CreditType] = None,
     include_deleted: bool = False,
) -> List[CreditTransaction]:
     """Ledger rows, newest first. Soft-deleted rows are excluded by default."""
     query = db.query(CreditTransaction)
     if not include_deleted:
          query = query.filter(CreditTransaction.deleted.is_(False))
     if user_id is not None:
          query = query.filter(CreditTransaction.user_id == user_id)
     if kind is not None:
          query = query.filter(CreditTransaction.type == kind)
     return query.order_by(CreditTransaction.date.desc(), CreditTransaction.id.desc()).all()


def soft_delete_transaction(db: Session, transaction_id: int) -> CreditTransaction:
     """
     Soft-delete a ledger row.

     Raises:
          NotFound: if the row is missing or already deleted.
     """
     entry = db.get(CreditTransaction, transaction_id)
     if entry is None or entry.deleted:
          raise NotFound("credit_transaction_not_found")

     acquire_credit_lock(db, entry.user_id, entry.type)
     entry.soft_delete()
     db.flush()
     logger.info("Ledger soft-delete id=%s user=%s type=%s", entry.id, entry.user_id, entry.type.value)
     return entry


def restore_transaction(db: Session, transaction_id: int) -> CreditTransaction:
     """
     Restore a soft-deleted ledger row.

     Raises:
          NotFound: if the row is missing or not currently deleted.
     """
     entry = db.get(CreditTransaction, transaction_id)
     if entry is None or not entry.deleted:
          raise NotFound("credit_transaction_not_found")

     acquire_credit_lock(db, entry.user_id, entry.type)
     entry.restore()
     db.flush()
     logger.info("Ledger restore id=%s user=%s type=%s", entry.id, entry.user_id, entry.type.value)
     return entry
