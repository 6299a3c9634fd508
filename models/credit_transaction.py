# models/credit_transaction.py
"""
CreditTransaction model - append-only ledger of credit consumption.

Every building or doorman creation appends one `add` row. The consumed count
for a (user, type) pair is always recomputed from the rows that are `add`
and not soft-deleted; nothing else stores that number. Rows are never
removed: soft-delete flips `deleted` and stamps `deleted_at`, restore clears
both.
"""
import enum

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship

from .base import Base, enum_type, utcnow


class CreditType(str, enum.Enum):
     BUILDING = "building"
     USER = "user"


class CreditAction(str, enum.Enum):
     ADD = "add"
     DELETE = "delete"


class CreditTransaction(Base):
     __tablename__ = "credit_transactions"
     __table_args__ = (
          Index("ix_credit_transactions_consumption", "user_id", "type", "action", "deleted"),
     )

     id = Column(Integer, primary_key=True, autoincrement=True)
     user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
     building_id = Column(Integer, ForeignKey("buildings.id", ondelete="SET NULL"), nullable=True)
     purpose = Column(String(255), nullable=False)
     type = Column(enum_type(CreditType, "credit_type"), nullable=False)
     action = Column(enum_type(CreditAction, "credit_action"), nullable=False)
     date = Column(DateTime, default=utcnow, nullable=False, index=True)
     deleted = Column(Boolean, default=False, nullable=False)
     deleted_at = Column(DateTime, nullable=True)

     # Relationships
     user = relationship("User")
     building = relationship("Building")

     def soft_delete(self) -> None:
          """Hide the row from consumption counts without removing it."""
          self.deleted = True
          self.deleted_at = utcnow()

     def restore(self) -> None:
          """Bring a soft-deleted row back into consumption counts."""
          self.deleted = False
          self.deleted_at = None

     def __repr__(self):
          return (
               f"<CreditTransaction(id={self.id}, user_id={self.user_id}, type='{self.type.value}', "
               f"action='{self.action.value}', deleted={self.deleted})>"
          )
