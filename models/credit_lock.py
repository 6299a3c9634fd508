# models/credit_lock.py
"""
CreditLock model - one row per (user, credit type).

Gated ledger mutations update this row before counting credits, which takes
a row write lock until the transaction ends. Concurrent requests for the same
key therefore run the count-then-append sequence one at a time. The row keeps
no balance; `version` only records how many gated mutations went through.
"""
from sqlalchemy import Column, DateTime, ForeignKey, Integer, UniqueConstraint

from .base import Base, enum_type, utcnow
from .credit_transaction import CreditType


class CreditLock(Base):
     __tablename__ = "credit_locks"
     __table_args__ = (
          UniqueConstraint("user_id", "type", name="uq_credit_locks_user_type"),
     )

     id = Column(Integer, primary_key=True, autoincrement=True)
     user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
     type = Column(enum_type(CreditType, "credit_lock_type"), nullable=False)
     version = Column(Integer, default=0, nullable=False)
     locked_at = Column(DateTime, default=utcnow, nullable=False)

     def __repr__(self):
          return f"<CreditLock(user_id={self.user_id}, type='{self.type.value}', version={self.version})>"
