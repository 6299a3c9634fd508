# schemas/credit_transaction.py
"""
Pydantic schemas for the credit ledger.
"""
from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from models import CreditAction, CreditType
from schemas.common import CamelModel


class CreditTransactionCreate(CamelModel):
     """Manual ledger entry (admin only)."""
     user_id: int = Field(..., gt=0, description="User whose credits the row counts against")
     type: CreditType = Field(..., description="building or user credit")
     purpose: str = Field(..., min_length=1, max_length=255)
     action: CreditAction = Field(default=CreditAction.ADD)
     building_id: Optional[int] = Field(None, gt=0)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "userId": 4,
                    "type": "building",
                    "purpose": "Manual adjustment",
                    "action": "add",
               }
          }
     )


class CreditTransactionResponse(CamelModel):
     id: int
     user_id: int
     building_id: Optional[int] = None
     purpose: str
     type: CreditType
     action: CreditAction
     date: datetime
     deleted: bool
     deleted_at: Optional[datetime] = None
