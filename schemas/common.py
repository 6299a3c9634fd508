# schemas/common.py
"""
Shared schema bases.

Account, plan, building, ledger and entitlement payloads use camelCase keys
on the wire; CamelModel accepts either spelling on input and serializes by
alias (FastAPI's default for response models).
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class CamelModel(BaseModel):
     model_config = ConfigDict(
          alias_generator=to_camel,
          populate_by_name=True,
          from_attributes=True,
     )


class MessageResponse(BaseModel):
     """Localized confirmation message."""
     message: str
