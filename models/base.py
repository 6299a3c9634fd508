import enum
import re
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Enum
from sqlalchemy.orm import DeclarativeBase, declared_attr


def utcnow() -> datetime:
     """Naive UTC timestamp, the format every DateTime column stores."""
     return datetime.now(timezone.utc).replace(tzinfo=None)


class RecordStatus(str, enum.Enum):
     """Shared active/inactive flag for users, plans, buildings, visitors and assignments."""
     ACTIVE = "active"
     INACTIVE = "inactive"


def enum_type(enum_cls, name: str) -> Enum:
     """Persist enum *values* (e.g. 'active') rather than member names."""
     return Enum(
          enum_cls,
          name=name,
          values_callable=lambda members: [member.value for member in members],
          create_constraint=True,
          validate_strings=True,
     )


class Base(DeclarativeBase):
     """
     Base class for all SQLAlchemy models.
     Provides common configuration and mixins.
     """

     @declared_attr.directive
     def __tablename__(cls) -> str:
          """
          Automatically generate table name from class name.
          Example: DoormanBuilding -> doorman_buildings
          """
          name = re.sub(r'(?<!^)(?=[A-Z])', '_', cls.__name__).lower()
          # Pluralize (simple version)
          if name.endswith('y'):
               return name[:-1] + 'ies'
          elif name.endswith('s'):
               return name + 'es'
          return name + 's'


class TimestampMixin:
     created_at = Column(DateTime, default=utcnow, nullable=False)
     updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
