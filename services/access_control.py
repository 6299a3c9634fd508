# services/access_control.py
"""
Authorization checks.

Two independent capabilities, composed per route:
- role: the requester's role is in an allowed set
- ownership: the requester is the user recorded on the resource

The app surface applies both; the admin surface (/api/admin/*) applies the
role check alone over the same services.
"""
from typing import Iterable

from sqlalchemy.orm import Session

from errors import Forbidden
from models import Building, DoormanBuilding, RecordStatus, User, UserRole


def has_role(user: User, roles: Iterable[UserRole]) -> bool:
     return user is not None and user.role in tuple(roles)


def is_admin(user: User) -> bool:
     return has_role(user, (UserRole.ADMIN,))


def is_owner(resource, user: User, attr: str = "user_id") -> bool:
     """True when `resource.<attr>` references the requester."""
     if resource is None or user is None:
          return False
     return getattr(resource, attr, None) == user.id


def ensure_role(user: User, *roles: UserRole) -> None:
     if not has_role(user, roles):
          raise Forbidden("not_authorized")


def ensure_owner(resource, user: User, attr: str = "user_id") -> None:
     if not is_owner(resource, user, attr):
          raise Forbidden("not_authorized")


def ensure_owner_or_admin(resource, user: User, attr: str = "user_id") -> None:
     if not (is_admin(user) or is_owner(resource, user, attr)):
          raise Forbidden("not_authorized")


def is_assigned_doorman(db: Session, user: User, building_id: int) -> bool:
     if not has_role(user, (UserRole.DOORMAN,)):
          return False
     assignment = (
          db.query(DoormanBuilding.id)
          .filter(
               DoormanBuilding.building_id == building_id,
               DoormanBuilding.user_id == user.id,
               DoormanBuilding.status == RecordStatus.ACTIVE,
          )
          .first()
     )
     return assignment is not None


def can_operate_building(db: Session, user: User, building: Building) -> bool:
     """Admins, the building owner and its actively assigned doormen may record visits."""
     return is_admin(user) or is_owner(building, user) or is_assigned_doorman(db, user, building.id)


def ensure_can_operate_building(db: Session, user: User, building: Building) -> None:
     if not can_operate_building(db, user, building):
          raise Forbidden("not_authorized")
