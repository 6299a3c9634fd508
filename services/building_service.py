# services/building_service.py
"""
Building Service - registry of buildings owned by users.

Creating a building consumes one building credit: the entitlement gate,
the insert and the ledger append share the caller's transaction.
"""
import logging
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from errors import AlreadyActive, AlreadyInactive, NotFound
from models import Building, CreditAction, CreditType, RecordStatus, User
from services.entitlement_service import Entitlement, record_consumption, reserve_credit
from services.ledger_service import append_credit_transaction
from utils.qr import new_building_identifier, render_building_qr

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("name", "address", "city", "latitude", "longitude", "type", "status")


class BuildingService:
     """Service class for building-related business logic."""

     @staticmethod
     def get_building(db: Session, building_id: int) -> Building:
          building = db.get(Building, building_id)
          if building is None:
               raise NotFound("building_not_found")
          return building

     @staticmethod
     def list_buildings(db: Session, owner_id: Optional[int] = None) -> List[Building]:
          query = db.query(Building)
          if owner_id is not None:
               query = query.filter(Building.user_id == owner_id)
          return query.order_by(Building.created_at.desc(), Building.id.desc()).all()

     @staticmethod
     def create_building(db: Session, owner_id: int, data: dict) -> Tuple[Building, Entitlement]:
          """
          Create a building for `owner_id` and consume one building credit.

          Args:
               db: SQLAlchemy database session
               owner_id: user the building (and the credit) belongs to
               data: name, address, city, latitude, longitude, type, status

          Returns:
               The flushed Building and the owner's entitlement after consumption

          Raises:
               NoActivePlan / CreditExceeded: from the entitlement gate
          """
          entitlement = reserve_credit(db, owner_id, CreditType.BUILDING)

          fields = {key: value for key, value in data.items() if key in EDITABLE_FIELDS and value is not None}
          fields.setdefault("status", RecordStatus.ACTIVE)
          building = Building(user_id=owner_id, qr_identifier=new_building_identifier(), **fields)
          db.add(building)
          db.flush()

          building.qr_image = render_building_qr(building.id, building.name, building.qr_identifier)
          entitlement = record_consumption(
               db,
               entitlement,
               CreditType.BUILDING,
               purpose=f"Building creation: {building.name}",
               building_id=building.id,
          )
          db.flush()
          logger.info("Building created id=%s owner=%s", building.id, owner_id)
          return building, entitlement

     @staticmethod
     def update_building(db: Session, building: Building, changes: dict) -> Building:
          for key, value in changes.items():
               if key in EDITABLE_FIELDS and value is not None:
                    setattr(building, key, value)
          db.flush()
          return building

     @staticmethod
     def reassign_owner(db: Session, building: Building, owner_id: int) -> Building:
          owner = db.get(User, owner_id)
          if owner is None:
               raise NotFound("user_not_found")
          building.user_id = owner.id
          db.flush()
          return building

     @staticmethod
     def delete_building(db: Session, building: Building) -> None:
          """
          Hard-delete a building and record a `delete` audit row in the ledger.

          The audit row does not count towards consumption and the building's
          `add` row stays live, so deleting does not give the credit back.
          """
          append_credit_transaction(
               db,
               user_id=building.user_id,
               kind=CreditType.BUILDING,
               purpose=f"Building deletion: {building.name}",
               action=CreditAction.DELETE,
          )
          logger.info("Building deleted id=%s owner=%s", building.id, building.user_id)
          db.delete(building)
          db.flush()

     @staticmethod
     def set_status(db: Session, building: Building, status: RecordStatus) -> Building:
          if building.status == status:
               if status == RecordStatus.ACTIVE:
                    raise AlreadyActive("building_already_active")
               raise AlreadyInactive("building_already_inactive")
          building.status = status
          db.flush()
          return building
