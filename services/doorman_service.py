# services/doorman_service.py
"""
Doorman Service - doorman registration and building assignments.

Registering a doorman consumes one user credit of the registrar. Assignments
are (building, doorman) rows toggled between active and inactive.
"""
import logging
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from errors import AlreadyActive, AlreadyAssigned, AlreadyInactive, NotFound, ValidationFailed
from models import Building, CreditType, DoormanBuilding, RecordStatus, User, UserRole, utcnow
from security import hash_password
from services.entitlement_service import Entitlement, record_consumption, reserve_credit
from services.user_service import UserService

logger = logging.getLogger(__name__)

DOORMAN_FIELDS = ("fullname", "email", "phone", "id_number", "city", "address")


class DoormanService:
     """Service class for doormen and their building assignments."""

     @staticmethod
     def register_doorman(db: Session, registrar: User, data: dict) -> Tuple[User, Entitlement]:
          """
          Create a doorman account on behalf of `registrar`.

          Args:
               db: SQLAlchemy database session
               registrar: the user (or admin) creating the doorman; pays the credit
               data: fullname, email, password, phone, id_number, city, address

          Returns:
               The doorman and the registrar's entitlement after consumption

          Raises:
               NoActivePlan / CreditExceeded: from the entitlement gate
               DuplicateEmail / DuplicatePhone / DuplicateIdNumber
          """
          entitlement = reserve_credit(db, registrar.id, CreditType.USER)
          UserService.ensure_unique_identity(
               db, email=data["email"], phone=data["phone"], id_number=data["id_number"]
          )

          doorman = User(
               fullname=data["fullname"],
               email=data["email"],
               password=hash_password(data["password"]),
               phone=data["phone"],
               id_number=data["id_number"],
               city=data.get("city"),
               address=data.get("address"),
               role=UserRole.DOORMAN,
               status=RecordStatus.ACTIVE,
               email_confirmed=True,
               registrar_id=registrar.id,
          )
          db.add(doorman)
          db.flush()

          entitlement = record_consumption(
               db, entitlement, CreditType.USER, purpose=f"Doorman creation: {doorman.fullname}"
          )
          logger.info("Doorman registered id=%s registrar=%s", doorman.id, registrar.id)
          return doorman, entitlement

     @staticmethod
     def get_doorman(db: Session, doorman_id: int) -> User:
          doorman = db.get(User, doorman_id)
          if doorman is None or doorman.role != UserRole.DOORMAN:
               raise NotFound("doorman_not_found")
          return doorman

     @staticmethod
     def list_doormen(db: Session, registrar_id: Optional[int] = None) -> List[User]:
          query = db.query(User).filter(User.role == UserRole.DOORMAN)
          if registrar_id is not None:
               query = query.filter(User.registrar_id == registrar_id)
          return query.order_by(User.id).all()

     @staticmethod
     def active_buildings(db: Session, doorman_id: int) -> List[Building]:
          return (
               db.query(Building)
               .join(DoormanBuilding, DoormanBuilding.building_id == Building.id)
               .filter(DoormanBuilding.user_id == doorman_id, DoormanBuilding.status == RecordStatus.ACTIVE)
               .order_by(Building.id)
               .all()
          )

     @staticmethod
     def edit_doorman(db: Session, doorman: User, changes: dict) -> User:
          password = changes.get("password")
          changes = {key: value for key, value in changes.items() if key in DOORMAN_FIELDS and value is not None}
          UserService.ensure_unique_identity(
               db,
               email=changes.get("email"),
               phone=changes.get("phone"),
               id_number=changes.get("id_number"),
               exclude_user_id=doorman.id,
          )
          for key, value in changes.items():
               setattr(doorman, key, value)
          if password:
               doorman.password = hash_password(password)
          db.flush()
          return doorman

     # ------------------------------------------------------------------
     # Assignments
     # ------------------------------------------------------------------

     @staticmethod
     def _find_assignment(db: Session, building_id: int, user_id: int) -> Optional[DoormanBuilding]:
          return (
               db.query(DoormanBuilding)
               .filter(DoormanBuilding.building_id == building_id, DoormanBuilding.user_id == user_id)
               .first()
          )

     @staticmethod
     def assign(db: Session, building: Building, user_id: int) -> DoormanBuilding:
          """
          Assign a doorman to a building. An inactive assignment is reactivated
          rather than duplicated.

          Raises:
               ValidationFailed: target is missing or not a doorman
               AlreadyAssigned: an active assignment exists
          """
          doorman = db.get(User, user_id)
          if doorman is None or doorman.role != UserRole.DOORMAN:
               raise ValidationFailed("invalid_doorman")

          assignment = DoormanService._find_assignment(db, building.id, doorman.id)
          if assignment is not None:
               if assignment.status == RecordStatus.ACTIVE:
                    raise AlreadyAssigned()
               assignment.status = RecordStatus.ACTIVE
               assignment.assigned_at = utcnow()
          else:
               assignment = DoormanBuilding(
                    building_id=building.id,
                    user_id=doorman.id,
                    status=RecordStatus.ACTIVE,
                    assigned_at=utcnow(),
               )
               db.add(assignment)
          db.flush()
          logger.info("Doorman %s assigned to building %s", doorman.id, building.id)
          return assignment

     @staticmethod
     def remove(db: Session, building_id: int, user_id: int) -> None:
          assignment = DoormanService._find_assignment(db, building_id, user_id)
          if assignment is None:
               raise NotFound("doorman_assignment_not_found")
          db.delete(assignment)
          db.flush()

     @staticmethod
     def get_assignment(db: Session, building_id: int, user_id: int) -> DoormanBuilding:
          assignment = DoormanService._find_assignment(db, building_id, user_id)
          if assignment is None:
               raise NotFound("doorman_assignment_not_found")
          return assignment

     @staticmethod
     def list_assignments(db: Session, building_id: int) -> List[DoormanBuilding]:
          return (
               db.query(DoormanBuilding)
               .filter(DoormanBuilding.building_id == building_id)
               .order_by(DoormanBuilding.assigned_at, DoormanBuilding.id)
               .all()
          )

     @staticmethod
     def activate_assignment(db: Session, building_id: int, user_id: int) -> DoormanBuilding:
          assignment = DoormanService._find_assignment(db, building_id, user_id)
          if assignment is None:
               raise NotFound("doorman_assignment_not_found")
          if assignment.status == RecordStatus.ACTIVE:
               raise AlreadyActive("doorman_already_active")
          assignment.status = RecordStatus.ACTIVE
          db.flush()
          return assignment

     @staticmethod
     def deactivate_assignment(db: Session, building_id: int, user_id: int) -> DoormanBuilding:
          assignment = DoormanService._find_assignment(db, building_id, user_id)
          if assignment is None:
               raise NotFound("active_assignment_not_found")
          if assignment.status == RecordStatus.INACTIVE:
               raise AlreadyInactive("doorman_already_inactive")
          assignment.status = RecordStatus.INACTIVE
          db.flush()
          return assignment
