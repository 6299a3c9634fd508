# services/visitor_service.py
"""
Visitor Service - people checked in at buildings.

Visitors are not tied to a building; the ID number is unique across all of
them. A visitor with recorded visits cannot be deleted.
"""
import logging
from typing import List

from sqlalchemy.orm import Session

from errors import AlreadyActive, AlreadyInactive, Conflict, DuplicateIdNumber, NotFound
from models import RecordStatus, Visit, Visitor

logger = logging.getLogger(__name__)

VISITOR_FIELDS = ("fullname", "id_number", "birthday", "gender", "region", "expire_date", "phone", "status")


class VisitorService:
     """Visitors are shared by every building; the ID number identifies them."""

     @staticmethod
     def _ensure_unique_id_number(db: Session, id_number: str, exclude_id: int = None) -> None:
          query = db.query(Visitor.id).filter(Visitor.id_number == id_number)
          if exclude_id is not None:
               query = query.filter(Visitor.id != exclude_id)
          if query.first() is not None:
               raise DuplicateIdNumber("visitor_exists")

     @staticmethod
     def create_visitor(db: Session, data: dict) -> Visitor:
          VisitorService._ensure_unique_id_number(db, data["id_number"])
          fields = {key: value for key, value in data.items() if key in VISITOR_FIELDS and value is not None}
          visitor = Visitor(**fields)
          db.add(visitor)
          db.flush()
          logger.info("Visitor created id=%s", visitor.id)
          return visitor

     @staticmethod
     def get_visitor(db: Session, visitor_id: int) -> Visitor:
          visitor = db.get(Visitor, visitor_id)
          if visitor is None:
               raise NotFound("visitor_not_found")
          return visitor

     @staticmethod
     def list_visitors(db: Session) -> List[Visitor]:
          return db.query(Visitor).order_by(Visitor.id).all()

     @staticmethod
     def update_visitor(db: Session, visitor: Visitor, changes: dict) -> Visitor:
          changes = {key: value for key, value in changes.items() if key in VISITOR_FIELDS and value is not None}
          if "id_number" in changes:
               VisitorService._ensure_unique_id_number(db, changes["id_number"], exclude_id=visitor.id)
          for key, value in changes.items():
               setattr(visitor, key, value)
          db.flush()
          logger.info("Visitor updated id=%s fields=%s", visitor.id, sorted(changes))
          return visitor

     @staticmethod
     def delete_visitor(db: Session, visitor: Visitor) -> None:
          if db.query(Visit.id).filter(Visit.visitor_id == visitor.id).first() is not None:
               raise Conflict("visitor_has_visits")
          db.delete(visitor)
          db.flush()
          logger.info("Visitor deleted id=%s", visitor.id)

     @staticmethod
     def set_status(db: Session, visitor: Visitor, status: RecordStatus) -> Visitor:
          if visitor.status == status:
               if status == RecordStatus.ACTIVE:
                    raise AlreadyActive("visitor_already_active")
               raise AlreadyInactive("visitor_already_inactive")
          visitor.status = status
          db.flush()
          logger.info("Visitor id=%s status -> %s", visitor.id, status.value)
          return visitor
