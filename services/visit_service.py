# services/visit_service.py
"""
Visit Service - check-ins of visitors at buildings.

A visit is pending until it is completed (check-out stamped) or cancelled;
both are terminal. (building, visitor, check-in time) identifies a visit.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from errors import Conflict, DuplicateVisit, NotFound
from models import Building, DoormanBuilding, RecordStatus, User, Visit, VisitStatus, Visitor, utcnow
from services.access_control import ensure_can_operate_building, is_admin

logger = logging.getLogger(__name__)


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
     """Timestamps are stored as naive UTC; aware inputs are converted."""
     if value is None or value.tzinfo is None:
          return value
     return value.astimezone(timezone.utc).replace(tzinfo=None)


class VisitService:
     """Service class for visit-related business logic."""

     @staticmethod
     def _ensure_not_duplicate(db: Session, building_id: int, visitor_id: int, check_in_date: datetime,
                               exclude_id: Optional[int] = None) -> None:
          query = db.query(Visit.id).filter(
               Visit.building_id == building_id,
               Visit.visitor_id == visitor_id,
               Visit.check_in_date == check_in_date,
          )
          if exclude_id is not None:
               query = query.filter(Visit.id != exclude_id)
          if query.first() is not None:
               raise DuplicateVisit()

     @staticmethod
     def _flush_unique(db: Session) -> None:
          """Flush inside a savepoint so a unique-constraint race surfaces as DuplicateVisit."""
          try:
               with db.begin_nested():
                    db.flush()
          except IntegrityError:
               raise DuplicateVisit()

     @staticmethod
     def create_visit(db: Session, requester: User, data: dict) -> Visit:
          """
          Record a check-in.

          Raises:
               NotFound: visitor_not_found / building_not_found
               Forbidden: requester cannot operate the building
               DuplicateVisit: same building, visitor and check-in time
          """
          visitor = db.get(Visitor, data["visitor_id"])
          if visitor is None:
               raise NotFound("visitor_not_found")
          building = db.get(Building, data["building_id"])
          if building is None:
               raise NotFound("building_not_found")
          ensure_can_operate_building(db, requester, building)

          check_in_date = to_naive_utc(data.get("check_in_date")) or utcnow()
          VisitService._ensure_not_duplicate(db, building.id, visitor.id, check_in_date)

          visit = Visit(
               building_id=building.id,
               visitor_id=visitor.id,
               user_id=requester.id,
               purpose=data["purpose"],
               unit=data["unit"],
               check_in_date=check_in_date,
               status=VisitStatus.PENDING,
          )
          db.add(visit)
          VisitService._flush_unique(db)
          logger.info("Visit created id=%s building=%s visitor=%s", visit.id, building.id, visitor.id)
          return visit

     @staticmethod
     def get_visit(db: Session, visit_id: int) -> Visit:
          visit = db.get(Visit, visit_id)
          if visit is None:
               raise NotFound("visit_not_found")
          return visit

     @staticmethod
     def list_visits(db: Session, requester: Optional[User] = None, building_id: Optional[int] = None) -> List[Visit]:
          """
          Visits visible to `requester`: everything for admins, otherwise visits
          of buildings they own or are actively assigned to, plus visits they
          recorded. No requester means no scoping.
          """
          query = db.query(Visit)
          if requester is not None and not is_admin(requester):
               owned = select(Building.id).where(Building.user_id == requester.id)
               assigned = select(DoormanBuilding.building_id).where(
                    DoormanBuilding.user_id == requester.id,
                    DoormanBuilding.status == RecordStatus.ACTIVE,
               )
               query = query.filter(
                    or_(
                         Visit.building_id.in_(owned),
                         Visit.building_id.in_(assigned),
                         Visit.user_id == requester.id,
                    )
               )
          if building_id is not None:
               query = query.filter(Visit.building_id == building_id)
          return query.order_by(Visit.check_in_date.desc(), Visit.id.desc()).all()

     @staticmethod
     def update_visit(db: Session, visit: Visit, changes: dict) -> Visit:
          """
          Update purpose, unit and check-out time; a status change goes through
          the same transitions as complete/cancel. Admin callers may also move
          the check-in time.
          """
          status = changes.get("status")
          if status is not None and status != visit.status:
               if status == VisitStatus.COMPLETED:
                    VisitService.complete_visit(db, visit)
               elif status == VisitStatus.CANCELLED:
                    VisitService.cancel_visit(db, visit)
               else:
                    raise Conflict("visit_already_closed")

          for key in ("purpose", "unit"):
               if changes.get(key) is not None:
                    setattr(visit, key, changes[key])
          if changes.get("check_out_date") is not None:
               visit.check_out_date = to_naive_utc(changes["check_out_date"])

          if changes.get("check_in_date") is not None:
               check_in_date = to_naive_utc(changes["check_in_date"])
               VisitService._ensure_not_duplicate(
                    db, visit.building_id, visit.visitor_id, check_in_date, exclude_id=visit.id
               )
               visit.check_in_date = check_in_date
          VisitService._flush_unique(db)
          return visit

     @staticmethod
     def complete_visit(db: Session, visit: Visit) -> Visit:
          if visit.is_closed:
               raise Conflict("visit_already_closed")
          visit.mark_as_completed()
          db.flush()
          logger.info("Visit completed id=%s", visit.id)
          return visit

     @staticmethod
     def cancel_visit(db: Session, visit: Visit) -> Visit:
          if visit.is_closed:
               raise Conflict("visit_already_closed")
          visit.mark_as_cancelled()
          db.flush()
          logger.info("Visit cancelled id=%s", visit.id)
          return visit

     @staticmethod
     def delete_visit(db: Session, visit: Visit) -> None:
          db.delete(visit)
          db.flush()
