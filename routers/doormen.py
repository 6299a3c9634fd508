# routers/doormen.py
"""
Doorman API routes.

- Registration consumes one user credit of the caller
- A doorman is managed by the user who registered them (or an admin)
- Assignments are managed by the building owner (or an admin)
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_language, require_roles
from models import User, UserRole
from schemas.common import MessageResponse
from schemas.doorman import (
     AssignedBuilding,
     AssignmentRequest,
     AssignmentResponse,
     DoormanRegister,
     DoormanRegisterResponse,
     DoormanResponse,
     DoormanUpdate,
)
from services.access_control import ensure_owner_or_admin, is_admin
from services.building_service import BuildingService
from services.doorman_service import DoormanService
from utils.messages import get_message

router = APIRouter(prefix="/api/app/doorman", tags=["doormen"])

manager = require_roles(UserRole.USER, UserRole.ADMIN)


def _doorman_response(db: Session, doorman: User) -> DoormanResponse:
     response = DoormanResponse.model_validate(doorman)
     response.assigned_buildings = [
          AssignedBuilding.model_validate(building)
          for building in DoormanService.active_buildings(db, doorman.id)
     ]
     return response


def _owned_building(db: Session, building_id: int, user: User):
     building = BuildingService.get_building(db, building_id)
     ensure_owner_or_admin(building, user)
     return building


@router.post(
     "/register",
     response_model=DoormanRegisterResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Register a doorman"
)
def register_doorman(
     body: DoormanRegister,
     db: Session = Depends(get_session),
     user: User = Depends(manager),
     lang: Optional[str] = Depends(get_language)
):
     doorman, entitlement = DoormanService.register_doorman(db, user, body.model_dump())
     db.commit()
     return DoormanRegisterResponse(
          message=get_message("doorman_created", lang),
          doorman=_doorman_response(db, doorman),
          remaining_building_credits=entitlement.remaining_building,
          remaining_user_credits=entitlement.remaining_user,
     )


@router.get("/", response_model=List[DoormanResponse], summary="List doormen I registered")
def list_doormen(
     db: Session = Depends(get_session),
     user: User = Depends(manager)
):
     registrar_id = None if is_admin(user) else user.id
     return [_doorman_response(db, doorman) for doorman in DoormanService.list_doormen(db, registrar_id)]


@router.post("/assign", response_model=AssignmentResponse, status_code=status.HTTP_201_CREATED, summary="Assign a doorman to a building")
def assign_doorman(
     body: AssignmentRequest,
     db: Session = Depends(get_session),
     user: User = Depends(manager)
):
     building = _owned_building(db, body.building_id, user)
     assignment = DoormanService.assign(db, building, body.user_id)
     db.commit()
     return assignment


@router.delete("/remove", response_model=MessageResponse, summary="Remove a doorman assignment")
def remove_doorman(
     body: AssignmentRequest,
     db: Session = Depends(get_session),
     user: User = Depends(manager),
     lang: Optional[str] = Depends(get_language)
):
     _owned_building(db, body.building_id, user)
     DoormanService.remove(db, body.building_id, body.user_id)
     db.commit()
     return MessageResponse(message=get_message("doorman_removed", lang))


@router.post("/assignment/activate", response_model=MessageResponse, summary="Activate an assignment")
def activate_assignment(
     body: AssignmentRequest,
     db: Session = Depends(get_session),
     user: User = Depends(manager),
     lang: Optional[str] = Depends(get_language)
):
     _owned_building(db, body.building_id, user)
     DoormanService.activate_assignment(db, body.building_id, body.user_id)
     db.commit()
     return MessageResponse(message=get_message("assignment_activated", lang))


@router.post("/assignment/deactivate", response_model=MessageResponse, summary="Deactivate an assignment")
def deactivate_assignment(
     body: AssignmentRequest,
     db: Session = Depends(get_session),
     user: User = Depends(manager),
     lang: Optional[str] = Depends(get_language)
):
     _owned_building(db, body.building_id, user)
     DoormanService.deactivate_assignment(db, body.building_id, body.user_id)
     db.commit()
     return MessageResponse(message=get_message("assignment_deactivated", lang))


@router.get("/{building_id}/doormen", response_model=List[AssignmentResponse], summary="Doormen assigned to a building")
def list_building_doormen(
     building_id: int,
     db: Session = Depends(get_session),
     user: User = Depends(manager)
):
     _owned_building(db, building_id, user)
     return DoormanService.list_assignments(db, building_id)


@router.get("/{building_id}/doorman/{user_id}", response_model=AssignmentResponse, summary="Get one assignment")
def get_building_doorman(
     building_id: int,
     user_id: int,
     db: Session = Depends(get_session),
     user: User = Depends(manager)
):
     _owned_building(db, building_id, user)
     return DoormanService.get_assignment(db, building_id, user_id)


@router.get("/{doorman_id}", response_model=DoormanResponse, summary="Get a doorman")
def get_doorman(
     doorman_id: int,
     db: Session = Depends(get_session),
     user: User = Depends(manager)
):
     doorman = DoormanService.get_doorman(db, doorman_id)
     ensure_owner_or_admin(doorman, user, attr="registrar_id")
     return _doorman_response(db, doorman)


@router.put("/{doorman_id}", response_model=DoormanResponse, summary="Edit a doorman")
def edit_doorman(
     doorman_id: int,
     body: DoormanUpdate,
     db: Session = Depends(get_session),
     user: User = Depends(manager)
):
     doorman = DoormanService.get_doorman(db, doorman_id)
     ensure_owner_or_admin(doorman, user, attr="registrar_id")
     DoormanService.edit_doorman(db, doorman, body.model_dump(exclude_unset=True))
     db.commit()
     return _doorman_response(db, doorman)
