# routers/buildings.py
"""
Building API routes for the app surface.

Every mutation is owner-only: the requester must be the user recorded on
the building, whatever their role. Admins manage any building through
/api/admin/buildings.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_current_user, get_language, require_roles
from models import RecordStatus, User, UserRole
from schemas.building import BuildingCreate, BuildingCreateResponse, BuildingResponse, BuildingUpdate
from schemas.common import MessageResponse
from services.access_control import ensure_can_operate_building, ensure_owner
from services.building_service import BuildingService
from utils.messages import get_message

router = APIRouter(prefix="/api/app", tags=["buildings"])


def building_created_response(building, entitlement, lang: Optional[str]) -> BuildingCreateResponse:
     return BuildingCreateResponse(
          message=get_message("building_created", lang),
          building=BuildingResponse.model_validate(building),
          remaining_building_credits=entitlement.remaining_building,
          remaining_user_credits=entitlement.remaining_user,
     )


@router.post(
     "/buildings",
     response_model=BuildingCreateResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a building"
)
def create_building(
     body: BuildingCreate,
     db: Session = Depends(get_session),
     user: User = Depends(require_roles(UserRole.USER, UserRole.ADMIN)),
     lang: Optional[str] = Depends(get_language)
):
     """
     Create a building owned by the caller.

     - Requires an active plan grant (403 no_active_plan)
     - Consumes one building credit (403 building_credit_exceeded when none are left)
     - Generates the building's QR identifier and image
     """
     building, entitlement = BuildingService.create_building(db, user.id, body.model_dump())
     db.commit()
     return building_created_response(building, entitlement, lang)


@router.get("/buildings", response_model=List[BuildingResponse], summary="List my buildings")
def list_my_buildings(
     db: Session = Depends(get_session),
     user: User = Depends(get_current_user)
):
     return BuildingService.list_buildings(db, owner_id=user.id)


@router.get("/buildings/{building_id}", response_model=BuildingResponse, summary="Get a building")
def get_building(
     building_id: int,
     db: Session = Depends(get_session),
     user: User = Depends(get_current_user)
):
     building = BuildingService.get_building(db, building_id)
     ensure_can_operate_building(db, user, building)
     return building


@router.put("/buildings/{building_id}", response_model=BuildingResponse, summary="Update a building")
def update_building(
     building_id: int,
     body: BuildingUpdate,
     db: Session = Depends(get_session),
     user: User = Depends(get_current_user)
):
     building = BuildingService.get_building(db, building_id)
     ensure_owner(building, user)
     BuildingService.update_building(db, building, body.model_dump(exclude_unset=True))
     db.commit()
     return building


@router.delete("/buildings/{building_id}", response_model=MessageResponse, summary="Delete a building")
def delete_building(
     building_id: int,
     db: Session = Depends(get_session),
     user: User = Depends(get_current_user),
     lang: Optional[str] = Depends(get_language)
):
     building = BuildingService.get_building(db, building_id)
     ensure_owner(building, user)
     BuildingService.delete_building(db, building)
     db.commit()
     return MessageResponse(message=get_message("building_deleted", lang))


@router.put("/buildings/{building_id}/activate", response_model=MessageResponse, summary="Activate a building")
def activate_building(
     building_id: int,
     db: Session = Depends(get_session),
     user: User = Depends(get_current_user),
     lang: Optional[str] = Depends(get_language)
):
     building = BuildingService.get_building(db, building_id)
     ensure_owner(building, user)
     BuildingService.set_status(db, building, RecordStatus.ACTIVE)
     db.commit()
     return MessageResponse(message=get_message("building_activated", lang))


@router.put("/buildings/{building_id}/deactivate", response_model=MessageResponse, summary="Deactivate a building")
def deactivate_building(
     building_id: int,
     db: Session = Depends(get_session),
     user: User = Depends(get_current_user),
     lang: Optional[str] = Depends(get_language)
):
     building = BuildingService.get_building(db, building_id)
     ensure_owner(building, user)
     BuildingService.set_status(db, building, RecordStatus.INACTIVE)
     db.commit()
     return MessageResponse(message=get_message("building_inactivated", lang))
