# routers/admin/buildings.py
"""
Admin building routes. Same services as the app surface, without the
ownership check.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_language, require_admin
from models import RecordStatus, User
from routers.buildings import building_created_response
from schemas.building import AdminBuildingCreate, AdminBuildingUpdate, BuildingCreateResponse, BuildingResponse
from schemas.common import MessageResponse
from services.building_service import BuildingService
from services.user_service import UserService
from utils.messages import get_message

router = APIRouter(prefix="/api/admin/buildings", tags=["admin"])


@router.get("", response_model=List[BuildingResponse], summary="List all buildings")
def list_buildings(
     user_id: Optional[int] = Query(None, alias="userId"),
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin)
):
     return BuildingService.list_buildings(db, owner_id=user_id)


@router.post("", response_model=BuildingCreateResponse, status_code=status.HTTP_201_CREATED, summary="Create a building for a user")
def create_building(
     body: AdminBuildingCreate,
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin),
     lang: Optional[str] = Depends(get_language)
):
     """
     The building credit is taken from the target owner's plan, exactly as
     if the owner had created it.
     """
     owner = UserService.get_user(db, body.user_id)
     building, entitlement = BuildingService.create_building(
          db, owner.id, body.model_dump(exclude={"user_id"})
     )
     db.commit()
     return building_created_response(building, entitlement, lang)


@router.get("/{building_id}", response_model=BuildingResponse, summary="Get any building")
def get_building(
     building_id: int,
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin)
):
     return BuildingService.get_building(db, building_id)


@router.put("/{building_id}", response_model=BuildingResponse, summary="Update any building")
def update_building(
     building_id: int,
     body: AdminBuildingUpdate,
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin)
):
     building = BuildingService.get_building(db, building_id)
     changes = body.model_dump(exclude_unset=True)
     owner_id = changes.pop("user_id", None)
     if owner_id is not None:
          BuildingService.reassign_owner(db, building, owner_id)
     BuildingService.update_building(db, building, changes)
     db.commit()
     return building


@router.delete("/{building_id}", response_model=MessageResponse, summary="Delete any building")
def delete_building(
     building_id: int,
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin),
     lang: Optional[str] = Depends(get_language)
):
     building = BuildingService.get_building(db, building_id)
     BuildingService.delete_building(db, building)
     db.commit()
     return MessageResponse(message=get_message("building_deleted", lang))


@router.put("/{building_id}/activate", response_model=MessageResponse, summary="Activate any building")
def activate_building(
     building_id: int,
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin),
     lang: Optional[str] = Depends(get_language)
):
     building = BuildingService.get_building(db, building_id)
     BuildingService.set_status(db, building, RecordStatus.ACTIVE)
     db.commit()
     return MessageResponse(message=get_message("building_activated", lang))


@router.put("/{building_id}/inactivate", response_model=MessageResponse, summary="Inactivate any building")
def inactivate_building(
     building_id: int,
     db: Session = Depends(get_session),
     admin: User = Depends(require_admin),
     lang: Optional[str] = Depends(get_language)
):
     building = BuildingService.get_building(db, building_id)
     BuildingService.set_status(db, building, RecordStatus.INACTIVE)
     db.commit()
     return MessageResponse(message=get_message("building_inactivated", lang))
