import pytest

from errors import Forbidden
from models import Building, BuildingType, DoormanBuilding, RecordStatus, UserRole
from services.access_control import (
     can_operate_building,
     ensure_owner,
     ensure_role,
     has_role,
     is_owner,
)


@pytest.fixture
def building(db, owner):
     building = Building(
          user_id=owner.id,
          name="Tower",
          address="Street 1",
          city="Riyadh",
          latitude=24.7,
          longitude=46.6,
          type=BuildingType.TOWER,
          qr_identifier="BLD_test0001",
     )
     db.add(building)
     db.commit()
     return building


def test_role_checks(owner, admin):
     assert has_role(admin, [UserRole.ADMIN])
     assert not has_role(owner, [UserRole.ADMIN, UserRole.DOORMAN])
     ensure_role(owner, UserRole.USER, UserRole.ADMIN)
     with pytest.raises(Forbidden):
          ensure_role(owner, UserRole.ADMIN)


def test_ownership_is_independent_of_role(building, owner, admin):
     assert is_owner(building, owner)
     assert not is_owner(building, admin)
     with pytest.raises(Forbidden):
          ensure_owner(building, admin)


def test_can_operate_building(db, building, owner, admin, make_user):
     doorman = make_user(role=UserRole.DOORMAN)
     stranger = make_user()

     assert can_operate_building(db, owner, building)
     assert can_operate_building(db, admin, building)
     assert not can_operate_building(db, stranger, building)
     assert not can_operate_building(db, doorman, building)

     assignment = DoormanBuilding(building_id=building.id, user_id=doorman.id, status=RecordStatus.ACTIVE)
     db.add(assignment)
     db.commit()
     assert can_operate_building(db, doorman, building)

     assignment.status = RecordStatus.INACTIVE
     db.commit()
     assert not can_operate_building(db, doorman, building)
