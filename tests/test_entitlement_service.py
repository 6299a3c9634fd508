from datetime import timedelta

import pytest

from errors import CreditExceeded, NoActivePlan
from models import ActivePlanStatus, CreditType, utcnow
from services.entitlement_service import (
     get_current_active_plan,
     record_consumption,
     reserve_credit,
     resolve_entitlement,
)


def test_no_grant_means_no_active_plan(db, owner):
     with pytest.raises(NoActivePlan):
          resolve_entitlement(db, owner.id)


def test_pending_and_cancelled_grants_do_not_count(db, owner, make_plan, grant_plan):
     plan = make_plan()
     grant_plan(owner, plan, status=ActivePlanStatus.PENDING)
     grant_plan(owner, plan, status=ActivePlanStatus.CANCELLED)

     with pytest.raises(NoActivePlan):
          reserve_credit(db, owner.id, CreditType.BUILDING)


def test_most_recent_active_grant_wins(db, owner, make_plan, grant_plan):
     small = make_plan(building_credit=1)
     large = make_plan(building_credit=5)
     grant_plan(owner, large, date=utcnow() - timedelta(days=10))
     recent = grant_plan(owner, small)

     assert get_current_active_plan(db, owner.id).id == recent.id
     entitlement = resolve_entitlement(db, owner.id)
     assert entitlement.building_quota == 1
     assert entitlement.plan.id == small.id


def test_reserve_then_record_until_quota_is_used(db, owner, make_plan, grant_plan):
     grant_plan(owner, make_plan(building_credit=2, user_credit=1))

     for expected_remaining in (1, 0):
          entitlement = reserve_credit(db, owner.id, CreditType.BUILDING)
          entitlement = record_consumption(db, entitlement, CreditType.BUILDING, "Building creation")
          db.commit()
          assert entitlement.remaining_building == expected_remaining
          assert entitlement.remaining_user == 1

     with pytest.raises(CreditExceeded) as excinfo:
          reserve_credit(db, owner.id, CreditType.BUILDING)
     assert excinfo.value.message_key == "building_credit_exceeded"


def test_user_credit_uses_its_own_message(db, owner, make_plan, grant_plan):
     grant_plan(owner, make_plan(user_credit=0))

     with pytest.raises(CreditExceeded) as excinfo:
          reserve_credit(db, owner.id, CreditType.USER)
     assert excinfo.value.message_key == "user_credit_exceeded"


def test_plan_edit_does_not_change_issued_grant(db, owner, make_plan, grant_plan):
     plan = make_plan(building_credit=2)
     grant_plan(owner, plan)

     plan.building_credit = 10
     db.commit()

     assert resolve_entitlement(db, owner.id).building_quota == 2


def test_grant_without_snapshot_falls_back_to_plan(db, owner, make_plan, grant_plan):
     plan = make_plan(building_credit=3, user_credit=4)
     grant_plan(owner, plan, snapshot=False)

     entitlement = resolve_entitlement(db, owner.id)
     assert entitlement.building_quota == 3
     assert entitlement.user_quota == 4
