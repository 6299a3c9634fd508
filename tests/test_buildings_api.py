from models import CreditAction, CreditTransaction, CreditType, UserRole
from services.ledger_service import count_consumed


def _create(client, headers, payload):
     return client.post("/api/app/buildings", json=payload, headers=headers)


def test_create_without_active_plan_is_denied(client, owner, auth_headers, building_payload):
     response = _create(client, auth_headers(owner), building_payload())

     assert response.status_code == 403
     assert response.json() == {"message": "You do not have an active plan"}


def test_building_credit_is_consumed_one_per_creation(
     client, db, owner, make_plan, grant_plan, auth_headers, building_payload
):
     grant_plan(owner, make_plan(building_credit=3, user_credit=1))
     headers = auth_headers(owner)

     remaining = [
          _create(client, headers, building_payload(name=f"B{i}")).json()["remainingBuildingCredits"]
          for i in range(3)
     ]
     assert remaining == [2, 1, 0]

     response = _create(client, headers, building_payload(name="B3"))
     assert response.status_code == 403
     assert response.json()["message"] == "You have used all building credits of your plan"
     assert count_consumed(db, owner.id, CreditType.BUILDING) == 3


def test_create_response_shape(client, owner, make_plan, grant_plan, auth_headers, building_payload):
     grant_plan(owner, make_plan(building_credit=1, user_credit=4))

     response = _create(client, auth_headers(owner), building_payload())

     assert response.status_code == 201
     body = response.json()
     assert body["message"] == "Building created successfully"
     assert body["remainingBuildingCredits"] == 0
     assert body["remainingUserCredits"] == 4
     building = body["building"]
     assert building["userId"] == owner.id
     assert building["status"] == "active"
     assert building["qrIdentifier"].startswith("BLD_")
     assert building["qrImage"].startswith("data:image/svg+xml;base64,")


def test_credit_recovery_scenario(client, db, owner, admin, make_plan, grant_plan, auth_headers, building_payload):
     grant_plan(owner, make_plan(building_credit=2))
     headers = auth_headers(owner)

     first = _create(client, headers, building_payload(name="A"))
     assert first.json()["remainingBuildingCredits"] == 1
     second = _create(client, headers, building_payload(name="B"))
     assert second.json()["remainingBuildingCredits"] == 0
     assert _create(client, headers, building_payload(name="C")).status_code == 403

     building_a = first.json()["building"]["id"]
     entry = (
          db.query(CreditTransaction)
          .filter(CreditTransaction.building_id == building_a, CreditTransaction.action == CreditAction.ADD)
          .one()
     )
     db.rollback()
     deleted = client.delete(f"/api/credit-transactions/{entry.id}", headers=auth_headers(admin))
     assert deleted.status_code == 200

     third = _create(client, headers, building_payload(name="C"))
     assert third.status_code == 201
     assert third.json()["remainingBuildingCredits"] == 0


def test_validation_errors_are_400(client, owner, make_plan, grant_plan, auth_headers, building_payload):
     grant_plan(owner, make_plan())
     response = _create(client, auth_headers(owner), building_payload(latitude=200))

     assert response.status_code == 400
     body = response.json()
     assert body["message"] == "Validation failed"
     assert body["errors"]


def test_non_owner_cannot_mutate(client, owner, make_user, make_plan, grant_plan, auth_headers, building_payload):
     grant_plan(owner, make_plan())
     building_id = _create(client, auth_headers(owner), building_payload()).json()["building"]["id"]
     stranger = make_user()
     headers = auth_headers(stranger)

     assert client.put(f"/api/app/buildings/{building_id}", json={"name": "X"}, headers=headers).status_code == 403
     assert client.put(f"/api/app/buildings/{building_id}/deactivate", headers=headers).status_code == 403
     assert client.delete(f"/api/app/buildings/{building_id}", headers=headers).status_code == 403


def test_admin_is_not_owner_on_app_surface_but_manages_through_admin_surface(
     client, owner, admin, make_plan, grant_plan, auth_headers, building_payload
):
     grant_plan(owner, make_plan())
     building_id = _create(client, auth_headers(owner), building_payload()).json()["building"]["id"]
     headers = auth_headers(admin)

     assert client.put(f"/api/app/buildings/{building_id}", json={"name": "X"}, headers=headers).status_code == 403

     updated = client.put(f"/api/admin/buildings/{building_id}", json={"name": "Renamed"}, headers=headers)
     assert updated.status_code == 200
     assert updated.json()["name"] == "Renamed"
     assert client.put(f"/api/admin/buildings/{building_id}/inactivate", headers=headers).status_code == 200
     assert client.delete(f"/api/admin/buildings/{building_id}", headers=headers).status_code == 200


def test_owner_update_and_toggle_guards(client, owner, make_plan, grant_plan, auth_headers, building_payload):
     grant_plan(owner, make_plan())
     headers = auth_headers(owner)
     building_id = _create(client, headers, building_payload()).json()["building"]["id"]

     updated = client.put(f"/api/app/buildings/{building_id}", json={"city": "Jeddah"}, headers=headers)
     assert updated.json()["city"] == "Jeddah"

     again = client.put(f"/api/app/buildings/{building_id}/activate", headers=headers)
     assert again.status_code == 400
     assert again.json()["message"] == "Building is already active"

     assert client.put(f"/api/app/buildings/{building_id}/deactivate", headers=headers).status_code == 200
     twice = client.put(f"/api/app/buildings/{building_id}/deactivate", headers=headers)
     assert twice.status_code == 400
     assert twice.json()["message"] == "Building is already inactive"


def test_delete_records_audit_row_without_releasing_credit(
     client, db, owner, make_plan, grant_plan, auth_headers, building_payload
):
     grant_plan(owner, make_plan(building_credit=1))
     headers = auth_headers(owner)
     building_id = _create(client, headers, building_payload()).json()["building"]["id"]

     assert client.delete(f"/api/app/buildings/{building_id}", headers=headers).status_code == 200
     assert client.get(f"/api/app/buildings/{building_id}", headers=headers).status_code == 404

     actions = sorted(
          entry.action.value
          for entry in db.query(CreditTransaction).filter(CreditTransaction.user_id == owner.id)
     )
     assert actions == ["add", "delete"]
     assert count_consumed(db, owner.id, CreditType.BUILDING) == 1
     db.rollback()
     assert _create(client, headers, building_payload(name="Again")).status_code == 403


def test_list_returns_only_own_buildings(client, owner, make_user, make_plan, grant_plan, auth_headers, building_payload):
     other = make_user()
     plan = make_plan()
     grant_plan(owner, plan)
     grant_plan(other, plan)
     _create(client, auth_headers(owner), building_payload(name="Mine"))
     _create(client, auth_headers(other), building_payload(name="Theirs"))

     names = [b["name"] for b in client.get("/api/app/buildings", headers=auth_headers(owner)).json()]
     assert names == ["Mine"]


def test_admin_creation_uses_target_owner_credits(client, owner, admin, make_plan, grant_plan, auth_headers, building_payload):
     headers = auth_headers(admin)
     payload = building_payload(userId=owner.id)

     denied = client.post("/api/admin/buildings", json=payload, headers=headers)
     assert denied.status_code == 403

     grant_plan(owner, make_plan(building_credit=1))
     created = client.post("/api/admin/buildings", json=payload, headers=headers)
     assert created.status_code == 201
     assert created.json()["building"]["userId"] == owner.id
     assert created.json()["remainingBuildingCredits"] == 0


def test_doorman_cannot_create_buildings(client, make_user, auth_headers, building_payload):
     doorman = make_user(role=UserRole.DOORMAN)
     response = _create(client, auth_headers(doorman), building_payload())
     assert response.status_code == 403
