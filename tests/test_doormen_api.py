import pytest

from models import CreditType, User, UserRole
from services.ledger_service import count_consumed


def _doorman_payload(n, **overrides):
     payload = {
          "fullname": f"Doorman {n}",
          "email": f"doorman{n}@example.com",
          "password": "door-pass",
          "phone": f"+96655500{n:04d}",
          "idNumber": f"20000{n:05d}",
     }
     payload.update(overrides)
     return payload


@pytest.fixture
def setup(client, owner, make_plan, grant_plan, auth_headers, building_payload):
     grant_plan(owner, make_plan(building_credit=2, user_credit=2))
     headers = auth_headers(owner)
     building = client.post("/api/app/buildings", json=building_payload(), headers=headers).json()["building"]
     doorman = client.post("/api/app/doorman/register", json=_doorman_payload(1), headers=headers).json()["doorman"]
     return {"headers": headers, "building": building, "doorman": doorman}


def _assignment(setup):
     return {"buildingId": setup["building"]["id"], "userId": setup["doorman"]["id"]}


def test_register_consumes_user_credit(client, db, owner, setup):
     response = client.post("/api/app/doorman/register", json=_doorman_payload(2), headers=setup["headers"])

     assert response.status_code == 201
     body = response.json()
     assert body["remainingUserCredits"] == 0
     assert body["remainingBuildingCredits"] == 1
     assert body["doorman"]["role"] == "doorman"
     assert body["doorman"]["registrarId"] == owner.id
     assert count_consumed(db, owner.id, CreditType.USER) == 2

     stored = db.get(User, body["doorman"]["id"])
     assert stored.password != "door-pass"

     exceeded = client.post("/api/app/doorman/register", json=_doorman_payload(3), headers=setup["headers"])
     assert exceeded.status_code == 403
     assert exceeded.json()["message"] == "You have used all user credits of your plan"


def test_register_rejects_duplicate_identity(client, setup):
     response = client.post(
          "/api/app/doorman/register",
          json=_doorman_payload(2, email="doorman1@example.com"),
          headers=setup["headers"],
     )
     assert response.status_code == 400
     assert response.json()["message"] == "Email is already in use"

     response = client.post(
          "/api/app/doorman/register",
          json=_doorman_payload(3, idNumber="2000000001"),
          headers=setup["headers"],
     )
     assert response.json()["message"] == "ID number is already in use"


def test_doorman_can_log_in(client, setup):
     response = client.post("/api/user/login", json={"email": "doorman1@example.com", "password": "door-pass"})
     assert response.status_code == 200
     assert response.json()["user"]["role"] == "doorman"


def test_assign_twice_conflicts_and_reassign_after_deactivation(client, setup):
     headers = setup["headers"]
     body = _assignment(setup)

     first = client.post("/api/app/doorman/assign", json=body, headers=headers)
     assert first.status_code == 201
     assert first.json()["status"] == "active"

     second = client.post("/api/app/doorman/assign", json=body, headers=headers)
     assert second.status_code == 400
     assert second.json()["message"] == "Doorman is already assigned to this building"

     assert client.post("/api/app/doorman/assignment/deactivate", json=body, headers=headers).status_code == 200
     again = client.post("/api/app/doorman/assign", json=body, headers=headers)
     assert again.status_code == 201
     assert again.json()["id"] == first.json()["id"]


def test_assignment_toggle_guards(client, setup):
     headers = setup["headers"]
     body = _assignment(setup)

     missing = client.post("/api/app/doorman/assignment/deactivate", json=body, headers=headers)
     assert missing.status_code == 404
     assert missing.json()["message"] == "No active assignment found"

     client.post("/api/app/doorman/assign", json=body, headers=headers)
     already = client.post("/api/app/doorman/assignment/activate", json=body, headers=headers)
     assert already.status_code == 400
     assert already.json()["message"] == "Doorman assignment is already active"

     client.post("/api/app/doorman/assignment/deactivate", json=body, headers=headers)
     twice = client.post("/api/app/doorman/assignment/deactivate", json=body, headers=headers)
     assert twice.status_code == 400
     assert twice.json()["message"] == "Doorman assignment is already inactive"

     assert client.post("/api/app/doorman/assignment/activate", json=body, headers=headers).status_code == 200


def test_assign_requires_a_doorman(client, owner, setup):
     body = {"buildingId": setup["building"]["id"], "userId": owner.id}
     response = client.post("/api/app/doorman/assign", json=body, headers=setup["headers"])
     assert response.status_code == 400
     assert response.json()["message"] == "The selected user is not a doorman"


def test_only_building_owner_assigns(client, make_user, auth_headers, setup):
     stranger = make_user()
     response = client.post("/api/app/doorman/assign", json=_assignment(setup), headers=auth_headers(stranger))
     assert response.status_code == 403


def test_list_get_and_remove_assignments(client, setup):
     headers = setup["headers"]
     body = _assignment(setup)
     building_id, doorman_id = body["buildingId"], body["userId"]
     client.post("/api/app/doorman/assign", json=body, headers=headers)

     listed = client.get(f"/api/app/doorman/{building_id}/doormen", headers=headers).json()
     assert [row["userId"] for row in listed] == [doorman_id]
     one = client.get(f"/api/app/doorman/{building_id}/doorman/{doorman_id}", headers=headers)
     assert one.status_code == 200

     doorman = client.get(f"/api/app/doorman/{doorman_id}", headers=headers).json()
     assert [b["id"] for b in doorman["assignedBuildings"]] == [building_id]

     removed = client.request("DELETE", "/api/app/doorman/remove", json=body, headers=headers)
     assert removed.status_code == 200
     assert client.get(f"/api/app/doorman/{building_id}/doorman/{doorman_id}", headers=headers).status_code == 404


def test_doormen_are_scoped_to_registrar(client, make_user, admin, auth_headers, setup):
     other = make_user()
     doorman_id = setup["doorman"]["id"]

     assert client.get("/api/app/doorman/", headers=auth_headers(other)).json() == []
     assert client.get(f"/api/app/doorman/{doorman_id}", headers=auth_headers(other)).status_code == 403
     mine = client.get("/api/app/doorman/", headers=setup["headers"]).json()
     assert [d["id"] for d in mine] == [doorman_id]

     everyone = client.get("/api/app/doorman/", headers=auth_headers(admin)).json()
     assert doorman_id in [d["id"] for d in everyone]


def test_edit_doorman_rechecks_uniqueness(client, owner, setup):
     doorman_id = setup["doorman"]["id"]
     headers = setup["headers"]

     clash = client.put(f"/api/app/doorman/{doorman_id}", json={"phone": owner.phone}, headers=headers)
     assert clash.status_code == 400
     assert clash.json()["message"] == "Phone number is already in use"

     updated = client.put(f"/api/app/doorman/{doorman_id}", json={"fullname": "New Name"}, headers=headers)
     assert updated.status_code == 200
     assert updated.json()["fullname"] == "New Name"


def test_doorman_role_cannot_register_doormen(client, make_user, auth_headers):
     doorman = make_user(role=UserRole.DOORMAN)
     response = client.post("/api/app/doorman/register", json=_doorman_payload(9), headers=auth_headers(doorman))
     assert response.status_code == 403
