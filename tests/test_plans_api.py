from models import ActivePlanStatus


def _plan_payload(**overrides):
     payload = {"planName": "Basic", "buildingCredit": 2, "userCredit": 3, "monthlyVisits": 500, "price": "199.00"}
     payload.update(overrides)
     return payload


def test_admin_plan_crud_and_public_listing(client, admin, owner, auth_headers):
     headers = auth_headers(admin)
     created = client.post("/api/admin/plans", json=_plan_payload(), headers=headers)
     assert created.status_code == 201
     plan_id = created.json()["id"]
     assert created.json()["buildingCredit"] == 2

     public = client.get("/api/plans").json()
     assert [p["id"] for p in public] == [plan_id]

     assert client.put(f"/api/admin/plans/{plan_id}/inactivate", headers=headers).status_code == 200
     assert client.put(f"/api/admin/plans/{plan_id}/inactivate", headers=headers).status_code == 400
     assert client.get("/api/plans").json() == []
     assert client.get(f"/api/plans/{plan_id}").status_code == 404
     assert client.get(f"/api/admin/plans/{plan_id}", headers=headers).status_code == 200

     assert client.post("/api/admin/plans", json=_plan_payload(), headers=auth_headers(owner)).status_code == 403


def test_subscription_lifecycle(client, admin, owner, make_plan, auth_headers):
     plan = make_plan(building_credit=4, user_credit=1)
     headers = auth_headers(owner)

     subscribed = client.post("/api/active-plans", json={"planId": plan.id}, headers=headers)
     assert subscribed.status_code == 201
     grant = subscribed.json()
     assert grant["status"] == "pending"
     assert grant["buildingCredit"] == 4

     assert client.get("/api/entitlement", headers=headers).status_code == 403

     admin_headers = auth_headers(admin)
     activated = client.put(f"/api/admin/active-plans/{grant['id']}/activate", headers=admin_headers)
     assert activated.json()["status"] == "active"
     assert client.put(f"/api/admin/active-plans/{grant['id']}/activate", headers=admin_headers).status_code == 400

     entitlement = client.get("/api/entitlement", headers=headers).json()
     assert entitlement["remainingBuildingCredits"] == 4
     assert entitlement["remainingUserCredits"] == 1
     assert entitlement["planName"] == plan.plan_name

     cancelled = client.put(f"/api/active-plans/{grant['id']}/cancel", headers=headers)
     assert cancelled.json()["status"] == "cancelled"
     assert client.put(f"/api/active-plans/{grant['id']}/cancel", headers=headers).status_code == 400
     assert client.put(f"/api/admin/active-plans/{grant['id']}/expire", headers=admin_headers).status_code == 400


def test_expire_active_grant(client, admin, owner, make_plan, grant_plan, auth_headers):
     grant = grant_plan(owner, make_plan())
     response = client.put(f"/api/admin/active-plans/{grant.id}/expire", headers=auth_headers(admin))
     assert response.json()["status"] == ActivePlanStatus.EXPIRED.value
     assert client.get("/api/entitlement", headers=auth_headers(owner)).status_code == 403


def test_grants_are_private(client, owner, make_user, make_plan, grant_plan, auth_headers):
     grant = grant_plan(owner, make_plan())
     stranger = make_user()

     assert client.get(f"/api/active-plans/{grant.id}", headers=auth_headers(owner)).status_code == 200
     assert client.get(f"/api/active-plans/{grant.id}", headers=auth_headers(stranger)).status_code == 403
     assert client.put(f"/api/active-plans/{grant.id}/cancel", headers=auth_headers(stranger)).status_code == 403
     assert client.get("/api/active-plans", headers=auth_headers(stranger)).json() == []


def test_cannot_subscribe_to_inactive_plan(client, owner, make_plan, auth_headers):
     from models import RecordStatus

     plan = make_plan(status=RecordStatus.INACTIVE)
     response = client.post("/api/active-plans", json={"planId": plan.id}, headers=auth_headers(owner))
     assert response.status_code == 404
     assert response.json()["message"] == "Plan not found"


def test_plan_in_use_cannot_be_deleted(client, admin, owner, make_plan, grant_plan, auth_headers):
     used = make_plan()
     unused = make_plan()
     grant_plan(owner, used)
     headers = auth_headers(admin)

     response = client.delete(f"/api/admin/plans/{used.id}", headers=headers)
     assert response.status_code == 400
     assert response.json()["message"] == "Plan has been subscribed to and cannot be deleted"
     assert client.delete(f"/api/admin/plans/{unused.id}", headers=headers).status_code == 200


def test_plan_edit_keeps_issued_quota(client, admin, owner, make_plan, grant_plan, auth_headers):
     plan = make_plan(building_credit=1)
     grant_plan(owner, plan)

     client.put(f"/api/admin/plans/{plan.id}", json={"buildingCredit": 9}, headers=auth_headers(admin))
     entitlement = client.get("/api/entitlement", headers=auth_headers(owner)).json()
     assert entitlement["buildingQuota"] == 1
