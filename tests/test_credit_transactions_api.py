import pytest


@pytest.fixture
def entries(client, owner, make_user, admin, auth_headers):
     other = make_user()
     headers = auth_headers(admin)
     created = []
     for user, kind in ((owner, "building"), (owner, "user"), (other, "building")):
          response = client.post(
               "/api/credit-transactions",
               json={"userId": user.id, "type": kind, "purpose": "Manual adjustment"},
               headers=headers,
          )
          assert response.status_code == 201
          created.append(response.json())
     return created


def test_only_admin_can_append(client, owner, auth_headers):
     response = client.post(
          "/api/credit-transactions",
          json={"userId": owner.id, "type": "building", "purpose": "Self-service"},
          headers=auth_headers(owner),
     )
     assert response.status_code == 403


def test_response_is_camel_case(entries, owner):
     entry = entries[0]
     assert entry["userId"] == owner.id
     assert entry["action"] == "add"
     assert entry["deleted"] is False
     assert entry["deletedAt"] is None


def test_non_admin_lists_own_rows(client, owner, admin, auth_headers, entries):
     own = client.get("/api/credit-transactions", headers=auth_headers(owner)).json()
     assert {row["userId"] for row in own} == {owner.id}
     assert len(own) == 2

     everyone = client.get("/api/credit-transactions", headers=auth_headers(admin)).json()
     assert len(everyone) == 3

     other_id = entries[2]["id"]
     assert client.get(f"/api/credit-transactions/{other_id}", headers=auth_headers(owner)).status_code == 403


def test_soft_delete_and_restore(client, owner, admin, auth_headers, entries):
     headers = auth_headers(admin)
     entry_id = entries[0]["id"]

     assert client.delete(f"/api/credit-transactions/{entry_id}", headers=auth_headers(owner)).status_code == 403
     assert client.delete(f"/api/credit-transactions/{entry_id}", headers=headers).status_code == 200
     assert client.delete(f"/api/credit-transactions/{entry_id}", headers=headers).status_code == 404

     visible = client.get("/api/credit-transactions", headers=auth_headers(owner)).json()
     assert entry_id not in [row["id"] for row in visible]
     with_deleted = client.get(
          "/api/credit-transactions", params={"includeDeleted": "true"}, headers=auth_headers(owner)
     ).json()
     deleted = [row for row in with_deleted if row["id"] == entry_id][0]
     assert deleted["deleted"] is True
     assert deleted["deletedAt"] is not None

     restored = client.put(f"/api/credit-transactions/{entry_id}/restore", headers=headers)
     assert restored.status_code == 200
     assert restored.json()["deleted"] is False
     assert client.put(f"/api/credit-transactions/{entry_id}/restore", headers=headers).status_code == 404


def test_post_is_an_alias_for_soft_delete(client, admin, auth_headers, entries):
     entry_id = entries[1]["id"]
     response = client.post(f"/api/credit-transactions/{entry_id}", headers=auth_headers(admin))
     assert response.status_code == 200
     assert response.json()["message"] == "Credit transaction deleted"


def test_unknown_user_is_not_found(client, admin, auth_headers):
     response = client.post(
          "/api/credit-transactions",
          json={"userId": 999, "type": "building", "purpose": "Manual adjustment"},
          headers=auth_headers(admin),
     )
     assert response.status_code == 404


def test_building_must_belong_to_the_row_owner(
     client, owner, make_user, admin, make_plan, grant_plan, auth_headers, building_payload
):
     grant_plan(owner, make_plan())
     building_id = client.post(
          "/api/app/buildings", json=building_payload(), headers=auth_headers(owner)
     ).json()["building"]["id"]
     stranger = make_user()
     headers = auth_headers(admin)

     def append(user_id, building):
          return client.post(
               "/api/credit-transactions",
               json={"userId": user_id, "type": "building", "purpose": "Manual adjustment", "buildingId": building},
               headers=headers,
          )

     assert append(stranger.id, building_id).status_code == 403
     assert append(owner.id, 999).status_code == 404
     accepted = append(owner.id, building_id)
     assert accepted.status_code == 201
     assert accepted.json()["buildingId"] == building_id
