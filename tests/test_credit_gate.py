"""
Credit gate under concurrent requests, and rollback of a failed creation.

Runs against a file-backed SQLite database so each request thread gets its
own connection and the credit lock row actually serializes them.
"""
import threading

import pytest
from sqlalchemy import create_engine

from models import Base, Building, BuildingType, CreditTransaction, CreditType
from services.building_service import BuildingService
from services.ledger_service import count_consumed

THREADS = 8


@pytest.fixture
def engine(tmp_path):
     engine = create_engine(
          f"sqlite:///{tmp_path / 'haladesk.db'}",
          connect_args={"check_same_thread": False, "timeout": 30},
     )
     Base.metadata.create_all(bind=engine)
     yield engine
     Base.metadata.drop_all(bind=engine)
     engine.dispose()


def test_concurrent_creations_take_the_last_credit_once(
     client, db, owner, make_plan, grant_plan, auth_headers, building_payload
):
     grant_plan(owner, make_plan(building_credit=1))
     headers = auth_headers(owner)
     barrier = threading.Barrier(THREADS)
     statuses = []

     def create(n):
          barrier.wait()
          response = client.post("/api/app/buildings", json=building_payload(name=f"Tower {n}"), headers=headers)
          statuses.append(response.status_code)

     threads = [threading.Thread(target=create, args=(n,)) for n in range(THREADS)]
     for thread in threads:
          thread.start()
     for thread in threads:
          thread.join()

     assert len(statuses) == THREADS
     assert statuses.count(201) == 1
     assert statuses.count(403) == THREADS - 1

     db.expire_all()
     assert count_consumed(db, owner.id, CreditType.BUILDING) == 1
     assert db.query(Building).filter(Building.user_id == owner.id).count() == 1


def test_failed_creation_leaves_no_building_and_no_ledger_row(
     client, db, owner, make_plan, grant_plan, auth_headers, building_payload, monkeypatch
):
     grant_plan(owner, make_plan(building_credit=1))

     def broken_encoder(*args, **kwargs):
          raise RuntimeError("QR encoder unavailable")

     monkeypatch.setattr("services.building_service.render_building_qr", broken_encoder)
     data = {
          "name": "Al Noor Tower",
          "address": "Olaya Street 12",
          "city": "Riyadh",
          "latitude": 24.7136,
          "longitude": 46.6753,
          "type": BuildingType.TOWER,
     }
     with pytest.raises(RuntimeError):
          BuildingService.create_building(db, owner.id, data)
     db.rollback()

     assert db.query(Building).count() == 0
     assert db.query(CreditTransaction).count() == 0
     db.rollback()

     monkeypatch.undo()
     response = client.post("/api/app/buildings", json=building_payload(), headers=auth_headers(owner))
     assert response.status_code == 201
     assert response.json()["remainingBuildingCredits"] == 0
