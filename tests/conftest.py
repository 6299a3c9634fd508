"""
Shared pytest fixtures.

- In-memory SQLite engine (StaticPool), tables created per test
- FastAPI TestClient with get_session overridden
- Factories for users, plans and plan grants, plus bearer headers
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["EMAIL_DELIVERY_ENABLED"] = "false"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["DEFAULT_LANGUAGE"] = "en"

from decimal import Decimal
from itertools import count

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import get_session
from main import app
from models import ActivePlan, ActivePlanStatus, Base, Plan, RecordStatus, User, UserRole, utcnow
from security import create_access_token, hash_password

PASSWORD = "secret-pass"

# Hashing once keeps the suite fast; bcrypt verifies any copy of the hash.
PASSWORD_HASH = hash_password(PASSWORD)

_sequence = count(1)


@pytest.fixture
def engine():
     engine = create_engine(
          "sqlite://",
          connect_args={"check_same_thread": False},
          poolclass=StaticPool,
     )
     Base.metadata.create_all(bind=engine)
     yield engine
     Base.metadata.drop_all(bind=engine)
     engine.dispose()


@pytest.fixture
def session_factory(engine):
     return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
     session = session_factory()
     yield session
     session.rollback()
     session.close()


@pytest.fixture
def client(session_factory):
     def override_get_session():
          session = session_factory()
          try:
               yield session
               session.commit()
          except Exception:
               session.rollback()
               raise
          finally:
               session.close()

     app.dependency_overrides[get_session] = override_get_session
     with TestClient(app) as test_client:
          yield test_client
     app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

@pytest.fixture
def make_user(db):
     def factory(role=UserRole.USER, status=RecordStatus.ACTIVE, email_confirmed=True, **overrides):
          n = next(_sequence)
          user = User(
               fullname=overrides.pop("fullname", f"User {n}"),
               email=overrides.pop("email", f"user{n}@example.com"),
               password=PASSWORD_HASH,
               phone=overrides.pop("phone", f"+96650000{n:04d}"),
               id_number=overrides.pop("id_number", f"10000{n:05d}"),
               role=role,
               status=status,
               email_confirmed=email_confirmed,
               **overrides,
          )
          db.add(user)
          db.commit()
          return user

     return factory


@pytest.fixture
def make_plan(db):
     def factory(building_credit=2, user_credit=2, monthly_visits=100, status=RecordStatus.ACTIVE, **overrides):
          plan = Plan(
               plan_name=overrides.pop("plan_name", f"Plan {next(_sequence)}"),
               building_credit=building_credit,
               user_credit=user_credit,
               monthly_visits=monthly_visits,
               price=overrides.pop("price", Decimal("99.00")),
               status=status,
          )
          db.add(plan)
          db.commit()
          return plan

     return factory


@pytest.fixture
def grant_plan(db):
     def factory(user, plan, status=ActivePlanStatus.ACTIVE, date=None, snapshot=True):
          grant = ActivePlan(
               user_id=user.id,
               plan_id=plan.id,
               status=status,
               date=date or utcnow(),
          )
          if snapshot:
               grant.building_credit = plan.building_credit
               grant.user_credit = plan.user_credit
               grant.monthly_visits = plan.monthly_visits
          db.add(grant)
          db.commit()
          return grant

     return factory


@pytest.fixture
def auth_headers():
     def factory(user, language=None):
          token = create_access_token(user.id, user.email, user.role.value)
          headers = {"Authorization": f"Bearer {token}"}
          if language:
               headers["Accept-Language"] = language
          return headers

     return factory


@pytest.fixture
def owner(make_user):
     return make_user(role=UserRole.USER)


@pytest.fixture
def admin(make_user):
     return make_user(role=UserRole.ADMIN)


@pytest.fixture
def building_payload():
     def factory(name="Al Noor Tower", **overrides):
          payload = {
               "name": name,
               "address": "Olaya Street 12",
               "city": "Riyadh",
               "latitude": 24.7136,
               "longitude": 46.6753,
               "type": "tower",
          }
          payload.update(overrides)
          return payload

     return factory
