"""Pytest configuration and shared fixtures."""

import os

# Must be set before the application modules read their settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"
os.environ["SECRET_KEY"] = "test-secret-key"

import pytest
from fastapi.testclient import TestClient

from college_events.auth import AdminSession, get_password_hash
from college_events.database import Base, SessionLocal, engine
from college_events.models.admin import Admin
from college_events.models.event import Event
from college_events.schemas.registration import RegistrationCreate
from main import app

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"
ADMIN_HASH = get_password_hash(ADMIN_PASSWORD)


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    db.add(Admin(username=ADMIN_USERNAME, hashed_password=ADMIN_HASH))
    db.commit()
    db.close()
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def client() -> TestClient:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_client(client: TestClient) -> TestClient:
    response = client.post("/api/v1/admin/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return client


@pytest.fixture
def admin_session(db) -> AdminSession:
    return AdminSession({}, db)


@pytest.fixture
def make_event(db):
    def _make_event(event_name="Tech Fest", date="2025-06-01", venue="Hall A", max_capacity=100, description=""):
        event = Event(event_name=event_name, date=date, venue=venue, max_capacity=max_capacity, description=description)
        db.add(event)
        db.commit()
        db.refresh(event)
        return event
    return _make_event


def student_payload(event_id, **overrides) -> dict:
    """A valid registration body in wire format (camelCase)."""
    payload = {
        "fullName": "Asha Verma",
        "email": "asha@college.edu",
        "contactNumber": "9876543210",
        "collegeName": "City College",
        "age": 20,
        "gender": "female",
        "universityRollNumber": "R1",
        "batch": "2024",
        "eventId": event_id,
    }
    payload.update(overrides)
    return payload


def candidate(event_id, **overrides) -> RegistrationCreate:
    return RegistrationCreate(**student_payload(event_id, **overrides))
