"""
Shared test setup: in-memory database, no sample seeding, temp upload dir.
"""
import os
import tempfile

# Must be set before travelplanner modules read their settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_SAMPLE_DATA"] = "false"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="travelplanner-uploads-")

import pytest
from fastapi.testclient import TestClient
from travelplanner.db.base import Base
from travelplanner.db.session import engine
from travelplanner.main import app
import travelplanner.models  # noqa: F401


@pytest.fixture(autouse=True)
def database():
    """Fresh tables for every test."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    return TestClient(app)


def signup_and_login(client, email="traveler@example.com", password="secret123"):
    client.post(
        "/api/auth/signup",
        json={
            "first_name": "Test",
            "last_name": "Traveler",
            "email": email,
            "password": password,
            "confirm_password": password,
            "terms_agreed": True
        }
    )
    response = client.post("/api/auth/login", json={"email": email, "password": password})
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def auth_headers(client):
    return signup_and_login(client)


@pytest.fixture
def trip_payload():
    return {
        "name": "Summer in Lisbon",
        "destination": "Lisbon, Portugal",
        "type": "Leisure",
        "start_date": "2030-06-10",
        "end_date": "2030-06-15",
        "budget": "1500.00",
        "notes": "Pastel de nata every day"
    }
