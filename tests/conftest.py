"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient

from riderwatch.config import Settings
from riderwatch.database import Base, Database, get_db
from riderwatch.main import create_app


class AuthHeaders(dict):
    """Dict subclass that also stores the registered user's id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


# Use TEST_DATABASE_URL when given (e.g. PostgreSQL in Docker), SQLite locally
SQLALCHEMY_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///./test.db")

test_database = Database(SQLALCHEMY_DATABASE_URL)
test_settings = Settings(
    _env_file=None,
    database_url=SQLALCHEMY_DATABASE_URL,
    log_level="WARNING",
)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    test_database.create_all()
    yield
    test_database.dispose()


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = test_database.session()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""
    app = create_app(test_settings, database=test_database)

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register(client, email: str, name: str = "Test Rider", password: str = "testpass123"):
    response = client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "password": password},
    )
    assert response.status_code == 201
    data = response.json()
    return AuthHeaders(
        {"Authorization": f"Bearer {data['token']}"},
        user_id=data["user"]["id"],
        email=data["user"]["email"],
    )


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return register(client, "test@example.com")


@pytest.fixture
def other_auth_headers(client):
    """A second, unrelated user."""
    return register(client, "other@example.com", name="Other Rider")


@pytest.fixture
def trip_data():
    """A valid trip payload."""
    return {
        "date": "2024-03-15",
        "trip_time": "08:30",
        "trip_id": "PM-1001",
        "app_name": "Pickme",
        "trip_type": "Passenger",
        "distance_km": 12.5,
        "amount_received": 1500.0,
        "fees": 225.0,
        "fuel_cost": 300.0,
        "notes": "Airport run",
    }
