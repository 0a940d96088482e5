"""
Pytest fixtures for Audioryx tests
"""

import pytest
from fastapi.testclient import TestClient

from audioryx.config import Settings
from audioryx.db.session import Database
from audioryx.main import create_app

TEST_SECRET = "test-signing-secret-0123456789-abcdefghij"
EMPLOYEE_EMAIL = "staff@example.com"
EMPLOYEE_PASSWORD = "staff-pass-42"


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Isolated settings: temp SQLite file and upload dir, fast bcrypt, no Redis"""
    return Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite:///{tmp_path / 'audioryx-test.db'}",
        UPLOAD_DIR=str(tmp_path / "uploads"),
        REDIS_URL="",
        SECRET_KEY=TEST_SECRET,
        BCRYPT_ROUNDS=4,
        EMPLOYEE_EMAIL=EMPLOYEE_EMAIL,
        EMPLOYEE_PASSWORD=EMPLOYEE_PASSWORD,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """Test client with the lifespan running (tables and upload dir created)"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def database(settings):
    """Fresh schema; tests open their own sessions from it"""
    database = Database(settings.DATABASE_URL)
    database.create_all()
    yield database
    database.dispose()


@pytest.fixture
def db(database):
    """Plain session against a fresh schema, for service-level tests"""
    session = database.SessionLocal()
    yield session
    session.close()


@pytest.fixture
def bearer():
    """Build an Authorization header for a token"""
    def _bearer(token: str) -> dict:
        return {"Authorization": f"Bearer {token}"}
    return _bearer


@pytest.fixture
def register(client):
    """Register an account through the API and return {user, token}"""
    def _register(email: str, password: str = "pw123", **extra) -> dict:
        response = client.post(
            "/api/v1/auth/register",
            json={"email": email, "password": password, **extra},
        )
        assert response.status_code == 200, response.text
        return response.json()
    return _register
