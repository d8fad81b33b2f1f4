"""Pytest configuration and fixtures."""

import os
from unittest.mock import MagicMock

# Settings are read at import time, so configure them before importing the app
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.exc import OperationalError  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from kenya_auth import models  # noqa: E402, F401
from kenya_auth.config import get_settings  # noqa: E402
from kenya_auth.database import Base, get_db  # noqa: E402
from kenya_auth.main import app  # noqa: E402
from kenya_auth.services.tokens import TokenService  # noqa: E402


class AuthHeaders(dict):
    """Dict subclass that also stores the registered user's id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


SQLALCHEMY_DATABASE_URL = os.environ["DATABASE_URL"]

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

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

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def tokens():
    """Token service using the application's signing settings."""
    settings = get_settings()
    return TokenService(settings.jwt_secret, settings.jwt_algorithm)


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    email = "test@example.com"
    response = client.post(
        "/api/register",
        json={"name": "Test User", "email": email, "password": "testpass123"},
    )
    assert response.status_code == 200
    data = response.json()
    token = data["token"]
    user_id = data["user"]["id"]

    return AuthHeaders({"Authorization": f"Bearer {token}"}, user_id=user_id, email=email)


@pytest.fixture
def unreachable_db_client():
    """Create a test client whose database session fails on every call."""
    error = OperationalError("SELECT 1", {}, Exception("connection refused"))
    session = MagicMock(spec=Session)
    session.query.side_effect = error
    session.execute.side_effect = error
    session.commit.side_effect = error

    def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
