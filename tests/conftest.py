"""
Shared fixtures: an in-memory SQLite store, an application bound to it,
and helpers for creating authenticated users.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from task_tracker.config import AppConfig
from task_tracker.dependencies import build_container
from task_tracker.main import create_app
from task_tracker.repository.models import Base

TEST_JWT_SECRET = "unit-test-signing-secret-0123456789abcdef"
API_PREFIX = "/api/v1"


def create_memory_engine():
    return create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


@pytest.fixture
def app_config():
    return AppConfig(jwt_secret=TEST_JWT_SECRET, database_url="sqlite://")


@pytest.fixture
def engine():
    """Create an in-memory SQLite database with the full schema."""
    engine = create_memory_engine()
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def container(app_config, engine):
    return build_container(app_config, engine=engine)


@pytest.fixture
def app(container):
    return create_app(container=container, apply_migrations=False)


@pytest.fixture
def api_client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def make_user(api_client):
    """
    Register and log in a user.

    Returns a callable producing ``(user_id, auth_headers)``.
    """

    def _make_user(email: str, password: str = "password123", name: str = "Test User"):
        register = api_client.post(
            f"{API_PREFIX}/auth/register",
            json={"name": name, "email": email, "password": password},
        )
        assert register.status_code == 201, register.text

        login = api_client.post(
            f"{API_PREFIX}/auth/login", json={"email": email, "password": password}
        )
        assert login.status_code == 200, login.text
        body = login.json()
        return body["user"]["id"], {"Authorization": f"Bearer {body['token']}"}

    return _make_user
