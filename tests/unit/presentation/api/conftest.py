"""Fixtures for API tests.

The app runs against an in-memory SQLite database shared through
StaticPool. The schema is created lazily inside the app's own event loop
on the first request.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from dinely.infrastructure.persistence.sqlalchemy.models import Base
from dinely.presentation.api.app import create_app
from dinely.presentation.api.dependencies import get_db_session

TEST_PASSWORD = "StrongPassword123!"  # NOQA: S105


def _session_override(engine):
    maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    schema_ready = False

    async def override():
        nonlocal schema_ready
        if not schema_ready:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            schema_ready = True

        async with maker() as session:
            yield session

    return override


@pytest.fixture
def app():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    application = create_app()
    application.dependency_overrides[get_db_session] = _session_override(engine)
    return application


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register(client):
    """Register a user and return the response body."""

    def _register(email="a@example.com", password=TEST_PASSWORD, **extra):
        body = {
            "email": email,
            "password": password,
            "name": "John Doe",
            "phone": "+1234567890",
            **extra,
        }
        response = client.post("/api/v1/users/register", json=body)
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest.fixture
def login(client):
    """Log in and return the response body."""

    def _login(email="a@example.com", password=TEST_PASSWORD):
        response = client.post(
            "/api/v1/auth/login",
            json={"email": email, "password": password},
        )
        assert response.status_code == 200, response.text
        return response.json()

    return _login


@pytest.fixture
def auth_headers(register, login):
    """Register the default user and return bearer headers for it."""
    register()
    tokens = login()
    return {"Authorization": f"Bearer {tokens['access_token']}"}
