"""Shared fixtures for application layer tests.

Repositories are mocked; password and token services are real but use
cheap bcrypt rounds.
"""

from unittest.mock import AsyncMock

import pytest

from dinely.domain.user import User, UserRepository
from dinely_auth import JWTConfig, JWTService, PasswordHashingService

TEST_SECRET = "test-secret-key-that-is-at-least-32-characters-long"
TEST_PASSWORD = "StrongPassword123!"  # NOQA: S105


@pytest.fixture
def password_service() -> PasswordHashingService:
    return PasswordHashingService(rounds=4)


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(JWTConfig(secret_key=TEST_SECRET))


@pytest.fixture
def user_repo():
    """Create a mock user repository with an empty store."""
    repo = AsyncMock(spec=UserRepository)
    repo.find_by_id.return_value = None
    repo.find_by_email.return_value = None
    repo.exists_by_email.return_value = False
    repo.get_user_stats.return_value = None
    return repo


@pytest.fixture
def existing_user(password_service) -> User:
    """An active, persisted user whose password is TEST_PASSWORD."""
    user = User.create(
        email="john.doe@example.com",
        password_hash=password_service.hash(TEST_PASSWORD),
        name="John Doe",
        phone="+1234567890",
    )
    user.mark_events_as_committed()
    return user
