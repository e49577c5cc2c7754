"""FastAPI dependency injection for the Dinely API.

Provides dependencies for:
- Database sessions
- Authentication (current user from JWT)
- Repository and service instances
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from dinely.application.context import AuthenticatedUser
from dinely.domain.user import UserRepository
from dinely.infrastructure.email import EmailService
from dinely.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)
from dinely_auth import InvalidTokenError, JWTService, PasswordHashingService
from dinely_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

SettingsDep = Annotated[Settings, Depends(get_settings)]


@lru_cache()
def get_database_url() -> str:
    """Get database URL from application settings."""
    url = get_settings().database_url

    # Ensure data directory exists for SQLite
    if url.startswith("sqlite") and ":memory:" not in url:
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    The engine manages the connection pool and is reused across all requests.
    """
    return create_async_engine(
        get_database_url(),
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """Get the shared async session maker (singleton)."""
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Routers commit on success; anything left uncommitted is rolled back
    when the session closes.
    """
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


def get_user_repository(session: DBSession) -> UserRepository:
    return UserRepositorySQLAlchemy(session)


UserRepo = Annotated[UserRepository, Depends(get_user_repository)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    """Get JWT service configured from settings."""
    return JWTService(settings.jwt_config())


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService(rounds=settings.bcrypt_rounds)


JWTServiceDep = Annotated[JWTService, Depends(get_jwt_service)]
PasswordServiceDep = Annotated[PasswordHashingService, Depends(get_password_service)]


def get_email_service(settings: SettingsDep) -> EmailService:
    """Get the SMTP email service."""
    return EmailService(settings)


EmailServiceDep = Annotated[EmailService, Depends(get_email_service)]


# -----------------------------------------------------------------------------
# Current User (JWT Authentication)
# -----------------------------------------------------------------------------


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    jwt_service: JWTServiceDep,
    authorization: Annotated[str | None, Header()] = None,
) -> AuthenticatedUser:
    """
    FastAPI dependency to get the current authenticated user from JWT.

    Reads a ``Bearer`` token from the Authorization header and verifies
    it as an access token. The user is not reloaded from the database;
    handlers that need current state do that themselves.

    Raises
    ------
    HTTPException
        401 if the token is missing, invalid, expired or not an access token
    """
    token = jwt_service.extract_bearer_token(authorization)
    if token is None:
        raise _unauthorized("Access token is required")

    try:
        payload = jwt_service.verify_access_token(token)
        return AuthenticatedUser.from_token_payload(payload)
    except (InvalidTokenError, ValueError) as e:
        logger.warning("Invalid access token: %s", e)
        raise _unauthorized("Invalid or expired access token") from e


# Type alias for injected current user
CurrentUser = Annotated[AuthenticatedUser, Depends(get_current_user)]
