"""Dinely Auth - stateless authentication primitives.

This package knows nothing about users beyond an identifier, an email
and a display name. It handles:
- Password hashing (bcrypt)
- JWT access, refresh and password reset tokens

Usage:
    from dinely_auth import JWTConfig, JWTService, PasswordHashingService
"""

from dinely_auth.exceptions import (
    AuthError,
    InvalidCredentialsError,
    InvalidRefreshTokenError,
    InvalidResetTokenError,
    InvalidTokenError,
    MalformedHashError,
    WeakPasswordError,
)
from dinely_auth.schemas import (
    PasswordResetClaims,
    RefreshTokenClaims,
    TokenPair,
    TokenPayload,
)
from dinely_auth.services import JWTConfig, JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTConfig",
    "JWTService",
    # Schemas
    "TokenPayload",
    "TokenPair",
    "RefreshTokenClaims",
    "PasswordResetClaims",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
    "InvalidCredentialsError",
    "InvalidRefreshTokenError",
    "InvalidResetTokenError",
    "WeakPasswordError",
    "MalformedHashError",
]
