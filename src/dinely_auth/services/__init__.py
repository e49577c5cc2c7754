"""Authentication services.

Provides password hashing and JWT token management.
"""

from dinely_auth.services.jwt_service import JWTConfig, JWTService
from dinely_auth.services.password_service import PasswordHashingService

__all__ = [
    "PasswordHashingService",
    "JWTConfig",
    "JWTService",
]
