"""Token schemas and data structures.

These are simple data classes used for transferring authentication
data between components. Claim names (``sub``, ``jti``, ``type``) match
the JWT wire format.
"""

from dataclasses import dataclass
from datetime import datetime, timezone

REFRESH_TOKEN_TYPE = "refresh"
PASSWORD_RESET_TOKEN_TYPE = "password-reset"  # NOQA: S105


@dataclass(frozen=True)
class TokenPayload:
    """Decoded access token payload.

    Attributes
    ----------
    sub
        The user's identifier (string form)
    email
        The user's email address
    name
        The user's display name
    iat
        Issue timestamp
    exp
        Expiration timestamp
    jti
        Token identifier, shared with the refresh token of the same pair
    """

    sub: str
    email: str
    name: str
    iat: datetime
    exp: datetime
    jti: str

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=timezone.utc) > self.exp


@dataclass(frozen=True)
class RefreshTokenClaims:
    """Claims extracted from a verified refresh token."""

    sub: str
    jti: str


@dataclass(frozen=True)
class PasswordResetClaims:
    """Claims extracted from a verified password reset token."""

    sub: str
    jti: str


@dataclass(frozen=True)
class TokenPair:
    """An access token and the refresh token issued alongside it."""

    access_token: str
    refresh_token: str
    jti: str
