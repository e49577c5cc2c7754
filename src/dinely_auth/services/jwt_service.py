"""JWT token service.

Provides issuance and verification of access, refresh and password
reset tokens.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Optional
from uuid import uuid4

import jwt

from dinely_auth.exceptions import InvalidTokenError
from dinely_auth.schemas import (
    PASSWORD_RESET_TOKEN_TYPE,
    REFRESH_TOKEN_TYPE,
    PasswordResetClaims,
    RefreshTokenClaims,
    TokenPair,
    TokenPayload,
)

logger = logging.getLogger(__name__)

BEARER_SCHEME = "Bearer"


@dataclass(frozen=True)
class JWTConfig:
    """Token signing configuration, built once at startup.

    Attributes
    ----------
    secret_key
        Secret for access and password reset tokens
    refresh_secret_key
        Secret for refresh tokens; falls back to ``secret_key`` when unset
    access_token_expire_minutes
        Lifetime of access tokens (default 15 minutes)
    refresh_token_expire_days
        Lifetime of refresh tokens (default 7 days)
    password_reset_expire_hours
        Lifetime of password reset tokens (default 1 hour)
    algorithm
        JWS algorithm used for every token
    """

    secret_key: str
    refresh_secret_key: Optional[str] = None
    access_token_expire_minutes: int = 15
    refresh_token_expire_days: int = 7
    password_reset_expire_hours: int = 1
    algorithm: str = "HS256"

    @property
    def effective_refresh_secret(self) -> str:
        return self.refresh_secret_key or self.secret_key


class JWTService:
    """Service for JWT token creation and verification.

    Access tokens carry the full identity claims and are short-lived.
    Refresh tokens carry only ``{sub, type, jti}`` and are signed with a
    separate secret, so a leaked refresh token is never accepted as an
    API credential. Nothing is stored server-side; tokens cannot be
    revoked before they expire.

    Examples
    --------
    >>> service = JWTService(JWTConfig(secret_key="your-secret-key"))
    >>> pair = service.issue_token_pair(user_id, "user@example.com", "Jane")
    >>> payload = service.verify_access_token(pair.access_token)
    >>> print(payload.sub)
    """

    def __init__(self, config: JWTConfig):
        if not config.secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._config = config
        self._access_expire = timedelta(minutes=config.access_token_expire_minutes)
        self._refresh_expire = timedelta(days=config.refresh_token_expire_days)
        self._reset_expire = timedelta(hours=config.password_reset_expire_hours)

    @property
    def access_token_lifetime(self) -> timedelta:
        return self._access_expire

    def issue_token_pair(self, user_id: Any, email: str, name: str) -> TokenPair:
        """Issue an access token and a refresh token sharing one ``jti``.

        Parameters
        ----------
        user_id
            The user's identifier; stored as a string ``sub`` claim
        email
            The user's email address
        name
            The user's display name

        Returns
        -------
        TokenPair with both encoded tokens and their shared ``jti``
        """
        token_id = str(uuid4())
        access_token = self.create_access_token(user_id, email, name, token_id)
        refresh_token = self.create_refresh_token(user_id, token_id)

        logger.debug("Issued token pair for user: %s", user_id)
        return TokenPair(
            access_token=access_token,
            refresh_token=refresh_token,
            jti=token_id,
        )

    def create_access_token(
        self,
        user_id: Any,
        email: str,
        name: str,
        token_id: str | None = None,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a short-lived access token with full identity claims."""
        claims = {
            "sub": str(user_id),
            "email": email,
            "name": name,
            "jti": token_id or str(uuid4()),
        }
        return self._encode(
            claims,
            self._config.secret_key,
            expires_delta or self._access_expire,
        )

    def create_refresh_token(
        self,
        user_id: Any,
        token_id: str | None = None,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a long-lived refresh token with minimal claims."""
        claims = {
            "sub": str(user_id),
            "type": REFRESH_TOKEN_TYPE,
            "jti": token_id or str(uuid4()),
        }
        return self._encode(
            claims,
            self._config.effective_refresh_secret,
            expires_delta or self._refresh_expire,
        )

    def issue_password_reset_token(
        self,
        user_id: Any,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a single-purpose password reset token (1 hour by default)."""
        claims = {
            "sub": str(user_id),
            "type": PASSWORD_RESET_TOKEN_TYPE,
            "jti": str(uuid4()),
        }
        return self._encode(
            claims,
            self._config.secret_key,
            expires_delta or self._reset_expire,
        )

    def verify_access_token(self, token: str) -> TokenPayload:
        """Verify and decode an access token.

        Raises
        ------
        InvalidTokenError
            If the token is invalid, expired, malformed, or is a refresh
            or password reset token
        """
        payload = self._decode(token, self._config.secret_key)

        if "type" in payload:
            msg = "Invalid token type"
            raise InvalidTokenError(msg)

        try:
            return TokenPayload(
                sub=str(payload["sub"]),
                email=payload["email"],
                name=payload["name"],
                iat=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
                jti=payload["jti"],
            )
        except (KeyError, TypeError, ValueError) as e:
            msg = f"Malformed token payload: {e}"
            raise InvalidTokenError(msg) from e

    def verify_refresh_token(self, token: str) -> RefreshTokenClaims:
        """Verify a refresh token and return its ``sub`` and ``jti``.

        Raises
        ------
        InvalidTokenError
            If the token is invalid, expired, or not a refresh token
        """
        payload = self._decode(token, self._config.effective_refresh_secret)
        self._require_type(payload, REFRESH_TOKEN_TYPE)
        return RefreshTokenClaims(sub=str(payload["sub"]), jti=payload["jti"])

    def verify_password_reset_token(self, token: str) -> PasswordResetClaims:
        """Verify a password reset token and return its ``sub`` and ``jti``.

        Raises
        ------
        InvalidTokenError
            If the token is invalid, expired, or not a password reset token
        """
        payload = self._decode(token, self._config.secret_key)
        self._require_type(payload, PASSWORD_RESET_TOKEN_TYPE)
        return PasswordResetClaims(sub=str(payload["sub"]), jti=payload["jti"])

    @staticmethod
    def extract_bearer_token(authorization: str | None) -> str | None:
        """Return the token of a ``Bearer <token>`` header, else None.

        A missing header or any other scheme is not an error; callers
        decide whether an absent token is fatal.
        """
        if not authorization:
            return None

        parts = authorization.split(" ")
        if len(parts) != 2 or parts[0] != BEARER_SCHEME or not parts[1]:  # NOQA: PLR2004
            return None
        return parts[1]

    def _encode(
        self,
        claims: dict[str, Any],
        secret: str,
        expires_delta: timedelta,
    ) -> str:
        now = datetime.now(tz=timezone.utc)
        payload = {**claims, "iat": now, "exp": now + expires_delta}
        return jwt.encode(payload, secret, algorithm=self._config.algorithm)

    def _decode(self, token: str, secret: str) -> dict[str, Any]:
        try:
            return jwt.decode(
                token,
                secret,
                algorithms=[self._config.algorithm],
                options={"require": ["exp", "iat", "sub", "jti"]},
            )
        except jwt.ExpiredSignatureError as e:
            msg = "Token has expired"
            raise InvalidTokenError(msg) from e
        except jwt.InvalidTokenError as e:
            msg = f"Invalid token: {e}"
            raise InvalidTokenError(msg) from e

    @staticmethod
    def _require_type(payload: dict[str, Any], expected: str) -> None:
        if payload.get("type") != expected:
            msg = "Invalid token type"
            raise InvalidTokenError(msg)
