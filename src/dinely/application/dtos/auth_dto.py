"""DTOs for authentication results."""

from dataclasses import dataclass
from typing import Any

from dinely.application.dtos.user_dto import UserSummaryDTO


@dataclass(frozen=True)
class TokenPairDTO:
    """Access and refresh token issued together."""

    access_token: str
    refresh_token: str
    expires_in: int
    token_type: str = "bearer"  # NOQA: S105

    def to_dict(self) -> dict[str, Any]:
        return {
            "access_token": self.access_token,
            "refresh_token": self.refresh_token,
            "token_type": self.token_type,
            "expires_in": self.expires_in,
        }


@dataclass(frozen=True)
class LoginResultDTO:
    """Authenticated user plus their fresh tokens."""

    user: UserSummaryDTO
    tokens: TokenPairDTO

    def to_dict(self) -> dict[str, Any]:
        return {"user": self.user.to_dict(), **self.tokens.to_dict()}
