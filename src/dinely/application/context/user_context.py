"""Request-scoped identity of the authenticated caller."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from dinely_auth import TokenPayload


@dataclass(frozen=True)
class AuthenticatedUser:
    """
    Immutable identity taken from a verified access token.

    Created once per request by the auth guard. It reflects the claims at
    issuance time; handlers that need current state reload the user.
    """

    user_id: UUID
    email: str
    name: str

    @classmethod
    def from_token_payload(cls, payload: TokenPayload) -> AuthenticatedUser:
        return cls(user_id=UUID(payload.sub), email=payload.email, name=payload.name)

    def __str__(self) -> str:
        return f"AuthenticatedUser({self.email})"
