"""Domain events recorded by the User aggregate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar
from uuid import UUID

from dinely.domain.shared.events import DomainEvent
from dinely.domain.user.snapshot import UserSnapshot

# Fields whose changes are reported in UserUpdated
TRACKED_FIELDS = ("email", "name", "phone", "preferences")


@dataclass(frozen=True)
class UserCreated(DomainEvent):
    event_name: ClassVar[str] = "user.created"
    aggregate_type: ClassVar[str] = "User"

    user: UserSnapshot

    @property
    def aggregate_id(self) -> str:
        return str(self.user.id)

    def payload(self) -> dict[str, Any]:
        plain = self.user.to_plain()
        return {
            "userId": plain["id"],
            "email": plain["email"],
            "name": plain["name"],
            "phone": plain["phone"],
            "preferences": plain["preferences"],
            "createdAt": plain["createdAt"],
            "isActive": plain["isActive"],
        }


@dataclass(frozen=True)
class UserUpdated(DomainEvent):
    """Profile or email change, with both states and the field-level diff."""

    event_name: ClassVar[str] = "user.updated"
    aggregate_type: ClassVar[str] = "User"

    previous_state: UserSnapshot
    current_state: UserSnapshot

    @property
    def aggregate_id(self) -> str:
        return str(self.current_state.id)

    def changes(self) -> dict[str, dict[str, Any]]:
        previous = self.previous_state.to_plain()
        current = self.current_state.to_plain()
        return {
            name: {"from": previous[name], "to": current[name]}
            for name in TRACKED_FIELDS
            if previous[name] != current[name]
        }

    def payload(self) -> dict[str, Any]:
        return {
            "userId": str(self.current_state.id),
            "previousState": _profile_state(self.previous_state),
            "currentState": _profile_state(self.current_state),
            "changes": self.changes(),
        }


@dataclass(frozen=True)
class UserDeleted(DomainEvent):
    """User was deactivated (soft delete)."""

    event_name: ClassVar[str] = "user.deleted"
    aggregate_type: ClassVar[str] = "User"

    user_id: UUID
    email: str

    @property
    def aggregate_id(self) -> str:
        return str(self.user_id)

    def payload(self) -> dict[str, Any]:
        return {
            "userId": str(self.user_id),
            "email": self.email,
            "deletedAt": self.occurred_at.isoformat(),
        }


def _profile_state(snapshot: UserSnapshot) -> dict[str, Any]:
    plain = snapshot.to_plain()
    return {name: plain[name] for name in (*TRACKED_FIELDS, "updatedAt")}
