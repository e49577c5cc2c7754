"""Immutable projection of a User's public state."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID

from dinely.domain.user.value_objects.user_preferences import UserPreferences


@dataclass(frozen=True)
class UserSnapshot:
    """All public fields of a User. Never carries the password hash."""

    id: UUID
    email: str
    name: str
    phone: str
    preferences: UserPreferences
    created_at: datetime
    updated_at: datetime
    is_active: bool

    def to_plain(self) -> dict[str, Any]:
        """JSON-safe camelCase form used in event payloads."""
        return {
            "id": str(self.id),
            "email": self.email,
            "name": self.name,
            "phone": self.phone,
            "preferences": self.preferences.to_plain(),
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
            "isActive": self.is_active,
        }
