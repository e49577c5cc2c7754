"""DTOs for user read models.

None of these carry the password hash.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from dinely.domain.user import User, UserPreferences, UserStats


@dataclass(frozen=True)
class UserPreferencesDTO:
    """User preferences for presentation layer."""

    cuisine_types: list[str]
    dietary_restrictions: list[str]
    price_range: dict[str, float]
    preferred_locations: list[str]
    notifications: dict[str, bool]
    language: str
    timezone: str

    @classmethod
    def from_preferences(cls, preferences: UserPreferences) -> UserPreferencesDTO:
        return cls(
            cuisine_types=list(preferences.cuisine_types),
            dietary_restrictions=list(preferences.dietary_restrictions),
            price_range=preferences.price_range.to_plain(),
            preferred_locations=list(preferences.preferred_locations),
            notifications=preferences.notifications.to_plain(),
            language=preferences.language,
            timezone=preferences.timezone,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "cuisine_types": list(self.cuisine_types),
            "dietary_restrictions": list(self.dietary_restrictions),
            "price_range": dict(self.price_range),
            "preferred_locations": list(self.preferred_locations),
            "notifications": dict(self.notifications),
            "language": self.language,
            "timezone": self.timezone,
        }


@dataclass(frozen=True)
class UserDTO:
    """Public projection of a user."""

    id: str
    email: str
    name: str
    phone: str
    preferences: UserPreferencesDTO
    created_at: datetime
    updated_at: datetime
    is_active: bool

    @classmethod
    def from_user(cls, user: User) -> UserDTO:
        return cls(
            id=str(user.id),
            email=user.email,
            name=user.name,
            phone=user.phone,
            preferences=UserPreferencesDTO.from_preferences(user.preferences),
            created_at=user.created_at,
            updated_at=user.updated_at,
            is_active=user.is_active,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "phone": self.phone,
            "preferences": self.preferences.to_dict(),
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "is_active": self.is_active,
        }


@dataclass(frozen=True)
class CreatedUserDTO:
    """Result of a successful registration."""

    id: str
    email: str
    name: str
    phone: str
    preferences: UserPreferencesDTO
    created_at: datetime
    is_active: bool

    @classmethod
    def from_user(cls, user: User) -> CreatedUserDTO:
        return cls(
            id=str(user.id),
            email=user.email,
            name=user.name,
            phone=user.phone,
            preferences=UserPreferencesDTO.from_preferences(user.preferences),
            created_at=user.created_at,
            is_active=user.is_active,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "phone": self.phone,
            "preferences": self.preferences.to_dict(),
            "created_at": self.created_at.isoformat(),
            "is_active": self.is_active,
        }


@dataclass(frozen=True)
class UserSummaryDTO:
    """Minimal identity returned alongside tokens."""

    id: str
    email: str
    name: str
    phone: str

    @classmethod
    def from_user(cls, user: User) -> UserSummaryDTO:
        return cls(id=str(user.id), email=user.email, name=user.name, phone=user.phone)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "phone": self.phone,
        }


@dataclass(frozen=True)
class UserListDTO:
    """A page of users and the total number of matches."""

    users: list[UserDTO]
    total: int
    limit: int
    offset: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "users": [u.to_dict() for u in self.users],
            "total": self.total,
            "limit": self.limit,
            "offset": self.offset,
        }


@dataclass(frozen=True)
class UserStatsDTO:
    """Reservation counters and activity for one user."""

    user_id: str
    total_reservations: int
    active_reservations: int
    cancelled_reservations: int
    last_login_at: Optional[datetime]
    member_since: datetime

    @classmethod
    def from_stats(cls, user: User, stats: UserStats) -> UserStatsDTO:
        return cls(
            user_id=str(user.id),
            total_reservations=stats.total_reservations,
            active_reservations=stats.active_reservations,
            cancelled_reservations=stats.cancelled_reservations,
            last_login_at=stats.last_login_at,
            member_since=user.created_at,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "user_id": self.user_id,
            "total_reservations": self.total_reservations,
            "active_reservations": self.active_reservations,
            "cancelled_reservations": self.cancelled_reservations,
            "last_login_at": (
                self.last_login_at.isoformat() if self.last_login_at else None
            ),
            "member_since": self.member_since.isoformat(),
        }
