"""User preferences value object.

Dining preferences and notification channels a user chose. Every mutator
returns a new instance; equality is structural.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any, Optional, Union

from dinely.domain.user.exceptions import InvalidPreferencesError

Number = Union[int, float]

DEFAULT_LANGUAGE = "en"
DEFAULT_TIMEZONE = "UTC"


@dataclass(frozen=True)
class PriceRange:
    """Inclusive price range a user is willing to spend."""

    min: Number = 0
    max: Number = 1000

    def __post_init__(self) -> None:
        for bound in (self.min, self.max):
            if isinstance(bound, bool) or not isinstance(bound, (int, float)):
                msg = "Price range bounds must be numbers"
                raise InvalidPreferencesError(msg)
            if isinstance(bound, float) and not math.isfinite(bound):
                msg = "Price range bounds must be finite"
                raise InvalidPreferencesError(msg)

        if self.min < 0:
            msg = "Minimum price cannot be negative"
            raise InvalidPreferencesError(msg)

        if self.max < self.min:
            msg = "Maximum price cannot be less than minimum price"
            raise InvalidPreferencesError(msg)

    def to_plain(self) -> dict[str, Number]:
        return {"min": self.min, "max": self.max}


@dataclass(frozen=True)
class NotificationSettings:
    """Channels the user accepts notifications on."""

    email: bool = True
    sms: bool = False
    push: bool = True

    def merged(
        self,
        email: Optional[bool] = None,
        sms: Optional[bool] = None,
        push: Optional[bool] = None,
    ) -> NotificationSettings:
        # Only provided (non-None) values are updated; others are preserved.
        return NotificationSettings(
            email=self.email if email is None else email,
            sms=self.sms if sms is None else sms,
            push=self.push if push is None else push,
        )

    def to_plain(self) -> dict[str, bool]:
        return {"email": self.email, "sms": self.sms, "push": self.push}


@dataclass(frozen=True)
class UserPreferences:
    """Complete user preferences."""

    cuisine_types: tuple[str, ...] = ()
    dietary_restrictions: tuple[str, ...] = ()
    preferred_locations: tuple[str, ...] = ()
    price_range: PriceRange = field(default_factory=PriceRange)
    notifications: NotificationSettings = field(default_factory=NotificationSettings)
    language: str = DEFAULT_LANGUAGE
    timezone: str = DEFAULT_TIMEZONE

    def __post_init__(self) -> None:
        # Accept lists from callers but store tuples
        for name in ("cuisine_types", "dietary_restrictions", "preferred_locations"):
            object.__setattr__(self, name, _as_str_tuple(getattr(self, name), name))

        if not isinstance(self.price_range, PriceRange):
            msg = "price_range must be a PriceRange"
            raise InvalidPreferencesError(msg)

        if not isinstance(self.notifications, NotificationSettings):
            msg = "notifications must be NotificationSettings"
            raise InvalidPreferencesError(msg)

        if not isinstance(self.language, str) or not self.language.strip():
            msg = "Language cannot be empty"
            raise InvalidPreferencesError(msg)

        if not isinstance(self.timezone, str) or not self.timezone.strip():
            msg = "Timezone cannot be empty"
            raise InvalidPreferencesError(msg)

    @classmethod
    def default(cls) -> UserPreferences:
        return cls()

    @classmethod
    def from_plain(cls, plain: Mapping[str, Any]) -> UserPreferences:
        """Build preferences from their JSON form.

        Missing or empty keys fall back to their defaults, so partial
        payloads and rows written by older versions both load.
        """
        if not isinstance(plain, Mapping):
            msg = "Preferences must be an object"
            raise InvalidPreferencesError(msg)

        price = plain.get("priceRange") or {}
        notifications = plain.get("notifications") or {}
        if not isinstance(price, Mapping) or not isinstance(notifications, Mapping):
            msg = "priceRange and notifications must be objects"
            raise InvalidPreferencesError(msg)

        defaults = NotificationSettings()
        return cls(
            cuisine_types=plain.get("cuisineTypes") or (),
            dietary_restrictions=plain.get("dietaryRestrictions") or (),
            preferred_locations=plain.get("preferredLocations") or (),
            price_range=PriceRange(
                min=price.get("min", 0),
                max=price.get("max", 1000),
            ),
            notifications=NotificationSettings(
                email=bool(notifications.get("email", defaults.email)),
                sms=bool(notifications.get("sms", defaults.sms)),
                push=bool(notifications.get("push", defaults.push)),
            ),
            language=plain.get("language") or DEFAULT_LANGUAGE,
            timezone=plain.get("timezone") or DEFAULT_TIMEZONE,
        )

    def to_plain(self) -> dict[str, Any]:
        """Serialise to the JSON form used in storage, events and the API."""
        return {
            "cuisineTypes": list(self.cuisine_types),
            "dietaryRestrictions": list(self.dietary_restrictions),
            "priceRange": self.price_range.to_plain(),
            "preferredLocations": list(self.preferred_locations),
            "notifications": self.notifications.to_plain(),
            "language": self.language,
            "timezone": self.timezone,
        }

    def add_cuisine_type(self, cuisine_type: str) -> UserPreferences:
        if cuisine_type in self.cuisine_types:
            return self
        return replace(self, cuisine_types=(*self.cuisine_types, cuisine_type))

    def remove_cuisine_type(self, cuisine_type: str) -> UserPreferences:
        return replace(
            self,
            cuisine_types=tuple(c for c in self.cuisine_types if c != cuisine_type),
        )

    def add_dietary_restriction(self, restriction: str) -> UserPreferences:
        if restriction in self.dietary_restrictions:
            return self
        return replace(
            self,
            dietary_restrictions=(*self.dietary_restrictions, restriction),
        )

    def remove_dietary_restriction(self, restriction: str) -> UserPreferences:
        return replace(
            self,
            dietary_restrictions=tuple(
                r for r in self.dietary_restrictions if r != restriction
            ),
        )

    def with_price_range(self, min: Number, max: Number) -> UserPreferences:  # NOQA: A002
        return replace(self, price_range=PriceRange(min=min, max=max))

    def with_notifications(
        self,
        email: Optional[bool] = None,
        sms: Optional[bool] = None,
        push: Optional[bool] = None,
    ) -> UserPreferences:
        return replace(
            self,
            notifications=self.notifications.merged(email=email, sms=sms, push=push),
        )

    def with_language(self, language: str) -> UserPreferences:
        return replace(self, language=language)

    def with_timezone(self, timezone: str) -> UserPreferences:
        return replace(self, timezone=timezone)


def _as_str_tuple(values: Iterable[Any], name: str) -> tuple[str, ...]:
    if isinstance(values, str) or not isinstance(values, Iterable):
        msg = f"{name} must be a list of strings"
        raise InvalidPreferencesError(msg)

    items = tuple(values)
    if not all(isinstance(item, str) for item in items):
        msg = f"{name} must be a list of strings"
        raise InvalidPreferencesError(msg)
    return items
