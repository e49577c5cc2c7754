"""Value objects for the user domain."""

from dinely.domain.user.value_objects.email import Email
from dinely.domain.user.value_objects.phone import Phone
from dinely.domain.user.value_objects.user_preferences import (
    NotificationSettings,
    PriceRange,
    UserPreferences,
)

__all__ = [
    "Email",
    "NotificationSettings",
    "Phone",
    "PriceRange",
    "UserPreferences",
]
