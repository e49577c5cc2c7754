"""User domain - manages user identity, credentials and preferences.

This domain handles:
- User aggregate (identity, contact details, activation state)
- User preferences (cuisines, dietary restrictions, price range, notifications)
- Domain events recorded on state changes

Design notes:
- User ID is a random UUID4 generated at creation (opaque, unpredictable)
- Email is trimmed and lowercased, and unique across all users
- Users are never physically deleted; deletion deactivates them
- Repository interface defined here, implementation in infrastructure
"""

from dinely.domain.user.aggregates import User
from dinely.domain.user.events import UserCreated, UserDeleted, UserUpdated
from dinely.domain.user.exceptions import (
    EmailAlreadyExistsError,
    EmptyNameError,
    InvalidEmailError,
    InvalidPhoneError,
    InvalidPreferencesError,
    UserAlreadyDeactivatedError,
    UserNotFoundError,
)
from dinely.domain.user.repositories import UserPage, UserRepository, UserStats
from dinely.domain.user.snapshot import UserSnapshot
from dinely.domain.user.value_objects import (
    Email,
    NotificationSettings,
    Phone,
    PriceRange,
    UserPreferences,
)

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "EmptyNameError",
    "InvalidEmailError",
    "InvalidPhoneError",
    "InvalidPreferencesError",
    "NotificationSettings",
    "Phone",
    "PriceRange",
    "User",
    "UserAlreadyDeactivatedError",
    "UserCreated",
    "UserDeleted",
    "UserNotFoundError",
    "UserPage",
    "UserPreferences",
    "UserRepository",
    "UserSnapshot",
    "UserStats",
    "UserUpdated",
]
