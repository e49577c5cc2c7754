"""Coerce caller-supplied preferences into the value object."""

from collections.abc import Mapping
from typing import Any, Optional, Union

from dinely.domain.user import InvalidPreferencesError, UserPreferences

PreferencesInput = Union[UserPreferences, Mapping[str, Any], None]


def resolve_preferences(preferences: PreferencesInput) -> Optional[UserPreferences]:
    """Return a UserPreferences, or None when the caller supplied none.

    Plain mappings use the camelCase JSON form; missing keys take their
    defaults.
    """
    if preferences is None:
        return None
    if isinstance(preferences, UserPreferences):
        return preferences
    if isinstance(preferences, Mapping):
        return UserPreferences.from_plain(preferences)

    msg = "Preferences must be an object"
    raise InvalidPreferencesError(msg)
