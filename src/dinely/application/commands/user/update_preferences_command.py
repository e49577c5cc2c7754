"""Replace a user's dining preferences."""

from __future__ import annotations

import logging
from uuid import UUID

from dinely.application.commands.user.preferences_input import (
    PreferencesInput,
    resolve_preferences,
)
from dinely.application.dtos import UserPreferencesDTO
from dinely.domain.user import (
    InvalidPreferencesError,
    UserNotFoundError,
    UserRepository,
)

logger = logging.getLogger(__name__)


class UpdatePreferencesCommand:
    def __init__(self, user_repo: UserRepository):
        self._user_repo = user_repo

    async def execute(
        self,
        user_id: UUID,
        preferences: PreferencesInput,
    ) -> UserPreferencesDTO:
        resolved = resolve_preferences(preferences)
        if resolved is None:
            msg = "Preferences are required"
            raise InvalidPreferencesError(msg)

        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        user.update_preferences(resolved)
        await self._user_repo.save(user)

        logger.info("Preferences updated for user: %s", user_id)
        return UserPreferencesDTO.from_preferences(user.preferences)
