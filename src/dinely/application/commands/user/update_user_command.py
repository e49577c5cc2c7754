"""Update a user's profile and, optionally, preferences."""

from __future__ import annotations

import logging
from uuid import UUID

from dinely.application.commands.user.preferences_input import (
    PreferencesInput,
    resolve_preferences,
)
from dinely.application.dtos import UserDTO
from dinely.domain.user import UserNotFoundError, UserRepository

logger = logging.getLogger(__name__)


class UpdateUserCommand:
    """Replace name and phone; preferences are only replaced when given."""

    def __init__(self, user_repo: UserRepository):
        self._user_repo = user_repo

    async def execute(
        self,
        user_id: UUID,
        name: str,
        phone: str,
        preferences: PreferencesInput = None,
    ) -> UserDTO:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        user.update_profile(name, phone, resolve_preferences(preferences))
        await self._user_repo.save(user)

        logger.info("User updated: %s", user_id)
        return UserDTO.from_user(user)
