"""Register a new user account."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from dinely.application.commands.user.preferences_input import (
    PreferencesInput,
    resolve_preferences,
)
from dinely.application.dtos import CreatedUserDTO
from dinely.domain.user import Email, EmailAlreadyExistsError, User, UserRepository

if TYPE_CHECKING:
    from dinely_auth import PasswordHashingService

logger = logging.getLogger(__name__)


class CreateUserCommand:
    """Create a user with a hashed password and default or given preferences."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingService,
    ):
        self._user_repo = user_repo
        self._password_service = password_service

    async def execute(  # NOQA: PLR0913
        self,
        email: str,
        password: str,
        name: str,
        phone: str,
        preferences: PreferencesInput = None,
    ) -> CreatedUserDTO:
        normalized_email = Email(email)

        if await self._user_repo.exists_by_email(normalized_email):
            logger.warning("Registration rejected: email already in use")
            raise EmailAlreadyExistsError(normalized_email.value)

        self._password_service.validate_strength(password)
        resolved_preferences = resolve_preferences(preferences)

        password_hash = await asyncio.to_thread(self._password_service.hash, password)

        user = User.create(
            email=normalized_email,
            password_hash=password_hash,
            name=name,
            phone=phone,
            preferences=resolved_preferences,
        )
        await self._user_repo.save(user)

        logger.info("User registered: %s", user.id)
        return CreatedUserDTO.from_user(user)
