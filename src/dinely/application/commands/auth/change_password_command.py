"""Change a user's password after re-checking the current one."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING
from uuid import UUID

from dinely.domain.user import UserNotFoundError, UserRepository
from dinely_auth import InvalidCredentialsError

if TYPE_CHECKING:
    from dinely_auth import PasswordHashingService

logger = logging.getLogger(__name__)


class ChangePasswordCommand:
    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingService,
    ):
        self._user_repo = user_repo
        self._password_service = password_service

    async def execute(
        self,
        user_id: UUID,
        current_password: str,
        new_password: str,
    ) -> None:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        is_valid = await asyncio.to_thread(
            self._password_service.verify,
            current_password,
            user.password_hash,
        )
        if not is_valid:
            logger.warning("Password change rejected for user: %s", user_id)
            msg = "Current password is incorrect"
            raise InvalidCredentialsError(msg)

        self._password_service.validate_strength(new_password)
        new_hash = await asyncio.to_thread(self._password_service.hash, new_password)

        user.change_password(new_hash)
        await self._user_repo.save(user)

        logger.info("Password changed for user: %s", user_id)
