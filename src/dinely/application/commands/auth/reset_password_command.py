"""Set a new password using a password reset token."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING
from uuid import UUID

from dinely.domain.user import UserRepository
from dinely_auth import InvalidResetTokenError, InvalidTokenError

if TYPE_CHECKING:
    from dinely_auth import JWTService, PasswordHashingService

logger = logging.getLogger(__name__)


class ResetPasswordCommand:
    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repo
        self._password_service = password_service
        self._jwt_service = jwt_service

    async def execute(self, reset_token: str, new_password: str) -> None:
        try:
            claims = self._jwt_service.verify_password_reset_token(reset_token)
            user_id = UUID(claims.sub)
        except (InvalidTokenError, ValueError) as e:
            logger.warning("Password reset rejected: %s", e)
            raise InvalidResetTokenError from e

        user = await self._user_repo.find_by_id(user_id)
        if user is None or not user.is_active:
            logger.warning("Password reset rejected: user %s unavailable", user_id)
            raise InvalidResetTokenError

        self._password_service.validate_strength(new_password)
        new_hash = await asyncio.to_thread(self._password_service.hash, new_password)

        user.change_password(new_hash)
        await self._user_repo.save(user)

        logger.info("Password reset for user: %s", user_id)
