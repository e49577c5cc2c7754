"""Authenticate a user with email and password."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from dinely.application.commands.auth.token_pair import issue_tokens
from dinely.application.dtos import LoginResultDTO, UserSummaryDTO
from dinely.domain.shared.time import utc_now
from dinely.domain.user import Email, InvalidEmailError, UserRepository
from dinely_auth import InvalidCredentialsError

if TYPE_CHECKING:
    from dinely_auth import JWTService, PasswordHashingService

logger = logging.getLogger(__name__)


class LoginUserCommand:
    """
    Verify credentials and issue a token pair.

    Unknown email, inactive account and wrong password all raise the same
    InvalidCredentialsError so callers cannot discover which accounts exist.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repo
        self._password_service = password_service
        self._jwt_service = jwt_service

    async def execute(self, email: str, password: str) -> LoginResultDTO:
        try:
            normalized_email = Email(email)
        except InvalidEmailError:
            await self._reject(password)
            raise InvalidCredentialsError from None

        user = await self._user_repo.find_by_email(normalized_email)
        if user is None:
            logger.warning("Login rejected: unknown email")
            await self._reject(password)
            raise InvalidCredentialsError

        if not user.is_active:
            logger.warning("Login rejected: inactive user %s", user.id)
            await self._reject(password)
            raise InvalidCredentialsError

        is_valid = await asyncio.to_thread(
            self._password_service.verify,
            password,
            user.password_hash,
        )
        if not is_valid:
            logger.warning("Login rejected: wrong password for user %s", user.id)
            raise InvalidCredentialsError

        tokens = issue_tokens(self._jwt_service, user)
        await self._user_repo.update_user_stats(user.id, last_login_at=utc_now())

        logger.info("User logged in: %s", user.id)
        return LoginResultDTO(user=UserSummaryDTO.from_user(user), tokens=tokens)

    async def _reject(self, password: str) -> None:
        # Match the bcrypt cost of a wrong-password rejection
        await asyncio.to_thread(self._password_service.verify_dummy, password)
