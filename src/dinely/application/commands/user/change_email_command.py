"""Change a user's email address."""

import logging
from uuid import UUID

from dinely.application.dtos import UserDTO
from dinely.domain.user import (
    Email,
    EmailAlreadyExistsError,
    UserNotFoundError,
    UserRepository,
)

logger = logging.getLogger(__name__)


class ChangeEmailCommand:
    """Swap the email after checking that no other user holds it."""

    def __init__(self, user_repo: UserRepository):
        self._user_repo = user_repo

    async def execute(self, user_id: UUID, new_email: str) -> UserDTO:
        email = Email(new_email)

        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        if email.value == user.email:
            return UserDTO.from_user(user)

        if await self._user_repo.exists_by_email(email):
            raise EmailAlreadyExistsError(email.value)

        user.change_email(email)
        await self._user_repo.save(user)

        logger.info("Email changed for user: %s", user_id)
        return UserDTO.from_user(user)
