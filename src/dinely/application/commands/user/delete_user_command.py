"""Soft-delete a user by deactivating it."""

import logging
from uuid import UUID

from dinely.domain.user import UserNotFoundError, UserRepository

logger = logging.getLogger(__name__)


class DeleteUserCommand:
    def __init__(self, user_repo: UserRepository):
        self._user_repo = user_repo

    async def execute(self, user_id: UUID) -> None:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        user.deactivate()
        await self._user_repo.save(user)

        logger.info("User deactivated: %s", user_id)
