"""Query to get a user's public profile."""

from uuid import UUID

from dinely.application.dtos import UserDTO
from dinely.domain.user import UserNotFoundError, UserRepository


class GetUserQuery:
    """Return a user by ID, active or not."""

    def __init__(self, user_repo: UserRepository):
        self._user_repo = user_repo

    async def execute(self, user_id: UUID) -> UserDTO:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return UserDTO.from_user(user)
