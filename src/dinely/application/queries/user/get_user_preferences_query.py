"""Query to get a user's preferences."""

from uuid import UUID

from dinely.application.dtos import UserPreferencesDTO
from dinely.domain.user import UserNotFoundError, UserRepository


class GetUserPreferencesQuery:
    def __init__(self, user_repo: UserRepository):
        self._user_repo = user_repo

    async def execute(self, user_id: UUID) -> UserPreferencesDTO:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return UserPreferencesDTO.from_preferences(user.preferences)
