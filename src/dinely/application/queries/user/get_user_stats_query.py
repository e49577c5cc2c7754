"""Query to get a user's reservation counters and activity."""

from uuid import UUID

from dinely.application.dtos import UserStatsDTO
from dinely.domain.user import UserNotFoundError, UserRepository, UserStats


class GetUserStatsQuery:
    def __init__(self, user_repo: UserRepository):
        self._user_repo = user_repo

    async def execute(self, user_id: UUID) -> UserStatsDTO:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        stats = await self._user_repo.get_user_stats(user_id) or UserStats()
        return UserStatsDTO.from_stats(user, stats)
