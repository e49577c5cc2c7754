"""Queries that page through active users."""

from dinely.application.dtos import UserDTO, UserListDTO
from dinely.domain.user import UserPage, UserRepository

MAX_PAGE_SIZE = 100


def _clamp(limit: int, offset: int) -> tuple[int, int]:
    return max(1, min(limit, MAX_PAGE_SIZE)), max(0, offset)


def _to_list_dto(page: UserPage, limit: int, offset: int) -> UserListDTO:
    return UserListDTO(
        users=[UserDTO.from_user(u) for u in page.users],
        total=page.total,
        limit=limit,
        offset=offset,
    )


class ListActiveUsersQuery:
    """List active users, newest first."""

    def __init__(self, user_repo: UserRepository):
        self._user_repo = user_repo

    async def execute(self, limit: int = 20, offset: int = 0) -> UserListDTO:
        limit, offset = _clamp(limit, offset)
        page = await self._user_repo.find_all_active(limit=limit, offset=offset)
        return _to_list_dto(page, limit, offset)


class SearchUsersQuery:
    """Search active users by name or email; a blank query lists all of them."""

    def __init__(self, user_repo: UserRepository):
        self._user_repo = user_repo

    async def execute(
        self,
        query: str,
        limit: int = 20,
        offset: int = 0,
    ) -> UserListDTO:
        limit, offset = _clamp(limit, offset)
        term = (query or "").strip()
        if not term:
            page = await self._user_repo.find_all_active(limit=limit, offset=offset)
        else:
            page = await self._user_repo.search(term, limit=limit, offset=offset)
        return _to_list_dto(page, limit, offset)
