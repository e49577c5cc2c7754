"""Application queries (read operations)."""

from dinely.application.queries.user import (
    GetUserPreferencesQuery,
    GetUserQuery,
    GetUserStatsQuery,
    ListActiveUsersQuery,
    SearchUsersQuery,
)

__all__ = [
    "GetUserPreferencesQuery",
    "GetUserQuery",
    "GetUserStatsQuery",
    "ListActiveUsersQuery",
    "SearchUsersQuery",
]
