"""User queries (read-only projections)."""

from dinely.application.queries.user.get_user_preferences_query import (
    GetUserPreferencesQuery,
)
from dinely.application.queries.user.get_user_query import GetUserQuery
from dinely.application.queries.user.get_user_stats_query import GetUserStatsQuery
from dinely.application.queries.user.list_users_query import (
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
