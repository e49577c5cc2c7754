from dinely.domain.user.repositories.user_repository import (
    UserPage,
    UserRepository,
    UserStats,
)

__all__ = ["UserPage", "UserRepository", "UserStats"]
