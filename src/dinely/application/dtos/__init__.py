"""Data transfer objects returned by commands and queries."""

from dinely.application.dtos.auth_dto import LoginResultDTO, TokenPairDTO
from dinely.application.dtos.user_dto import (
    CreatedUserDTO,
    UserDTO,
    UserListDTO,
    UserPreferencesDTO,
    UserStatsDTO,
    UserSummaryDTO,
)

__all__ = [
    "CreatedUserDTO",
    "LoginResultDTO",
    "TokenPairDTO",
    "UserDTO",
    "UserListDTO",
    "UserPreferencesDTO",
    "UserStatsDTO",
    "UserSummaryDTO",
]
