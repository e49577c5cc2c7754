"""Users router for registration, profile management and lookups."""

import logging
from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, Query, status

from dinely.application.commands import (
    ChangeEmailCommand,
    CreateUserCommand,
    DeleteUserCommand,
    UpdatePreferencesCommand,
    UpdateUserCommand,
)
from dinely.application.queries import (
    GetUserPreferencesQuery,
    GetUserQuery,
    GetUserStatsQuery,
    SearchUsersQuery,
)
from dinely.presentation.api.dependencies import (
    CurrentUser,
    DBSession,
    PasswordServiceDep,
    UserRepo,
)
from dinely.presentation.api.schemas.users import (
    ChangeEmailRequest,
    CreatedUserResponse,
    PreferencesSchema,
    RegisterRequest,
    UpdateProfileRequest,
    UserListResponse,
    UserPreferencesResponse,
    UserResponse,
    UserStatsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        400: {"description": "Invalid input or weak password"},
        409: {"description": "Email already registered"},
    },
)
async def register(
    request: RegisterRequest,
    user_repo: UserRepo,
    session: DBSession,
    password_service: PasswordServiceDep,
) -> CreatedUserResponse:
    """
    Create a new account.

    Preferences are optional; omitted preferences take their defaults.
    No tokens are issued, clients log in afterwards.
    """
    preferences = request.preferences.to_domain() if request.preferences else None

    command = CreateUserCommand(user_repo, password_service)
    result = await command.execute(
        email=request.email,
        password=request.password,
        name=request.name,
        phone=request.phone,
        preferences=preferences,
    )
    await session.commit()

    return CreatedUserResponse.model_validate(result.to_dict())


@router.get(
    "/profile",
    summary="Get current user's profile",
    responses={
        200: {"description": "Current user's profile"},
        401: {"description": "Not authenticated"},
        404: {"description": "User no longer exists"},
    },
)
async def get_profile(user: CurrentUser, user_repo: UserRepo) -> UserResponse:
    query = GetUserQuery(user_repo)
    result = await query.execute(user.user_id)
    return UserResponse.model_validate(result.to_dict())


@router.put(
    "/profile",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Update current user's profile",
    responses={
        204: {"description": "Profile updated"},
        400: {"description": "Invalid name, phone or preferences"},
        401: {"description": "Not authenticated"},
        404: {"description": "User no longer exists"},
    },
)
async def update_profile(
    request: UpdateProfileRequest,
    user: CurrentUser,
    user_repo: UserRepo,
    session: DBSession,
) -> None:
    """
    Replace name and phone.

    Preferences are replaced as a whole when present and kept otherwise.
    """
    preferences = request.preferences.to_domain() if request.preferences else None

    command = UpdateUserCommand(user_repo)
    await command.execute(
        user_id=user.user_id,
        name=request.name,
        phone=request.phone,
        preferences=preferences,
    )
    await session.commit()


@router.put(
    "/profile/email",
    summary="Change current user's email",
    responses={
        200: {"description": "Email changed"},
        400: {"description": "Invalid email"},
        401: {"description": "Not authenticated"},
        409: {"description": "Email already registered"},
    },
)
async def change_email(
    request: ChangeEmailRequest,
    user: CurrentUser,
    user_repo: UserRepo,
    session: DBSession,
) -> UserResponse:
    """
    Change the current user's email.

    Tokens issued before the change still carry the old email claim until
    they are refreshed.
    """
    command = ChangeEmailCommand(user_repo)
    result = await command.execute(user_id=user.user_id, new_email=request.email)
    await session.commit()

    return UserResponse.model_validate(result.to_dict())


@router.put(
    "/profile/preferences",
    summary="Replace current user's preferences",
    responses={
        200: {"description": "Preferences updated"},
        400: {"description": "Invalid preferences"},
        401: {"description": "Not authenticated"},
        404: {"description": "User no longer exists"},
    },
)
async def update_preferences(
    request: PreferencesSchema,
    user: CurrentUser,
    user_repo: UserRepo,
    session: DBSession,
) -> UserPreferencesResponse:
    """Replace all preferences; omitted fields take their defaults."""
    command = UpdatePreferencesCommand(user_repo)
    preferences = await command.execute(user.user_id, request.to_domain())
    await session.commit()

    return UserPreferencesResponse.model_validate(
        {"user_id": user.user_id, "preferences": preferences.to_dict()},
    )


@router.delete(
    "/profile",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete current user's account",
    responses={
        204: {"description": "Account deactivated"},
        400: {"description": "Account already deactivated"},
        401: {"description": "Not authenticated"},
        404: {"description": "User no longer exists"},
    },
)
async def delete_profile(
    user: CurrentUser,
    user_repo: UserRepo,
    session: DBSession,
) -> None:
    """Soft-delete the current account. The row is kept but marked inactive."""
    command = DeleteUserCommand(user_repo)
    await command.execute(user.user_id)
    await session.commit()


@router.get(
    "/preferences/{user_id}",
    summary="Get a user's preferences",
    responses={
        200: {"description": "User preferences"},
        401: {"description": "Not authenticated"},
        404: {"description": "User not found"},
    },
)
async def get_preferences(
    user_id: UUID,
    _: CurrentUser,
    user_repo: UserRepo,
) -> UserPreferencesResponse:
    query = GetUserPreferencesQuery(user_repo)
    preferences = await query.execute(user_id)
    return UserPreferencesResponse.model_validate(
        {"user_id": user_id, "preferences": preferences.to_dict()},
    )


@router.get(
    "",
    summary="List or search active users",
    responses={
        200: {"description": "A page of active users, newest first"},
        401: {"description": "Not authenticated"},
    },
)
async def list_users(
    _: CurrentUser,
    user_repo: UserRepo,
    q: Annotated[
        Optional[str],
        Query(description="Case-insensitive match on name or email"),
    ] = None,
    limit: Annotated[int, Query(description="Page size, at most 100")] = 20,
    offset: Annotated[int, Query(description="Number of users to skip")] = 0,
) -> UserListResponse:
    query = SearchUsersQuery(user_repo)
    result = await query.execute(q or "", limit=limit, offset=offset)
    return UserListResponse.model_validate(result.to_dict())


@router.get(
    "/{user_id}",
    summary="Get a user by ID",
    responses={
        200: {"description": "User profile"},
        401: {"description": "Not authenticated"},
        404: {"description": "User not found"},
    },
)
async def get_user(
    user_id: UUID,
    _: CurrentUser,
    user_repo: UserRepo,
) -> UserResponse:
    query = GetUserQuery(user_repo)
    result = await query.execute(user_id)
    return UserResponse.model_validate(result.to_dict())


@router.get(
    "/{user_id}/stats",
    summary="Get a user's reservation statistics",
    responses={
        200: {"description": "Reservation counters and activity"},
        401: {"description": "Not authenticated"},
        404: {"description": "User not found"},
    },
)
async def get_user_stats(
    user_id: UUID,
    _: CurrentUser,
    user_repo: UserRepo,
) -> UserStatsResponse:
    query = GetUserStatsQuery(user_repo)
    result = await query.execute(user_id)
    return UserStatsResponse.model_validate(result.to_dict())
