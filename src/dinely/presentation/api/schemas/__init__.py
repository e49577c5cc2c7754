"""Pydantic request/response schemas."""

from dinely.presentation.api.schemas.auth import (
    AuthResponse,
    ChangePasswordRequest,
    ForgotPasswordRequest,
    ForgotPasswordResponse,
    LoginRequest,
    LoginUserResponse,
    RefreshRequest,
    ResetPasswordRequest,
    TokenResponse,
    UserSummaryResponse,
    VerifyTokenResponse,
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

__all__ = [
    "AuthResponse",
    "ChangeEmailRequest",
    "ChangePasswordRequest",
    "CreatedUserResponse",
    "ForgotPasswordRequest",
    "ForgotPasswordResponse",
    "LoginRequest",
    "LoginUserResponse",
    "PreferencesSchema",
    "RefreshRequest",
    "RegisterRequest",
    "ResetPasswordRequest",
    "TokenResponse",
    "UpdateProfileRequest",
    "UserListResponse",
    "UserPreferencesResponse",
    "UserResponse",
    "UserStatsResponse",
    "UserSummaryResponse",
    "VerifyTokenResponse",
]
