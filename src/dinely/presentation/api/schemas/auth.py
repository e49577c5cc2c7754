"""Authentication schemas for request/response models."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Request schema for user login.

    The email is a plain string so malformed input fails like a wrong
    password instead of revealing a validation rule.
    """

    email: str
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "john.doe@example.com",
                "password": "StrongPassword123!",
            },
        },
    )


class RefreshRequest(BaseModel):
    """Request schema for token refresh."""

    refresh_token: str = Field(..., description="Refresh token from login")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "refresh_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
            },
        },
    )


class ChangePasswordRequest(BaseModel):
    """Request schema for changing a user's password."""

    current_password: str
    new_password: str


class ForgotPasswordRequest(BaseModel):
    """Request schema for requesting a password reset token."""

    email: str


class ResetPasswordRequest(BaseModel):
    """Request schema for resetting a password with a token."""

    token: str
    new_password: str


class UserSummaryResponse(BaseModel):
    id: UUID
    email: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class LoginUserResponse(UserSummaryResponse):
    phone: str


class TokenResponse(BaseModel):
    """Response schema for token data."""

    access_token: str
    refresh_token: str
    token_type: str = Field(default="bearer")
    expires_in: int = Field(..., description="Access token lifetime in seconds")

    model_config = ConfigDict(from_attributes=True)


class AuthResponse(TokenResponse):
    """Response schema for a successful login."""

    user: LoginUserResponse


class VerifyTokenResponse(BaseModel):
    """Identity carried by a valid access token."""

    valid: bool = True
    user: UserSummaryResponse


class ForgotPasswordResponse(BaseModel):
    message: str
