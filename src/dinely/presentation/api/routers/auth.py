"""Authentication router for login, token management and password changes."""

import logging

from fastapi import APIRouter, status

from dinely.application.commands import (
    ChangePasswordCommand,
    LoginUserCommand,
    RefreshTokenCommand,
    RequestPasswordResetCommand,
    ResetPasswordCommand,
)
from dinely.presentation.api.dependencies import (
    CurrentUser,
    DBSession,
    EmailServiceDep,
    JWTServiceDep,
    PasswordServiceDep,
    SettingsDep,
    UserRepo,
)
from dinely.presentation.api.schemas.auth import (
    AuthResponse,
    ChangePasswordRequest,
    ForgotPasswordRequest,
    ForgotPasswordResponse,
    LoginRequest,
    RefreshRequest,
    ResetPasswordRequest,
    TokenResponse,
    UserSummaryResponse,
    VerifyTokenResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

FORGOT_PASSWORD_MESSAGE = (
    "If an account exists for this email, password reset instructions have been sent"
)


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    user_repo: UserRepo,
    session: DBSession,
    password_service: PasswordServiceDep,
    jwt_service: JWTServiceDep,
) -> AuthResponse:
    """
    Authenticate with email and password.

    Returns an access/refresh token pair. Unknown email, deactivated
    account and wrong password are indistinguishable.
    """
    command = LoginUserCommand(user_repo, password_service, jwt_service)
    result = await command.execute(email=request.email, password=request.password)

    # Persist last_login_at
    await session.commit()

    return AuthResponse.model_validate(result.to_dict())


@router.post(
    "/refresh",
    summary="Refresh access token",
    responses={
        200: {"description": "Tokens refreshed successfully"},
        401: {"description": "Invalid or expired refresh token"},
    },
)
async def refresh_token(
    request: RefreshRequest,
    user_repo: UserRepo,
    jwt_service: JWTServiceDep,
) -> TokenResponse:
    """Get a new token pair using a valid refresh token."""
    command = RefreshTokenCommand(user_repo, jwt_service)
    tokens = await command.execute(request.refresh_token)
    return TokenResponse.model_validate(tokens.to_dict())


@router.post(
    "/logout",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Logout user",
    responses={
        204: {"description": "Logged out successfully"},
        401: {"description": "Not authenticated"},
    },
)
async def logout(user: CurrentUser) -> None:
    """
    Logout user.

    Tokens are stateless and stay valid until they expire; clients are
    expected to discard them.
    """
    logger.debug("User logged out: %s", user.user_id)


@router.post(
    "/change-password",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Change password",
    responses={
        204: {"description": "Password changed successfully"},
        400: {"description": "New password too weak"},
        401: {"description": "Current password incorrect or not authenticated"},
        404: {"description": "User no longer exists"},
    },
)
async def change_password(
    request: ChangePasswordRequest,
    user: CurrentUser,
    user_repo: UserRepo,
    session: DBSession,
    password_service: PasswordServiceDep,
) -> None:
    """
    Change the current user's password.

    Requires the current password for verification and a new password
    that meets the strength requirements.
    """
    command = ChangePasswordCommand(user_repo, password_service)
    await command.execute(
        user_id=user.user_id,
        current_password=request.current_password,
        new_password=request.new_password,
    )
    await session.commit()


@router.post(
    "/verify-token",
    summary="Verify access token",
    responses={
        200: {"description": "Token is valid"},
        401: {"description": "Missing, invalid or expired token"},
    },
)
async def verify_token(user: CurrentUser) -> VerifyTokenResponse:
    """Return the identity carried by the presented access token."""
    return VerifyTokenResponse(
        user=UserSummaryResponse(id=user.user_id, email=user.email, name=user.name),
    )


@router.post(
    "/forgot-password",
    status_code=status.HTTP_202_ACCEPTED,
    summary="Request password reset",
    responses={
        202: {"description": "If the email exists, reset instructions were sent"},
    },
)
async def forgot_password(
    request: ForgotPasswordRequest,
    user_repo: UserRepo,
    jwt_service: JWTServiceDep,
    email_service: EmailServiceDep,
    settings: SettingsDep,
) -> ForgotPasswordResponse:
    """
    Request a password reset link by email.

    The response is identical whether or not the account exists. The
    token itself is never returned over this endpoint.
    """
    command = RequestPasswordResetCommand(
        user_repo,
        jwt_service,
        email_service=email_service,
        frontend_base_url=settings.frontend_base_url,
    )
    await command.execute(request.email)

    return ForgotPasswordResponse(message=FORGOT_PASSWORD_MESSAGE)


@router.post(
    "/reset-password",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Reset password",
    responses={
        204: {"description": "Password reset successfully"},
        400: {"description": "New password too weak"},
        401: {"description": "Invalid or expired reset token"},
    },
)
async def reset_password(
    request: ResetPasswordRequest,
    user_repo: UserRepo,
    session: DBSession,
    password_service: PasswordServiceDep,
    jwt_service: JWTServiceDep,
) -> None:
    """Set a new password using a token from forgot-password."""
    command = ResetPasswordCommand(user_repo, password_service, jwt_service)
    await command.execute(reset_token=request.token, new_password=request.new_password)
    await session.commit()
