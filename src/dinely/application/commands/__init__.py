"""Application commands (write operations)."""

from dinely.application.commands.auth import (
    ChangePasswordCommand,
    LoginUserCommand,
    RefreshTokenCommand,
    RequestPasswordResetCommand,
    ResetPasswordCommand,
)
from dinely.application.commands.user import (
    ChangeEmailCommand,
    CreateUserCommand,
    DeleteUserCommand,
    UpdatePreferencesCommand,
    UpdateUserCommand,
)

__all__ = [
    "ChangeEmailCommand",
    "ChangePasswordCommand",
    "CreateUserCommand",
    "DeleteUserCommand",
    "LoginUserCommand",
    "RefreshTokenCommand",
    "RequestPasswordResetCommand",
    "ResetPasswordCommand",
    "UpdatePreferencesCommand",
    "UpdateUserCommand",
]
