"""Auth commands - login, token refresh and password management."""

from dinely.application.commands.auth.change_password_command import (
    ChangePasswordCommand,
)
from dinely.application.commands.auth.login_user_command import LoginUserCommand
from dinely.application.commands.auth.refresh_token_command import (
    RefreshTokenCommand,
)
from dinely.application.commands.auth.request_password_reset_command import (
    RequestPasswordResetCommand,
)
from dinely.application.commands.auth.reset_password_command import (
    ResetPasswordCommand,
)

__all__ = [
    "ChangePasswordCommand",
    "LoginUserCommand",
    "RefreshTokenCommand",
    "RequestPasswordResetCommand",
    "ResetPasswordCommand",
]
