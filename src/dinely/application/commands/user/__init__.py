"""User commands - registration and profile management."""

from dinely.application.commands.user.change_email_command import ChangeEmailCommand
from dinely.application.commands.user.create_user_command import CreateUserCommand
from dinely.application.commands.user.delete_user_command import DeleteUserCommand
from dinely.application.commands.user.update_preferences_command import (
    UpdatePreferencesCommand,
)
from dinely.application.commands.user.update_user_command import UpdateUserCommand

__all__ = [
    "ChangeEmailCommand",
    "CreateUserCommand",
    "DeleteUserCommand",
    "UpdatePreferencesCommand",
    "UpdateUserCommand",
]
