from dinely.application.context.user_context import AuthenticatedUser

__all__ = ["AuthenticatedUser"]
