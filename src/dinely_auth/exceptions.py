"""Authentication exceptions.

These exceptions are raised by the dinely_auth package and by the
application handlers that authenticate users. Every ``AuthError`` is an
"unauthorized" outcome; the message is safe to return to clients and
never says which check failed.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid, expired, malformed or of the wrong type."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised when email or password is incorrect, or the account is inactive."""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


class InvalidRefreshTokenError(AuthError):
    """Raised when a refresh token cannot be exchanged for a new token pair."""

    def __init__(self, message: str = "Invalid refresh token"):
        super().__init__(message)


class InvalidResetTokenError(AuthError):
    """Raised when a password reset token is invalid or expired."""

    def __init__(self, message: str = "Invalid or expired password reset token"):
        super().__init__(message)


class WeakPasswordError(Exception):
    """Raised when a password doesn't meet strength requirements.

    This is a validation failure of caller input, not an authentication
    failure, so it does not derive from ``AuthError``.
    """

    def __init__(self, message: str = "Password does not meet requirements"):
        self.message = message
        super().__init__(message)


class MalformedHashError(Exception):
    """Raised when a stored password hash cannot be parsed.

    Signals corrupted storage rather than a wrong password.
    """

    def __init__(self, message: str = "Stored password hash is malformed"):
        self.message = message
        super().__init__(message)
