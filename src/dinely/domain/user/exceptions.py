"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""

from dinely.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """
    Raised when email format is invalid.

    This exception is raised during Email value object creation
    when the provided string doesn't match expected email format.
    """

    def __init__(self, message: str = "Invalid email format") -> None:
        super().__init__(message, ErrorCode.INVALID_EMAIL)


class InvalidPhoneError(ValidationError):
    """Phone number does not match the accepted format."""

    def __init__(self, message: str = "Invalid phone number") -> None:
        super().__init__(message, ErrorCode.INVALID_PHONE)


class EmptyNameError(ValidationError):
    """Name is empty after trimming."""

    def __init__(self, message: str = "Name cannot be empty") -> None:
        super().__init__(message, ErrorCode.INVALID_NAME)


class InvalidPreferencesError(ValidationError):
    """Preferences violate a value object invariant."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.INVALID_PREFERENCES)


class UserAlreadyDeactivatedError(ValidationError):
    """Deactivation requested for a user that is already inactive."""

    def __init__(self) -> None:
        super().__init__(
            "User is already deactivated",
            ErrorCode.USER_ALREADY_DEACTIVATED,
        )


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            "User with this email already exists",
            ErrorCode.EMAIL_ALREADY_EXISTS,
            {"email": email},
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: object) -> None:
        self.user_id = user_id
        super().__init__(
            "User not found",
            ErrorCode.USER_NOT_FOUND,
            {"user_id": str(user_id)},
        )
