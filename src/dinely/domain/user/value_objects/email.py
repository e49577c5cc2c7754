"""Email value object.

Provides validated, normalized email addresses for user identification.
"""

import re
from dataclasses import dataclass

from dinely.domain.user.exceptions import InvalidEmailError

# Something@something.something, no whitespace
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass(frozen=True)
class Email:
    """Value object representing a validated, lowercased email address."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            msg = "Email cannot be empty"
            raise InvalidEmailError(msg)

        normalized = self.value.strip().lower()

        if not EMAIL_PATTERN.match(normalized):
            msg = "Invalid email format"
            raise InvalidEmailError(msg)

        # Replace value with normalized version (frozen dataclass workaround)
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
