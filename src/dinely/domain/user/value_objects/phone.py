"""Phone number value object."""

import re
from dataclasses import dataclass

from dinely.domain.user.exceptions import InvalidPhoneError

# Optional leading +, then at least 10 digits, spaces, dashes or parentheses
PHONE_PATTERN = re.compile(r"^\+?[\d\s\-()]{10,}$")


@dataclass(frozen=True)
class Phone:
    """Value object representing a trimmed, format-checked phone number."""

    value: str

    def __post_init__(self) -> None:
        normalized = (self.value or "").strip()
        if not PHONE_PATTERN.match(normalized):
            raise InvalidPhoneError

        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
