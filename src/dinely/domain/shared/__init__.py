"""Shared domain components.

This module exports the exception hierarchy, event primitives and time
helpers used across domain boundaries.
"""

from dinely.domain.shared.events import DomainEvent, HasPendingEvents
from dinely.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from dinely.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "EntityNotFoundError",
    "ConflictError",
    # Events
    "DomainEvent",
    "HasPendingEvents",
    # Utilities
    "ensure_tz_aware",
    "utc_now",
]
