"""SQLAlchemy models for persistence layer."""

from dinely.infrastructure.persistence.sqlalchemy.models.base import Base
from dinely.infrastructure.persistence.sqlalchemy.models.domain_event_model import (
    DomainEventModel,
)
from dinely.infrastructure.persistence.sqlalchemy.models.user_model import UserModel

__all__ = [
    "Base",
    "DomainEventModel",
    "UserModel",
]
