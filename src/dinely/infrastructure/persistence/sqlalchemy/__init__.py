"""SQLAlchemy persistence for the user service."""

from dinely.infrastructure.persistence.sqlalchemy.models import (
    Base,
    DomainEventModel,
    UserModel,
)
from dinely.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "DomainEventModel",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
