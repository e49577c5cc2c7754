"""User repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union
from uuid import UUID

from dinely.domain.user.aggregates.user import User
from dinely.domain.user.value_objects.email import Email


@dataclass(frozen=True)
class UserPage:
    """One page of users plus the total number of matches."""

    users: list[User]
    total: int


@dataclass(frozen=True)
class UserStats:
    """Reservation counters and last login, maintained outside the aggregate."""

    total_reservations: int = 0
    active_reservations: int = 0
    cancelled_reservations: int = 0
    last_login_at: Optional[datetime] = None


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """
        Save or update a user.

        If the user exists (by ID), updates it. If the user doesn't
        exist, creates it. Pending domain events are persisted with the
        user and then marked as committed on the aggregate.

        Raises
        ------
        EmailAlreadyExistsError
            If email is already in use by another user
        """

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """
        Find a user by their ID, active or not.

        Returns
        -------
        User if found, None otherwise
        """

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """
        Find a user by their email address.

        The email is normalized (trimmed, lowercased) before lookup.

        Raises
        ------
        InvalidEmailError
            If email format is invalid
        """

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        """Check if any user, active or not, holds the given email."""

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UUID]) -> list[User]:
        """Find all users whose ID is in ``user_ids``; unknown IDs are skipped."""

    @abstractmethod
    async def find_all_active(self, limit: int = 20, offset: int = 0) -> UserPage:
        """Page through active users, newest first."""

    @abstractmethod
    async def search(self, query: str, limit: int = 20, offset: int = 0) -> UserPage:
        """
        Search active users by a case-insensitive substring of name or email.

        Results are ordered newest first.
        """

    @abstractmethod
    async def delete_by_id(self, user_id: UUID) -> None:
        """
        Soft-delete a user by marking it inactive.

        Rows are never physically removed. Unknown IDs are ignored.
        """

    @abstractmethod
    async def get_user_stats(self, user_id: UUID) -> Optional[UserStats]:
        """Return the user's counters, or None if the user does not exist."""

    @abstractmethod
    async def update_user_stats(  # NOQA: PLR0913
        self,
        user_id: UUID,
        *,
        total_reservations: Optional[int] = None,
        active_reservations: Optional[int] = None,
        cancelled_reservations: Optional[int] = None,
        last_login_at: Optional[datetime] = None,
    ) -> None:
        """Update only the provided counters; others are preserved."""
