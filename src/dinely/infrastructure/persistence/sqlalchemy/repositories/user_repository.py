"""SQLAlchemy implementation of UserRepository."""

import logging
from collections.abc import Sequence
from datetime import datetime
from typing import Optional, Union
from uuid import UUID

from sqlalchemy import Select, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from dinely.domain.shared.time import ensure_tz_aware
from dinely.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UserPage,
    UserPreferences,
    UserRepository,
    UserSnapshot,
    UserStats,
)
from dinely.infrastructure.persistence.sqlalchemy.models import (
    DomainEventModel,
    UserModel,
)

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    Writes are flushed but never committed; the caller owns the
    transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, user: User) -> None:
        existing = await self._find_model_by_id(user.id)
        events = user.pending_events

        try:
            if existing:
                self._update_model(existing, user)
                logger.debug("Updated user: %s", user.id)
            else:
                self._session.add(self._map_to_model(user))
                logger.debug("Created user: %s", user.id)

            for event in events:
                envelope = event.to_envelope()
                self._session.add(
                    DomainEventModel(
                        event_name=envelope["eventName"],
                        event_version=envelope["eventVersion"],
                        aggregate_id=envelope["aggregateId"],
                        aggregate_type=envelope["aggregateType"],
                        payload=envelope["payload"],
                        occurred_at=event.occurred_at,
                    ),
                )

            await self._session.flush()
        except IntegrityError as e:
            if "UNIQUE constraint failed" in str(e) or "unique" in str(e).lower():
                raise EmailAlreadyExistsError(user.email) from e
            raise

        user.mark_events_as_committed()
        if events:
            logger.debug("Stored %d event(s) for user: %s", len(events), user.id)

    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        model = await self._find_model_by_id(user_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        email_value = email.value if isinstance(email, Email) else Email(email).value

        stmt = select(UserModel).where(UserModel.email == email_value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None
        return self._map_to_domain(model)

    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        email_value = email.value if isinstance(email, Email) else Email(email).value

        stmt = select(UserModel.id).where(UserModel.email == email_value).limit(1)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def find_by_ids(self, user_ids: Sequence[UUID]) -> list[User]:
        if not user_ids:
            return []

        stmt = select(UserModel).where(UserModel.id.in_(list(user_ids)))
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def find_all_active(self, limit: int = 20, offset: int = 0) -> UserPage:
        stmt = select(UserModel).where(UserModel.is_active.is_(True))
        return await self._page(stmt, limit, offset)

    async def search(self, query: str, limit: int = 20, offset: int = 0) -> UserPage:
        pattern = f"%{_escape_like(query.strip())}%"
        stmt = select(UserModel).where(
            UserModel.is_active.is_(True),
            or_(
                UserModel.name.ilike(pattern, escape="\\"),
                UserModel.email.ilike(pattern, escape="\\"),
            ),
        )
        return await self._page(stmt, limit, offset)

    async def delete_by_id(self, user_id: UUID) -> None:
        model = await self._find_model_by_id(user_id)
        if model is None or not model.is_active:
            return

        # Goes through the aggregate so the deletion event is recorded
        user = self._map_to_domain(model)
        user.deactivate()
        await self.save(user)
        logger.info("Soft-deleted user: %s", user_id)

    async def get_user_stats(self, user_id: UUID) -> Optional[UserStats]:
        model = await self._find_model_by_id(user_id)
        if model is None:
            return None

        return UserStats(
            total_reservations=model.total_reservations,
            active_reservations=model.active_reservations,
            cancelled_reservations=model.cancelled_reservations,
            last_login_at=(
                ensure_tz_aware(model.last_login_at) if model.last_login_at else None
            ),
        )

    async def update_user_stats(  # NOQA: PLR0913
        self,
        user_id: UUID,
        *,
        total_reservations: Optional[int] = None,
        active_reservations: Optional[int] = None,
        cancelled_reservations: Optional[int] = None,
        last_login_at: Optional[datetime] = None,
    ) -> None:
        model = await self._find_model_by_id(user_id)
        if model is None:
            logger.warning("Stats update skipped, user not found: %s", user_id)
            return

        if total_reservations is not None:
            model.total_reservations = total_reservations
        if active_reservations is not None:
            model.active_reservations = active_reservations
        if cancelled_reservations is not None:
            model.cancelled_reservations = cancelled_reservations
        if last_login_at is not None:
            model.last_login_at = last_login_at

        await self._session.flush()

    async def _page(
        self,
        stmt: Select,
        limit: int,
        offset: int,
    ) -> UserPage:
        count_stmt = select(func.count()).select_from(stmt.subquery())
        total = (await self._session.execute(count_stmt)).scalar_one()

        page_stmt = (
            stmt.order_by(UserModel.created_at.desc(), UserModel.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self._session.execute(page_stmt)
        users = [self._map_to_domain(model) for model in result.scalars().all()]
        return UserPage(users=users, total=total)

    async def _find_model_by_id(self, user_id: UUID) -> Optional[UserModel]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        snapshot = UserSnapshot(
            id=model.id,
            email=model.email,
            name=model.name,
            phone=model.phone,
            preferences=UserPreferences.from_plain(model.preferences or {}),
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
            is_active=model.is_active,
        )
        return User.from_snapshot(snapshot, password_hash=model.password_hash)

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            email=user.email,
            password_hash=user.password_hash,
            name=user.name,
            phone=user.phone,
            preferences=user.preferences.to_plain(),
            is_active=user.is_active,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.email = user.email
        model.password_hash = user.password_hash
        model.name = user.name
        model.phone = user.phone
        model.preferences = user.preferences.to_plain()
        model.is_active = user.is_active
        model.updated_at = user.updated_at


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
