"""Tests for the SQLAlchemy UserRepository implementation."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from sqlalchemy import select

from dinely.domain.user import (
    EmailAlreadyExistsError,
    User,
    UserPreferences,
    UserStats,
)
from dinely.infrastructure.persistence.sqlalchemy.models import (
    DomainEventModel,
    UserModel,
)
from dinely.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

HASH = "$2b$04$" + "a" * 53
BASE_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def _new_user(email: str = "john.doe@example.com", name: str = "John Doe") -> User:
    return User.create(
        email=email,
        password_hash=HASH,
        name=name,
        phone="+1234567890",
    )


def _user_created_at(minutes: int, email: str, name: str = "User") -> User:
    """Build a user with a fixed creation time and no pending events."""
    created = BASE_TIME + timedelta(minutes=minutes)
    return User(
        email=email,
        password_hash=HASH,
        name=name,
        phone="+1234567890",
        created_at=created,
    )


async def _events(session) -> list[DomainEventModel]:
    result = await session.execute(
        select(DomainEventModel).order_by(DomainEventModel.occurred_at),
    )
    return list(result.scalars().all())


class TestSaveAndFind:
    @pytest.mark.asyncio
    async def test_save_and_find_by_id(self, async_session):
        repo = UserRepositorySQLAlchemy(async_session)
        prefs = UserPreferences(cuisine_types=("italian",), language="de")
        user = User.create(
            email="a@example.com",
            password_hash=HASH,
            name="Ann",
            phone="+1234567890",
            preferences=prefs,
        )

        await repo.save(user)
        found = await repo.find_by_id(user.id)

        assert found == user
        assert found.email == "a@example.com"
        assert found.password_hash == HASH
        assert found.preferences == prefs
        assert found.created_at.tzinfo is not None
        assert found.pending_events == ()

    @pytest.mark.asyncio
    async def test_save_marks_events_committed_and_writes_outbox(self, async_session):
        repo = UserRepositorySQLAlchemy(async_session)
        user = _new_user()

        await repo.save(user)

        assert user.pending_events == ()
        (event,) = await _events(async_session)
        assert event.event_name == "user.created"
        assert event.aggregate_id == str(user.id)
        assert event.aggregate_type == "User"
        assert event.payload["email"] == user.email
        assert event.is_processed is False

    @pytest.mark.asyncio
    async def test_save_existing_user_updates_row(self, async_session):
        repo = UserRepositorySQLAlchemy(async_session)
        user = _new_user()
        await repo.save(user)

        user.update_profile("Jane Doe", "+1987654321")
        await repo.save(user)
        found = await repo.find_by_id(user.id)

        assert found.name == "Jane Doe"
        assert found.phone == "+1987654321"
        names = [e.event_name for e in await _events(async_session)]
        assert names == ["user.created", "user.updated"]

    @pytest.mark.asyncio
    async def test_find_by_email_is_case_insensitive(self, async_session):
        repo = UserRepositorySQLAlchemy(async_session)
        user = _new_user()
        await repo.save(user)

        assert await repo.find_by_email("JOHN.DOE@example.com") == user
        assert await repo.exists_by_email("john.doe@EXAMPLE.com") is True
        assert await repo.exists_by_email("nobody@example.com") is False
        assert await repo.find_by_email("nobody@example.com") is None

    @pytest.mark.asyncio
    async def test_find_by_id_unknown_returns_none(self, async_session):
        repo = UserRepositorySQLAlchemy(async_session)

        assert await repo.find_by_id(uuid4()) is None

    @pytest.mark.asyncio
    async def test_find_by_ids(self, async_session):
        repo = UserRepositorySQLAlchemy(async_session)
        first = _new_user("a@example.com")
        second = _new_user("b@example.com")
        await repo.save(first)
        await repo.save(second)

        found = await repo.find_by_ids([first.id, second.id, uuid4()])

        assert {u.id for u in found} == {first.id, second.id}
        assert await repo.find_by_ids([]) == []

    @pytest.mark.asyncio
    async def test_duplicate_email_raises_conflict(self, async_session):
        repo = UserRepositorySQLAlchemy(async_session)
        await repo.save(_new_user("dup@example.com"))

        with pytest.raises(EmailAlreadyExistsError):
            await repo.save(_new_user("dup@example.com"))

    @pytest.mark.asyncio
    async def test_committed_data_visible_to_new_session(self, session_maker):
        user = _new_user()
        async with session_maker() as session:
            await UserRepositorySQLAlchemy(session).save(user)
            await session.commit()

        async with session_maker() as session:
            found = await UserRepositorySQLAlchemy(session).find_by_id(user.id)

        assert found is not None
        assert found.email == user.email

    @pytest.mark.asyncio
    async def test_uncommitted_data_is_discarded(self, session_maker):
        user = _new_user()
        async with session_maker() as session:
            await UserRepositorySQLAlchemy(session).save(user)
            await session.rollback()

        async with session_maker() as session:
            assert await UserRepositorySQLAlchemy(session).find_by_id(user.id) is None


class TestDelete:
    @pytest.mark.asyncio
    async def test_delete_by_id_soft_deletes(self, async_session):
        repo = UserRepositorySQLAlchemy(async_session)
        user = _new_user()
        await repo.save(user)

        await repo.delete_by_id(user.id)
        found = await repo.find_by_id(user.id)

        assert found is not None
        assert found.is_active is False
        names = [e.event_name for e in await _events(async_session)]
        assert names == ["user.created", "user.deleted"]

    @pytest.mark.asyncio
    async def test_delete_unknown_or_inactive_is_noop(self, async_session):
        repo = UserRepositorySQLAlchemy(async_session)
        user = _new_user()
        await repo.save(user)
        await repo.delete_by_id(user.id)

        await repo.delete_by_id(user.id)
        await repo.delete_by_id(uuid4())

        names = [e.event_name for e in await _events(async_session)]
        assert names.count("user.deleted") == 1


class TestPagingAndSearch:
    @pytest.mark.asyncio
    async def test_find_all_active_newest_first(self, async_session):
        repo = UserRepositorySQLAlchemy(async_session)
        oldest = _user_created_at(0, "old@example.com")
        middle = _user_created_at(1, "mid@example.com")
        newest = _user_created_at(2, "new@example.com")
        inactive = _user_created_at(3, "gone@example.com")
        inactive.deactivate()
        for user in (oldest, middle, newest, inactive):
            await repo.save(user)

        page = await repo.find_all_active(limit=2, offset=0)

        assert page.total == 3
        assert [u.email for u in page.users] == ["new@example.com", "mid@example.com"]

        second = await repo.find_all_active(limit=2, offset=2)
        assert [u.email for u in second.users] == ["old@example.com"]

    @pytest.mark.asyncio
    async def test_search_matches_name_or_email_case_insensitively(
        self,
        async_session,
    ):
        repo = UserRepositorySQLAlchemy(async_session)
        await repo.save(_user_created_at(0, "john@example.com", name="John Smith"))
        await repo.save(_user_created_at(1, "anna@johnson.io", name="Anna"))
        await repo.save(_user_created_at(2, "bob@example.com", name="Bob"))

        page = await repo.search("JOHN")

        assert page.total == 2
        assert [u.email for u in page.users] == [
            "anna@johnson.io",
            "john@example.com",
        ]

    @pytest.mark.asyncio
    async def test_search_excludes_inactive_users(self, async_session):
        repo = UserRepositorySQLAlchemy(async_session)
        user = _user_created_at(0, "john@example.com", name="John")
        user.deactivate()
        await repo.save(user)

        page = await repo.search("john")

        assert page.total == 0
        assert page.users == []

    @pytest.mark.asyncio
    async def test_search_treats_wildcards_literally(self, async_session):
        repo = UserRepositorySQLAlchemy(async_session)
        await repo.save(_user_created_at(0, "a@example.com", name="100% Real"))
        await repo.save(_user_created_at(1, "b@example.com", name="Plain"))

        assert (await repo.search("%")).total == 1
        assert (await repo.search("_")).total == 0


class TestStats:
    @pytest.mark.asyncio
    async def test_new_user_has_zero_stats(self, async_session):
        repo = UserRepositorySQLAlchemy(async_session)
        user = _new_user()
        await repo.save(user)

        assert await repo.get_user_stats(user.id) == UserStats()

    @pytest.mark.asyncio
    async def test_unknown_user_has_no_stats(self, async_session):
        repo = UserRepositorySQLAlchemy(async_session)

        assert await repo.get_user_stats(uuid4()) is None

    @pytest.mark.asyncio
    async def test_update_user_stats_only_touches_given_fields(self, async_session):
        repo = UserRepositorySQLAlchemy(async_session)
        user = _new_user()
        await repo.save(user)
        login = BASE_TIME + timedelta(days=30)

        await repo.update_user_stats(user.id, total_reservations=4)
        await repo.update_user_stats(user.id, active_reservations=1, last_login_at=login)
        stats = await repo.get_user_stats(user.id)

        assert stats.total_reservations == 4
        assert stats.active_reservations == 1
        assert stats.cancelled_reservations == 0
        assert stats.last_login_at == login

    @pytest.mark.asyncio
    async def test_update_user_stats_keeps_updated_at(self, async_session):
        repo = UserRepositorySQLAlchemy(async_session)
        user = _user_created_at(0, "a@example.com")
        await repo.save(user)

        await repo.update_user_stats(user.id, last_login_at=BASE_TIME + timedelta(1))
        found = await repo.find_by_id(user.id)

        assert found.updated_at == BASE_TIME

    @pytest.mark.asyncio
    async def test_update_user_stats_unknown_user_is_noop(self, async_session):
        repo = UserRepositorySQLAlchemy(async_session)

        await repo.update_user_stats(uuid4(), total_reservations=1)

        result = await async_session.execute(select(UserModel))
        assert result.scalars().all() == []
