"""Unit tests for the User aggregate."""

from uuid import UUID, uuid4

import pytest

from dinely.domain.shared import HasPendingEvents
from dinely.domain.user import (
    EmptyNameError,
    InvalidEmailError,
    InvalidPhoneError,
    User,
    UserAlreadyDeactivatedError,
    UserCreated,
    UserDeleted,
    UserPreferences,
    UserUpdated,
)

HASH = "$2b$04$abcdefghijklmnopqrstuuN0mD8Dz1l1bA3a0jz9pq0gQm3Gq0mXe"


def _make_user(**overrides) -> User:
    kwargs = {
        "email": "john.doe@example.com",
        "password_hash": HASH,
        "name": "John Doe",
        "phone": "+1234567890",
    }
    kwargs.update(overrides)
    return User.create(**kwargs)


class TestUserCreation:
    def test_create_sets_fields_and_defaults(self):
        user = _make_user(email="  John.Doe@Example.COM ", name="  John Doe  ")

        assert isinstance(user.id, UUID)
        assert user.email == "john.doe@example.com"
        assert user.name == "John Doe"
        assert user.phone == "+1234567890"
        assert user.is_active is True
        assert user.preferences == UserPreferences.default()
        assert user.preferences.language == "en"
        assert user.created_at == user.updated_at
        assert user.created_at.tzinfo is not None

    def test_create_generates_distinct_ids(self):
        assert _make_user().id != _make_user().id

    def test_create_records_user_created(self):
        user = _make_user()

        events = user.pending_events
        assert len(events) == 1
        assert isinstance(events[0], UserCreated)
        assert events[0].aggregate_id == str(user.id)
        assert events[0].user.email == user.email

    def test_create_with_explicit_id(self):
        user_id = uuid4()
        assert _make_user(id=user_id).id == user_id

    def test_create_with_preferences(self):
        prefs = UserPreferences(cuisine_types=("italian",), language="fr")
        user = _make_user(preferences=prefs)

        assert user.preferences.cuisine_types == ("italian",)
        assert user.preferences.language == "fr"

    @pytest.mark.parametrize("email", ["", "invalid-email", "a@b", "a b@c.io"])
    def test_invalid_email_raises(self, email):
        with pytest.raises(InvalidEmailError):
            _make_user(email=email)

    @pytest.mark.parametrize("phone", ["", "123", "abcdefghijkl"])
    def test_invalid_phone_raises(self, phone):
        with pytest.raises(InvalidPhoneError):
            _make_user(phone=phone)

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_raises(self, name):
        with pytest.raises(EmptyNameError):
            _make_user(name=name)

    def test_satisfies_pending_events_protocol(self):
        assert isinstance(_make_user(), HasPendingEvents)


class TestUserMutations:
    def setup_method(self):
        self.user = _make_user()
        self.user.mark_events_as_committed()

    def test_mark_events_as_committed_clears_events(self):
        assert self.user.pending_events == ()

    def test_update_profile_records_diff(self):
        self.user.update_profile("Jane Doe", "+1 (555) 123-4567")

        assert self.user.name == "Jane Doe"
        assert self.user.phone == "+1 (555) 123-4567"
        assert self.user.updated_at >= self.user.created_at

        (event,) = self.user.pending_events
        assert isinstance(event, UserUpdated)
        changes = event.changes()
        assert set(changes) == {"name", "phone"}
        assert changes["name"] == {"from": "John Doe", "to": "Jane Doe"}

    def test_update_profile_keeps_preferences_when_omitted(self):
        prefs = self.user.preferences

        self.user.update_profile("Jane Doe", "+1234567890")

        assert self.user.preferences is prefs

    def test_update_profile_replaces_preferences(self):
        prefs = UserPreferences(dietary_restrictions=("vegan",))

        self.user.update_profile("John Doe", "+1234567890", prefs)

        assert self.user.preferences == prefs
        (event,) = self.user.pending_events
        assert set(event.changes()) == {"preferences"}

    def test_invalid_update_leaves_state_untouched(self):
        with pytest.raises(InvalidPhoneError):
            self.user.update_profile("Jane Doe", "bad")

        assert self.user.name == "John Doe"
        assert self.user.pending_events == ()

    def test_update_preferences_records_diff(self):
        prefs = UserPreferences(cuisine_types=("thai",), language="de")

        self.user.update_preferences(prefs)

        assert self.user.preferences == prefs
        assert self.user.name == "John Doe"
        (event,) = self.user.pending_events
        assert isinstance(event, UserUpdated)
        assert set(event.changes()) == {"preferences"}

    def test_update_preferences_with_same_value_records_nothing(self):
        updated_at = self.user.updated_at

        self.user.update_preferences(UserPreferences.default())

        assert self.user.pending_events == ()
        assert self.user.updated_at == updated_at

    def test_update_profile_blank_name_raises(self):
        with pytest.raises(EmptyNameError):
            self.user.update_profile("", "+1234567890")

        assert self.user.name == "John Doe"

    def test_change_email_normalizes_and_records_event(self):
        self.user.change_email("NEW@Example.com")

        assert self.user.email == "new@example.com"
        (event,) = self.user.pending_events
        assert event.changes()["email"] == {
            "from": "john.doe@example.com",
            "to": "new@example.com",
        }

    def test_change_email_invalid_raises(self):
        with pytest.raises(InvalidEmailError):
            self.user.change_email("not-an-email")
        assert self.user.email == "john.doe@example.com"

    def test_change_password_records_no_event(self):
        self.user.change_password("$2b$04$" + "x" * 53)

        assert self.user.password_hash == "$2b$04$" + "x" * 53
        assert self.user.pending_events == ()

    def test_deactivate_records_user_deleted(self):
        self.user.deactivate()

        assert self.user.is_active is False
        (event,) = self.user.pending_events
        assert isinstance(event, UserDeleted)
        assert event.user_id == self.user.id
        assert event.email == self.user.email

    def test_deactivate_twice_raises(self):
        self.user.deactivate()

        with pytest.raises(UserAlreadyDeactivatedError):
            self.user.deactivate()

    def test_activate_restores_without_event(self):
        self.user.deactivate()
        self.user.mark_events_as_committed()

        self.user.activate()

        assert self.user.is_active is True
        assert self.user.pending_events == ()


class TestUserSnapshots:
    def test_round_trip_through_snapshot_records_no_events(self):
        user = _make_user()
        snapshot = user.to_snapshot()

        restored = User.from_snapshot(snapshot, password_hash=user.password_hash)

        assert restored == user
        assert restored.to_snapshot() == snapshot
        assert restored.pending_events == ()

    def test_snapshot_plain_form_has_no_password(self):
        plain = _make_user().to_snapshot().to_plain()

        assert "password_hash" not in plain
        assert "passwordHash" not in plain
        assert plain["isActive"] is True

    def test_equality_is_by_id(self):
        user = _make_user()
        other = User.from_snapshot(
            user.to_snapshot(),
            password_hash="$2b$04$" + "y" * 53,
        )

        assert user == other
        assert hash(user) == hash(other)
        assert user != _make_user()
