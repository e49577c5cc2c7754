from datetime import datetime
from typing import Optional, Union
from uuid import UUID, uuid4

from dinely.domain.shared.events import DomainEvent
from dinely.domain.shared.time import utc_now
from dinely.domain.user.events import UserCreated, UserDeleted, UserUpdated
from dinely.domain.user.exceptions import EmptyNameError, UserAlreadyDeactivatedError
from dinely.domain.user.snapshot import UserSnapshot
from dinely.domain.user.value_objects import Email, Phone, UserPreferences


class User:
    """
    User aggregate root.

    Owns identity, contact details and dining preferences. Each user is
    uniquely identified by a random UUID generated at creation time.
    State changes that matter to other services are recorded as pending
    domain events until the repository persists them.
    """

    def __init__(  # NOQA: PLR0913
        self,
        email: Union[str, Email],
        password_hash: str,
        name: str,
        phone: Union[str, Phone],
        preferences: Optional[UserPreferences] = None,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
        is_active: bool = True,
    ):
        self._id = id if id is not None else uuid4()
        self._email = email if isinstance(email, Email) else Email(email)
        self._password_hash = password_hash
        self._name = _validated_name(name)
        self._phone = phone if isinstance(phone, Phone) else Phone(phone)
        self._preferences = preferences or UserPreferences.default()
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at
        self._is_active = is_active
        self._pending_events: list[DomainEvent] = []

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def name(self) -> str:
        return self._name

    @property
    def phone(self) -> str:
        return self._phone.value

    @property
    def preferences(self) -> UserPreferences:
        return self._preferences

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def pending_events(self) -> tuple[DomainEvent, ...]:
        return tuple(self._pending_events)

    def mark_events_as_committed(self) -> None:
        self._pending_events.clear()

    def update_profile(
        self,
        name: str,
        phone: Union[str, Phone],
        preferences: Optional[UserPreferences] = None,
    ) -> None:
        # Validate everything before touching state
        new_name = _validated_name(name)
        new_phone = phone if isinstance(phone, Phone) else Phone(phone)

        previous = self.to_snapshot()
        self._name = new_name
        self._phone = new_phone
        if preferences is not None:
            self._preferences = preferences
        self._updated_at = utc_now()

        self._record(UserUpdated(previous_state=previous, current_state=self.to_snapshot()))

    def update_preferences(self, preferences: UserPreferences) -> None:
        if preferences == self._preferences:
            return

        previous = self.to_snapshot()
        self._preferences = preferences
        self._updated_at = utc_now()

        self._record(UserUpdated(previous_state=previous, current_state=self.to_snapshot()))

    def change_email(self, new_email: Union[str, Email]) -> None:
        email = new_email if isinstance(new_email, Email) else Email(new_email)

        previous = self.to_snapshot()
        self._email = email
        self._updated_at = utc_now()

        self._record(UserUpdated(previous_state=previous, current_state=self.to_snapshot()))

    def change_password(self, new_password_hash: str) -> None:
        # Password changes stay out of the audit event stream
        self._password_hash = new_password_hash
        self._updated_at = utc_now()

    def deactivate(self) -> None:
        if not self._is_active:
            raise UserAlreadyDeactivatedError

        self._is_active = False
        self._updated_at = utc_now()

        self._record(UserDeleted(user_id=self._id, email=self.email))

    def activate(self) -> None:
        self._is_active = True
        self._updated_at = utc_now()

    def to_snapshot(self) -> UserSnapshot:
        return UserSnapshot(
            id=self._id,
            email=self.email,
            name=self._name,
            phone=self.phone,
            preferences=self._preferences,
            created_at=self._created_at,
            updated_at=self._updated_at,
            is_active=self._is_active,
        )

    @classmethod
    def create(  # NOQA: PLR0913
        cls,
        email: Union[str, Email],
        password_hash: str,
        name: str,
        phone: Union[str, Phone],
        preferences: Optional[UserPreferences] = None,
        id: Optional[UUID] = None,
    ) -> "User":
        user = cls(
            id=id,
            email=email,
            password_hash=password_hash,
            name=name,
            phone=phone,
            preferences=preferences or UserPreferences.default(),
        )
        user._record(UserCreated(user=user.to_snapshot()))
        return user

    @classmethod
    def from_snapshot(cls, snapshot: UserSnapshot, password_hash: str) -> "User":
        """Rehydrate a stored user without recording any event."""
        user = cls(
            id=snapshot.id,
            email=snapshot.email,
            password_hash=password_hash,
            name=snapshot.name,
            phone=snapshot.phone,
            preferences=snapshot.preferences,
            created_at=snapshot.created_at,
            updated_at=snapshot.updated_at,
            is_active=snapshot.is_active,
        )
        user.mark_events_as_committed()
        return user

    def _record(self, event: DomainEvent) -> None:
        self._pending_events.append(event)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value}, active={self._is_active})"


def _validated_name(name: str) -> str:
    trimmed = (name or "").strip()
    if not trimmed:
        raise EmptyNameError
    return trimmed
