"""Domain event primitives.

Aggregates buffer the events they record until the repository has
persisted them. There is no aggregate base class; anything exposing
``pending_events`` and ``mark_events_as_committed`` satisfies
``HasPendingEvents``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar, Protocol, runtime_checkable

from dinely.domain.shared.time import utc_now


@dataclass(frozen=True)
class DomainEvent(ABC):
    """Immutable record of a state change, timestamped at construction.

    Subclasses set ``event_name``/``event_version``/``aggregate_type`` and
    implement ``aggregate_id`` and ``payload``.
    """

    event_name: ClassVar[str] = "domain.event"
    event_version: ClassVar[str] = "1.0.0"
    aggregate_type: ClassVar[str] = ""

    occurred_at: datetime = field(default_factory=utc_now, kw_only=True)

    @property
    @abstractmethod
    def aggregate_id(self) -> str: ...

    @abstractmethod
    def payload(self) -> dict[str, Any]: ...

    def to_envelope(self) -> dict[str, Any]:
        """Serialise to the canonical JSON-safe event envelope."""
        return {
            "eventName": self.event_name,
            "eventVersion": self.event_version,
            "aggregateId": self.aggregate_id,
            "aggregateType": self.aggregate_type,
            "payload": self.payload(),
            "occurredAt": self.occurred_at.isoformat(),
        }


@runtime_checkable
class HasPendingEvents(Protocol):
    """Capability of entities that buffer uncommitted domain events."""

    @property
    def pending_events(self) -> tuple[DomainEvent, ...]: ...

    def mark_events_as_committed(self) -> None: ...
