"""SQLAlchemy model for the domain event outbox."""

from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import JSON, Boolean, DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from dinely.domain.shared.time import utc_now
from dinely.infrastructure.persistence.sqlalchemy.models.base import Base


class DomainEventModel(Base):
    """One recorded domain event, written in the same transaction as its aggregate.

    Rows stay unprocessed until a publisher marks them; publishing is not
    part of this service.
    """

    __tablename__ = "domain_events"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    event_name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    event_version: Mapped[str] = mapped_column(String(20), nullable=False)
    aggregate_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    aggregate_type: Mapped[str] = mapped_column(String(50), nullable=False)
    payload: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)
    occurred_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )
    processed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    is_processed: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return (
            f"<DomainEventModel(event_name={self.event_name}, "
            f"aggregate_id={self.aggregate_id})>"
        )
