"""SQLAlchemy model for User aggregate."""

from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import JSON, Boolean, DateTime, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from dinely.domain.shared.time import utc_now
from dinely.infrastructure.persistence.sqlalchemy.models.base import Base


class UserModel(Base):
    """SQLAlchemy model for persisting User aggregates.

    Preferences are stored as their camelCase JSON form. Reservation
    counters and last login live on the same row but outside the
    aggregate; they are read and written through the stats methods only.
    """

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)
    preferences: Mapped[dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
    # Set from the aggregate; stats updates must not touch it
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        nullable=False,
        index=True,
    )

    # Stats
    total_reservations: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    active_reservations: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    cancelled_reservations: Mapped[int] = mapped_column(
        Integer,
        default=0,
        nullable=False,
    )
    last_login_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email}, active={self.is_active})>"
