"""SQLAlchemy declarative base and common mixins."""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime, ForeignKey, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    """Current UTC time, used as the client-side timestamp default."""
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class UUIDMixin:
    """Mixin that adds a UUID primary key."""

    id: Mapped[UUID] = mapped_column(
        primary_key=True,
        default=uuid4,
        index=True,
    )


class TimestampMixin:
    """Mixin that adds created_at and updated_at timestamps.

    Timestamps are set client-side with microsecond precision so that
    rows inserted in the same second still sort in insertion order;
    the server default covers rows written outside the ORM.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        server_default=func.now(),
        nullable=False,
    )


class ShopScopedMixin:
    """Mixin that adds shop_id for tenant-scoped catalog rows.

    There is no database-level cascade: deleting a shop removes its
    catalog rows through explicit application passes.
    """

    shop_id: Mapped[UUID] = mapped_column(
        ForeignKey("shops.id"),
        index=True,
        nullable=False,
    )
