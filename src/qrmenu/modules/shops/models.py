"""Shop (tenant) database models."""

from typing import Any
from uuid import UUID

from sqlalchemy import JSON, Boolean, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from qrmenu.core.constants import (
    DEFAULT_CURRENCY,
    DEFAULT_THEME,
    MAX_NAME_LENGTH,
    MAX_SLUG_LENGTH,
    MAX_URL_LENGTH,
)
from qrmenu.core.database.base import Base, TimestampMixin, UUIDMixin


def default_shop_settings() -> dict[str, Any]:
    """Display settings a new shop starts with."""
    return {"currency": DEFAULT_CURRENCY, "theme": DEFAULT_THEME}


class Shop(Base, UUIDMixin, TimestampMixin):
    """A coffee shop's isolated menu namespace.

    All catalog rows reference this table via shop_id. The slug is the
    public routing key and never changes after creation.
    """

    __tablename__ = "shops"

    slug: Mapped[str] = mapped_column(
        String(MAX_SLUG_LENGTH),
        nullable=False,
        unique=True,
        index=True,
    )
    name: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=False,
    )
    logo: Mapped[str] = mapped_column(
        String(MAX_URL_LENGTH),
        nullable=False,
        default="",
    )
    owner_id: Mapped[UUID] = mapped_column(
        ForeignKey("accounts.id"),
        nullable=False,
        index=True,
    )
    # Reassign, never mutate in place: plain JSON columns don't track changes
    settings: Mapped[dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        default=default_shop_settings,
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Shop(id={self.id}, slug={self.slug}, active={self.is_active})>"
