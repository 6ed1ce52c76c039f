"""Catalog database models: categories and items."""

from decimal import Decimal
from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from qrmenu.core.constants import (
    DEFAULT_CATEGORY_ICON,
    MAX_ICON_LENGTH,
    MAX_NAME_LENGTH,
    MAX_URL_LENGTH,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
)
from qrmenu.core.database.base import Base, ShopScopedMixin, TimestampMixin, UUIDMixin


class Category(Base, UUIDMixin, TimestampMixin, ShopScopedMixin):
    """A menu section such as "Hot Drinks".

    ``order`` is assigned once at creation and is only changed by an
    explicit overwrite; deletions leave gaps.
    """

    __tablename__ = "categories"

    name: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=False,
    )
    icon: Mapped[str] = mapped_column(
        String(MAX_ICON_LENGTH),
        nullable=False,
        default=DEFAULT_CATEGORY_ICON,
    )
    order: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name={self.name}, order={self.order})>"


class Item(Base, UUIDMixin, TimestampMixin, ShopScopedMixin):
    """A purchasable menu entry.

    ``shop_id`` always matches the shop of ``category_id``.
    """

    __tablename__ = "items"

    category_id: Mapped[UUID] = mapped_column(
        ForeignKey("categories.id"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=False,
    )
    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
    )
    price: Mapped[Decimal] = mapped_column(
        Numeric(PRICE_MAX_DIGITS, PRICE_DECIMAL_PLACES),
        nullable=False,
        default=Decimal("0"),
    )
    image: Mapped[str] = mapped_column(
        String(MAX_URL_LENGTH),
        nullable=False,
        default="",
    )
    available: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
    )

    def __repr__(self) -> str:
        return f"<Item(id={self.id}, name={self.name}, price={self.price})>"
