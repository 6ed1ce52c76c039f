"""Database layer - session management, base models, and mixins."""

from qrmenu.core.database.base import Base, ShopScopedMixin, TimestampMixin, UUIDMixin
from qrmenu.core.database.session import (
    async_engine,
    async_session_factory,
    get_db,
)


__all__ = [
    "Base",
    "ShopScopedMixin",
    "TimestampMixin",
    "UUIDMixin",
    "async_engine",
    "async_session_factory",
    "get_db",
]
