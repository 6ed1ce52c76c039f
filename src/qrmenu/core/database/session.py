"""Async database session management."""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from qrmenu.config import settings


def _engine_options() -> dict[str, Any]:
    """Pool options for the configured backend.

    SQLite (local runs and tests) does not take a sized pool.
    """
    options: dict[str, Any] = {"echo": settings.database_echo}
    if not settings.async_database_url.startswith("sqlite"):
        options.update(
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            pool_pre_ping=True,  # Verify connections before use
        )
    return options


# Create async engine
async_engine = create_async_engine(settings.async_database_url, **_engine_options())

# Create async session factory
async_session_factory = async_sessionmaker(
    bind=async_engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency that provides a request-scoped database session.

    The session commits when the handler returns and rolls back if it
    raises, so multi-step writes such as cascading deletes are applied
    or discarded together.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
