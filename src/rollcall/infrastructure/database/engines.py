"""Database engine creation for async SQLAlchemy.

The on-device store is a single SQLite file accessed through aiosqlite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

if TYPE_CHECKING:
    from infrastructure.settings import StorageSettings

__all__ = [
    "create_store_engine",
    "create_sessionmaker",
]


def create_store_engine(settings: StorageSettings) -> AsyncEngine:
    """Create the async engine backing the key-value store.

    Args:
        settings: Storage settings (file path and SQL echo flag)

    Returns:
        Configured async engine for the SQLite file
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.echo,
    )


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a session factory bound to engine.

    Sessions do not expire objects on commit so values can be read after
    the transaction closes.
    """
    return async_sessionmaker(
        engine,
        expire_on_commit=False,
        class_=AsyncSession,
    )
