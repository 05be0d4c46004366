"""Shared infrastructure dependencies.

Provides ONLY raw storage resources (engine, key-value store).
Does NOT import from bounded contexts to maintain DDD boundaries.
"""

from __future__ import annotations

import threading

from sqlalchemy.ext.asyncio import AsyncEngine

from infrastructure.database import create_store_engine
from infrastructure.key_value import InMemoryKeyValueStore, SqlAlchemyKeyValueStore
from infrastructure.settings import StorageSettings, get_storage_settings
from shared_kernel.storage import KeyValueStore

# Module-level engine instance (created on first use)
_store_engine: AsyncEngine | None = None

# Thread lock for safe engine initialization
_engine_lock = threading.Lock()


def get_store_engine() -> AsyncEngine:
    """Get the engine for the configured SQLite file (singleton).

    Creates engine on first call and caches for subsequent calls.
    Uses double-check locking for thread-safe initialization.
    """
    global _store_engine
    if _store_engine is None:
        with _engine_lock:
            if _store_engine is None:
                _store_engine = create_store_engine(get_storage_settings())
    return _store_engine


async def open_key_value_store(
    settings: StorageSettings | None = None,
) -> KeyValueStore:
    """Build the key-value store selected by settings.

    The SQLite backend has its table created before the store is returned.
    Explicit settings get a dedicated engine; without settings the shared
    application engine is used.

    Args:
        settings: Storage settings; defaults to the cached environment settings

    Returns:
        A ready-to-use KeyValueStore

    Raises:
        StorageError: If the SQLite schema cannot be created
    """
    if settings is None:
        settings = get_storage_settings()
        engine = get_store_engine() if settings.backend == "sqlite" else None
    else:
        engine = create_store_engine(settings) if settings.backend == "sqlite" else None

    if engine is None:
        return InMemoryKeyValueStore()

    store = SqlAlchemyKeyValueStore(engine)
    await store.create_schema()
    return store


async def dispose_store_engine() -> None:
    """Dispose of the shared engine, if one was created."""
    global _store_engine
    with _engine_lock:
        engine, _store_engine = _store_engine, None
    if engine is not None:
        await engine.dispose()
