"""Integration test fixtures for the SQLite-backed store.

Every test gets its own database file under pytest's tmp_path, so no
external services are required.
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio

from infrastructure.database import create_store_engine
from infrastructure.key_value import SqlAlchemyKeyValueStore
from infrastructure.settings import StorageSettings


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (uses a real SQLite file)",
    )


@pytest.fixture
def sqlite_settings(tmp_path: Path) -> StorageSettings:
    """Storage settings pointing at a fresh database file."""
    return StorageSettings(
        backend="sqlite",
        path=str(tmp_path / "rollcall.db"),
        key_namespace="@rollcall",
    )


@pytest_asyncio.fixture
async def sqlite_store(
    sqlite_settings: StorageSettings,
) -> AsyncGenerator[SqlAlchemyKeyValueStore, None]:
    """Provide a SQLite store with its schema created.

    Disposes of the engine after each test.
    """
    store = SqlAlchemyKeyValueStore(create_store_engine(sqlite_settings))
    await store.create_schema()
    yield store
    await store.close()
