"""Unit test fixtures with in-memory and mocked dependencies."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from infrastructure.key_value import InMemoryKeyValueStore
from infrastructure.settings import RosterSettings
from shared_kernel.storage import KeyValueStore, StorageError


@pytest.fixture
def store():
    """Provide an empty in-memory store with a silent probe."""
    return InMemoryKeyValueStore(probe=MagicMock())


@pytest.fixture
def failing_store():
    """Provide a store whose every operation raises StorageError."""
    store = MagicMock(spec=KeyValueStore)
    error = StorageError("disk unavailable", key="any")
    store.get = AsyncMock(side_effect=error)
    store.set = AsyncMock(side_effect=error)
    store.remove = AsyncMock(side_effect=error)
    return store


@pytest.fixture
def roster_settings():
    """Provide roster settings with the default two teams."""
    return RosterSettings(teams=["Time A", "Time B"], max_name_length=20)
