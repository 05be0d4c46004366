"""Key-value storage port.

The roster repositories persist whole collections as opaque byte values
addressed by string keys. Any backend offering these three coroutines can be
plugged in: an in-memory dict for tests, SQLite on a device, or anything else.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """Asynchronous, schemaless key-value store.

    Implementations are used from a single process and are not expected to
    handle concurrent writers to the same key. Every method raises
    StorageError when the underlying medium fails.
    """

    async def get(self, key: str) -> bytes | None:
        """Return the value stored under key, or None when absent.

        Raises:
            StorageError: If the backend cannot be read
        """
        ...

    async def set(self, key: str, value: bytes) -> None:
        """Store value under key, replacing any previous value.

        Raises:
            StorageError: If the backend cannot be written
        """
        ...

    async def remove(self, key: str) -> None:
        """Delete key. Succeeds when the key does not exist.

        Raises:
            StorageError: If the backend cannot be written
        """
        ...
