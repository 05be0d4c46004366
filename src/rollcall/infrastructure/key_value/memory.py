"""In-memory implementation of KeyValueStore.

Used by unit tests and by the ``memory`` storage backend. Values are copied
on the way in so later mutation of a caller's buffer cannot leak into the
store.
"""

from __future__ import annotations

from infrastructure.observability import DefaultKeyValueStoreProbe, KeyValueStoreProbe
from shared_kernel.storage import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    """Dict-backed key-value store living for the lifetime of the process."""

    def __init__(
        self,
        initial: dict[str, bytes] | None = None,
        probe: KeyValueStoreProbe | None = None,
    ) -> None:
        self._entries: dict[str, bytes] = dict(initial or {})
        self._probe = probe or DefaultKeyValueStoreProbe(backend="memory")

    async def get(self, key: str) -> bytes | None:
        value = self._entries.get(key)
        self._probe.entry_read(key, found=value is not None)
        return value

    async def set(self, key: str, value: bytes) -> None:
        self._entries[key] = bytes(value)
        self._probe.entry_written(key, size=len(value))

    async def remove(self, key: str) -> None:
        self._entries.pop(key, None)
        self._probe.entry_removed(key)

    def snapshot(self) -> dict[str, bytes]:
        """Return a copy of every stored entry."""
        return dict(self._entries)
