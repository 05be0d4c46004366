"""KeyValueStore implementation of IGroupRepository.

The group index is one stored JSON array of names. Every mutation reads the
whole index, changes it in memory and writes it back; there is no
compare-and-swap, so two concurrent writers can lose an update. Callers are
expected to serialize mutations.
"""

from __future__ import annotations

from roster.infrastructure.keys import (
    DEFAULT_NAMESPACE,
    group_index_key,
    player_list_key,
)
from roster.infrastructure.observability import (
    DefaultGroupRepositoryProbe,
    GroupRepositoryProbe,
)
from roster.infrastructure.serialization import decode_group_index, encode_group_index
from roster.ports.exceptions import DuplicateGroupError
from roster.ports.repositories import IGroupRepository
from shared_kernel.storage import KeyValueStore


class GroupRepository(IGroupRepository):
    """Repository for the group index, cascading deletes to player lists."""

    def __init__(
        self,
        store: KeyValueStore,
        key_namespace: str = DEFAULT_NAMESPACE,
        probe: GroupRepositoryProbe | None = None,
    ) -> None:
        """Initialize repository with a key-value store.

        Args:
            store: Backing key-value store
            key_namespace: Prefix shared by every roster key
            probe: Optional domain probe for observability
        """
        self._store = store
        self._namespace = key_namespace
        self._index_key = group_index_key(key_namespace)
        self._probe = probe or DefaultGroupRepositoryProbe()

    async def _load(self) -> list[str]:
        raw = await self._store.get(self._index_key)
        if raw is None:
            return []
        return decode_group_index(
            raw, self._index_key, on_malformed=self._probe.malformed_record_skipped
        )

    async def get_all(self) -> list[str]:
        groups = await self._load()
        self._probe.groups_listed(len(groups))
        return groups

    async def create(self, name: str) -> None:
        groups = await self._load()

        if name in groups:
            self._probe.duplicate_group_name(name)
            raise DuplicateGroupError(name)

        groups.append(name)
        raw = encode_group_index(groups, self._index_key)
        await self._store.set(self._index_key, raw)
        self._probe.group_created(name, len(groups))

    async def remove_by_name(self, name: str) -> None:
        groups = await self._load()

        # Players go first: a crash after this leaves an empty group, never
        # players under a group missing from the index.
        await self._store.remove(player_list_key(self._namespace, name))

        existed = name in groups
        if existed:
            remaining = [group for group in groups if group != name]
            raw = encode_group_index(remaining, self._index_key)
            await self._store.set(self._index_key, raw)

        self._probe.group_removed(name, existed)
