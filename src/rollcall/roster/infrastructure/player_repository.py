"""KeyValueStore implementation of IPlayerRepository.

Each group's players are one stored JSON array under a key derived from the
group name. The group index is never consulted here: player lists are
addressable by any name, which keeps the two collections loosely coupled.
Like the group index, lists are rewritten whole on every mutation.
"""

from __future__ import annotations

from roster.domain.value_objects import Player
from roster.infrastructure.keys import DEFAULT_NAMESPACE, player_list_key
from roster.infrastructure.observability import (
    DefaultPlayerRepositoryProbe,
    PlayerRepositoryProbe,
)
from roster.infrastructure.serialization import decode_players, encode_players
from roster.ports.exceptions import DuplicatePlayerError
from roster.ports.repositories import IPlayerRepository
from shared_kernel.storage import KeyValueStore


class PlayerRepository(IPlayerRepository):
    """Repository for per-group player lists."""

    def __init__(
        self,
        store: KeyValueStore,
        key_namespace: str = DEFAULT_NAMESPACE,
        probe: PlayerRepositoryProbe | None = None,
    ) -> None:
        """Initialize repository with a key-value store.

        Args:
            store: Backing key-value store
            key_namespace: Prefix shared by every roster key
            probe: Optional domain probe for observability
        """
        self._store = store
        self._namespace = key_namespace
        self._probe = probe or DefaultPlayerRepositoryProbe()

    async def _load(self, group: str) -> list[Player]:
        key = player_list_key(self._namespace, group)
        raw = await self._store.get(key)
        if raw is None:
            return []
        return decode_players(
            raw, key, on_malformed=self._probe.malformed_record_skipped
        )

    async def _save(self, group: str, players: list[Player]) -> None:
        key = player_list_key(self._namespace, group)
        await self._store.set(key, encode_players(players, key))

    async def add_by_group(self, player: Player, group: str) -> None:
        players = await self._load(group)

        if any(existing.same_slot(player) for existing in players):
            self._probe.duplicate_player(group, player.name, player.team)
            raise DuplicatePlayerError(player.name, player.team, group)

        players.append(player)
        await self._save(group, players)
        self._probe.player_added(group, player.name, player.team, len(players))

    async def get_by_group(self, group: str) -> list[Player]:
        players = await self._load(group)
        self._probe.players_listed(group, None, len(players))
        return players

    async def get_by_group_and_team(self, group: str, team: str) -> list[Player]:
        players = [p for p in await self._load(group) if p.team == team]
        self._probe.players_listed(group, team, len(players))
        return players

    async def remove_by_group(self, player_name: str, group: str) -> None:
        players = await self._load(group)
        remaining = [p for p in players if p.name != player_name]

        removed_count = len(players) - len(remaining)
        if removed_count:
            await self._save(group, remaining)

        self._probe.players_removed(group, player_name, removed_count)
