"""Wiring for the roster bounded context.

Plain factory functions building repositories and services around a
key-value store, plus ``open_roster`` which assembles everything from
settings for an embedding application.
"""

from __future__ import annotations

from dataclasses import dataclass

from infrastructure.dependencies import open_key_value_store
from infrastructure.settings import (
    RosterSettings,
    StorageSettings,
    get_roster_settings,
    get_storage_settings,
)
from roster.application.services import GroupService, PlayerService
from roster.infrastructure.group_repository import GroupRepository
from roster.infrastructure.player_repository import PlayerRepository
from shared_kernel.storage import KeyValueStore


def get_group_repository(
    store: KeyValueStore,
    settings: StorageSettings | None = None,
) -> GroupRepository:
    """Get GroupRepository bound to the configured key namespace."""
    settings = settings or get_storage_settings()
    return GroupRepository(store=store, key_namespace=settings.key_namespace)


def get_player_repository(
    store: KeyValueStore,
    settings: StorageSettings | None = None,
) -> PlayerRepository:
    """Get PlayerRepository bound to the configured key namespace."""
    settings = settings or get_storage_settings()
    return PlayerRepository(store=store, key_namespace=settings.key_namespace)


def get_group_service(
    group_repository: GroupRepository,
    settings: RosterSettings | None = None,
) -> GroupService:
    """Get GroupService instance."""
    return GroupService(group_repository=group_repository, settings=settings)


def get_player_service(
    player_repository: PlayerRepository,
    settings: RosterSettings | None = None,
) -> PlayerService:
    """Get PlayerService instance."""
    return PlayerService(player_repository=player_repository, settings=settings)


@dataclass(frozen=True)
class Roster:
    """Services of one opened roster, sharing a single store."""

    store: KeyValueStore
    groups: GroupService
    players: PlayerService


async def open_roster(
    storage_settings: StorageSettings | None = None,
    roster_settings: RosterSettings | None = None,
) -> Roster:
    """Open the configured store and build the roster services on it.

    Raises:
        StorageError: If the store cannot be prepared
    """
    store = await open_key_value_store(storage_settings)
    storage_settings = storage_settings or get_storage_settings()
    roster_settings = roster_settings or get_roster_settings()

    return Roster(
        store=store,
        groups=get_group_service(
            get_group_repository(store, storage_settings), roster_settings
        ),
        players=get_player_service(
            get_player_repository(store, storage_settings), roster_settings
        ),
    )
