"""Repository protocols (ports) for the roster bounded context.

Repository protocols define the interface for persisting and retrieving
groups and players. Implementations sit on top of a KeyValueStore and keep
the group index and the per-group player lists consistent with each other.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from roster.domain.value_objects import Player


@runtime_checkable
class IGroupRepository(Protocol):
    """Repository for the ordered index of group names.

    A missing index is the same as an empty one. Removing a group also
    removes the player list stored for it.
    """

    async def get_all(self) -> list[str]:
        """List every group name in creation order.

        Returns:
            Group names, or an empty list when none were created

        Raises:
            StorageError: If the index cannot be read or decoded
        """
        ...

    async def create(self, name: str) -> None:
        """Append a group to the index.

        The name is stored as given; callers validate blank names.

        Args:
            name: The group name

        Raises:
            DuplicateGroupError: If the name is already in the index
            StorageError: If the index cannot be read or written
        """
        ...

    async def remove_by_name(self, name: str) -> None:
        """Delete a group and every player stored for it.

        The player list is removed before the index entry, so a failure in
        between leaves a visible, empty group rather than hidden players.
        Removing an unknown group succeeds.

        Args:
            name: The group name

        Raises:
            StorageError: If either key cannot be written
        """
        ...


@runtime_checkable
class IPlayerRepository(Protocol):
    """Repository for the player lists of each group.

    Player lists are addressed by group name only; the group index is not
    consulted, so players can be stored for a name that was never created
    as a group.
    """

    async def add_by_group(self, player: Player, group: str) -> None:
        """Append a player to a group's list.

        Args:
            player: The player to add
            group: Name of the owning group

        Raises:
            DuplicatePlayerError: If the group already has that name in that team
            StorageError: If the list cannot be read or written
        """
        ...

    async def get_by_group(self, group: str) -> list[Player]:
        """List every player of a group in insertion order.

        Raises:
            StorageError: If the list cannot be read or decoded
        """
        ...

    async def get_by_group_and_team(self, group: str, team: str) -> list[Player]:
        """List a group's players assigned to one team, in insertion order.

        Args:
            group: Name of the owning group
            team: Team label to filter on (exact match)

        Returns:
            Matching players, or an empty list when the group has none

        Raises:
            StorageError: If the list cannot be read or decoded
        """
        ...

    async def remove_by_group(self, player_name: str, group: str) -> None:
        """Remove every player with that name from a group, in any team.

        Succeeds without writing when nothing matches.

        Args:
            player_name: Name of the player(s) to remove
            group: Name of the owning group

        Raises:
            StorageError: If the list cannot be read or written
        """
        ...
