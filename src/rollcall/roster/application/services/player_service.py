"""Player application service for the roster bounded context.

Validates player names and team labels before delegating to the player
repository. Group existence is not checked, matching the repository's loose
coupling between groups and player lists.
"""

from __future__ import annotations

from infrastructure.settings import RosterSettings, get_roster_settings
from roster.application.observability import (
    DefaultPlayerServiceProbe,
    PlayerServiceProbe,
)
from roster.application.validation import normalize_name
from roster.domain.value_objects import Player
from roster.ports.exceptions import UnknownTeamError
from roster.ports.repositories import IPlayerRepository


class PlayerService:
    """Application service for assigning players to teams."""

    def __init__(
        self,
        player_repository: IPlayerRepository,
        settings: RosterSettings | None = None,
        probe: PlayerServiceProbe | None = None,
    ):
        """Initialize PlayerService with dependencies.

        Args:
            player_repository: Repository for per-group player lists
            settings: Roster rules; defaults to the environment settings
            probe: Optional domain probe for observability
        """
        self._player_repository = player_repository
        self._settings = settings or get_roster_settings()
        self._probe = probe or DefaultPlayerServiceProbe()

    @property
    def teams(self) -> list[str]:
        """Team labels players can be assigned to, in display order."""
        return list(self._settings.teams)

    def _check_team(self, team: str) -> None:
        if team not in self._settings.teams:
            raise UnknownTeamError(team, self.teams)

    async def add_player(self, name: str, team: str, group: str) -> Player:
        """Add a player to a team of a group.

        Args:
            name: Player name as typed; surrounding whitespace is dropped
            team: One of the configured team labels
            group: Name of the owning group

        Returns:
            The stored player

        Raises:
            InvalidNameError: If the name is blank or too long
            UnknownTeamError: If team is not a configured label
            DuplicatePlayerError: If the name is already taken in that team
            StorageError: If the player list cannot be read or written
        """
        try:
            cleaned = normalize_name("player", name, self._settings.max_name_length)
            self._check_team(team)
            player = Player(name=cleaned, team=team)
            await self._player_repository.add_by_group(player, group)
        except Exception as e:
            self._probe.player_addition_failed(
                group=group, name=name, team=team, error=str(e)
            )
            raise

        self._probe.player_added(group=group, name=player.name, team=player.team)
        return player

    async def list_team(self, group: str, team: str) -> list[Player]:
        """List the players of one team of a group, in insertion order.

        Raises:
            UnknownTeamError: If team is not a configured label
        """
        self._check_team(team)
        return await self._player_repository.get_by_group_and_team(group, team)

    async def list_teams(self, group: str) -> dict[str, list[Player]]:
        """List a group's players split by configured team.

        Players stored under a label outside the configured set are left out.
        """
        players = await self._player_repository.get_by_group(group)
        return {
            team: [p for p in players if p.team == team] for team in self._settings.teams
        }

    async def remove_player(self, name: str, group: str) -> None:
        """Remove a player from every team of a group."""
        try:
            await self._player_repository.remove_by_group(name, group)
        except Exception as e:
            self._probe.player_removal_failed(group=group, name=name, error=str(e))
            raise

        self._probe.player_removed(group=group, name=name)
