"""Group application service for the roster bounded context.

Validates user input before it reaches the group repository, mirroring the
checks the roster screens perform before creating a group.
"""

from __future__ import annotations

from infrastructure.settings import RosterSettings, get_roster_settings
from roster.application.observability import (
    DefaultGroupServiceProbe,
    GroupServiceProbe,
)
from roster.application.validation import normalize_name
from roster.ports.repositories import IGroupRepository


class GroupService:
    """Application service for group management."""

    def __init__(
        self,
        group_repository: IGroupRepository,
        settings: RosterSettings | None = None,
        probe: GroupServiceProbe | None = None,
    ):
        """Initialize GroupService with dependencies.

        Args:
            group_repository: Repository for the group index
            settings: Roster rules; defaults to the environment settings
            probe: Optional domain probe for observability
        """
        self._group_repository = group_repository
        self._settings = settings or get_roster_settings()
        self._probe = probe or DefaultGroupServiceProbe()

    async def create_group(self, name: str) -> str:
        """Create a group from user input.

        The stripped name is what gets stored, not the raw input, so
        " Turma A" and "Turma A" count as the same group.

        Args:
            name: Group name as typed; surrounding whitespace is dropped

        Returns:
            The stored group name

        Raises:
            InvalidNameError: If the name is blank or too long
            DuplicateGroupError: If the group already exists
            StorageError: If the index cannot be read or written
        """
        try:
            cleaned = normalize_name("group", name, self._settings.max_name_length)
            await self._group_repository.create(cleaned)
        except Exception as e:
            self._probe.group_creation_failed(name=name, error=str(e))
            raise

        self._probe.group_created(name=cleaned)
        return cleaned

    async def list_groups(self) -> list[str]:
        """List group names in creation order."""
        return await self._group_repository.get_all()

    async def remove_group(self, name: str) -> None:
        """Remove a group and all of its players.

        Raises:
            StorageError: If the store cannot be written
        """
        try:
            await self._group_repository.remove_by_name(name)
        except Exception as e:
            self._probe.group_removal_failed(name=name, error=str(e))
            raise

        self._probe.group_removed(name=name)
