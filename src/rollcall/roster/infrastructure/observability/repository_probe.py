"""Domain probes for roster repository operations.

Following Domain-Oriented Observability patterns, these probes capture
domain-significant events related to group and player persistence.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class GroupRepositoryProbe(Protocol):
    """Domain probe for group repository operations."""

    def group_created(self, name: str, group_count: int) -> None:
        """Record that a group was appended to the index."""
        ...

    def duplicate_group_name(self, name: str) -> None:
        """Record that a duplicate group name was rejected."""
        ...

    def groups_listed(self, count: int) -> None:
        """Record that the group index was read."""
        ...

    def group_removed(self, name: str, existed: bool) -> None:
        """Record that a group and its player list were removed."""
        ...

    def malformed_record_skipped(self, key: str, index: int, record: Any) -> None:
        """Record that an undecodable index entry was ignored."""
        ...

    def with_context(self, context: ObservationContext) -> GroupRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultGroupRepositoryProbe:
    """Default implementation of GroupRepositoryProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultGroupRepositoryProbe:
        """Create a new probe with observation context bound."""
        return DefaultGroupRepositoryProbe(logger=self._logger, context=context)

    def group_created(self, name: str, group_count: int) -> None:
        """Record that a group was appended to the index."""
        self._logger.info(
            "group_created",
            name=name,
            group_count=group_count,
            **self._get_context_kwargs(),
        )

    def duplicate_group_name(self, name: str) -> None:
        """Record that a duplicate group name was rejected."""
        self._logger.warning(
            "duplicate_group_name",
            name=name,
            **self._get_context_kwargs(),
        )

    def groups_listed(self, count: int) -> None:
        """Record that the group index was read."""
        self._logger.debug(
            "groups_listed",
            count=count,
            **self._get_context_kwargs(),
        )

    def group_removed(self, name: str, existed: bool) -> None:
        """Record that a group and its player list were removed."""
        self._logger.info(
            "group_removed",
            name=name,
            existed=existed,
            **self._get_context_kwargs(),
        )

    def malformed_record_skipped(self, key: str, index: int, record: Any) -> None:
        """Record that an undecodable index entry was ignored."""
        self._logger.warning(
            "malformed_record_skipped",
            key=key,
            index=index,
            record=repr(record),
            **self._get_context_kwargs(),
        )


class PlayerRepositoryProbe(Protocol):
    """Domain probe for player repository operations."""

    def player_added(self, group: str, name: str, team: str, player_count: int) -> None:
        """Record that a player was appended to a group."""
        ...

    def duplicate_player(self, group: str, name: str, team: str) -> None:
        """Record that a duplicate player was rejected."""
        ...

    def players_listed(self, group: str, team: str | None, count: int) -> None:
        """Record that a group's players were read."""
        ...

    def players_removed(self, group: str, name: str, removed_count: int) -> None:
        """Record a remove-by-name on a group, including no-op removals."""
        ...

    def malformed_record_skipped(self, key: str, index: int, record: Any) -> None:
        """Record that an undecodable player entry was ignored."""
        ...

    def with_context(self, context: ObservationContext) -> PlayerRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultPlayerRepositoryProbe:
    """Default implementation of PlayerRepositoryProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultPlayerRepositoryProbe:
        """Create a new probe with observation context bound."""
        return DefaultPlayerRepositoryProbe(logger=self._logger, context=context)

    def player_added(self, group: str, name: str, team: str, player_count: int) -> None:
        self._logger.info(
            "player_added",
            group=group,
            name=name,
            team=team,
            player_count=player_count,
            **self._get_context_kwargs(),
        )

    def duplicate_player(self, group: str, name: str, team: str) -> None:
        self._logger.warning(
            "duplicate_player",
            group=group,
            name=name,
            team=team,
            **self._get_context_kwargs(),
        )

    def players_listed(self, group: str, team: str | None, count: int) -> None:
        self._logger.debug(
            "players_listed",
            group=group,
            team=team,
            count=count,
            **self._get_context_kwargs(),
        )

    def players_removed(self, group: str, name: str, removed_count: int) -> None:
        self._logger.info(
            "players_removed",
            group=group,
            name=name,
            removed_count=removed_count,
            **self._get_context_kwargs(),
        )

    def malformed_record_skipped(self, key: str, index: int, record: Any) -> None:
        self._logger.warning(
            "malformed_record_skipped",
            key=key,
            index=index,
            record=repr(record),
            **self._get_context_kwargs(),
        )
