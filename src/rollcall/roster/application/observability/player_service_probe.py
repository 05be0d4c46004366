"""Protocol for player application service observability."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class PlayerServiceProbe(Protocol):
    """Domain probe for player application service operations."""

    def player_added(self, group: str, name: str, team: str) -> None:
        """Record that a player joined a team."""
        ...

    def player_addition_failed(
        self, group: str, name: str, team: str, error: str
    ) -> None:
        """Record that adding a player failed."""
        ...

    def player_removed(self, group: str, name: str) -> None:
        """Record that a player was removed from every team of a group."""
        ...

    def player_removal_failed(self, group: str, name: str, error: str) -> None:
        """Record that removing a player failed."""
        ...

    def with_context(self, context: ObservationContext) -> PlayerServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultPlayerServiceProbe:
    """Default implementation of PlayerServiceProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultPlayerServiceProbe:
        return DefaultPlayerServiceProbe(logger=self._logger, context=context)

    def player_added(self, group: str, name: str, team: str) -> None:
        self._logger.info(
            "player_added",
            group=group,
            name=name,
            team=team,
            **self._get_context_kwargs(),
        )

    def player_addition_failed(
        self, group: str, name: str, team: str, error: str
    ) -> None:
        self._logger.error(
            "player_addition_failed",
            group=group,
            name=name,
            team=team,
            error=error,
            **self._get_context_kwargs(),
        )

    def player_removed(self, group: str, name: str) -> None:
        self._logger.info(
            "player_removed",
            group=group,
            name=name,
            **self._get_context_kwargs(),
        )

    def player_removal_failed(self, group: str, name: str, error: str) -> None:
        self._logger.error(
            "player_removal_failed",
            group=group,
            name=name,
            error=error,
            **self._get_context_kwargs(),
        )
