"""Domain probes for infrastructure observability.

Domain probes provide a high-level instrumentation API oriented around
domain semantics, keeping infrastructure code clean and testable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class KeyValueStoreProbe(Protocol):
    """Domain probe for key-value store observability.

    Captures reads, writes and failures of a store adapter without exposing
    logging implementation details.
    """

    def entry_read(self, key: str, found: bool) -> None:
        """Record that a key was read."""
        ...

    def entry_written(self, key: str, size: int) -> None:
        """Record that a value was written under a key."""
        ...

    def entry_removed(self, key: str) -> None:
        """Record that a key was removed."""
        ...

    def schema_created(self, table: str) -> None:
        """Record that the backing table was created or verified."""
        ...

    def storage_operation_failed(
        self, operation: str, key: str | None, error: Exception
    ) -> None:
        """Record that a store operation failed."""
        ...

    def with_context(self, context: ObservationContext) -> KeyValueStoreProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultKeyValueStoreProbe:
    """Default implementation of KeyValueStoreProbe using structlog.

    Supports observation context for including operation-scoped metadata
    with all log events.
    """

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
        backend: str = "unknown",
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context
        self._backend = backend

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        kwargs: dict[str, Any] = {"backend": self._backend}
        if self._context is not None:
            kwargs.update(self._context.as_dict())
        return kwargs

    def with_context(self, context: ObservationContext) -> DefaultKeyValueStoreProbe:
        """Create a new probe with observation context bound."""
        return DefaultKeyValueStoreProbe(
            logger=self._logger, context=context, backend=self._backend
        )

    def entry_read(self, key: str, found: bool) -> None:
        self._logger.debug(
            "entry_read",
            key=key,
            found=found,
            **self._get_context_kwargs(),
        )

    def entry_written(self, key: str, size: int) -> None:
        self._logger.debug(
            "entry_written",
            key=key,
            size=size,
            **self._get_context_kwargs(),
        )

    def entry_removed(self, key: str) -> None:
        self._logger.debug(
            "entry_removed",
            key=key,
            **self._get_context_kwargs(),
        )

    def schema_created(self, table: str) -> None:
        self._logger.info(
            "schema_created",
            table=table,
            **self._get_context_kwargs(),
        )

    def storage_operation_failed(
        self, operation: str, key: str | None, error: Exception
    ) -> None:
        self._logger.error(
            "storage_operation_failed",
            operation=operation,
            key=key,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )
