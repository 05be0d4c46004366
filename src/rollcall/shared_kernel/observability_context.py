"""Observation context for domain-oriented observability.

Observation contexts collect and manage contextual metadata for instrumentation,
following the Domain Oriented Observability pattern.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ObservationContext:
    """Immutable context containing metadata for observability.

    Captures operation-scoped metadata that should be included with all
    instrumentation events, so a single user action can be followed across
    services, repositories and the store.

    Attributes:
        operation_id: Identifier for the current user-triggered operation.
        group: Name of the group being operated on (if applicable).
        extra: Additional contextual metadata.

    Example:
        context = ObservationContext(operation_id="op-1", group="Turma A")
        probe = DefaultGroupRepositoryProbe().with_context(context)
    """

    operation_id: str | None = None
    group: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        """Convert context to a dictionary for logging.

        Only includes non-None values to keep logs clean.
        """
        result: dict[str, Any] = {}
        if self.operation_id is not None:
            result["operation_id"] = self.operation_id
        if self.group is not None:
            result["context_group"] = self.group
        result.update(self.extra)
        return result
