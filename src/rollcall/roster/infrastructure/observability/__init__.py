"""Domain-Oriented Observability for roster infrastructure.

Probes for repository operations following Domain-Oriented Observability patterns.
"""

from roster.infrastructure.observability.repository_probe import (
    DefaultGroupRepositoryProbe,
    DefaultPlayerRepositoryProbe,
    GroupRepositoryProbe,
    PlayerRepositoryProbe,
)

__all__ = [
    "GroupRepositoryProbe",
    "DefaultGroupRepositoryProbe",
    "PlayerRepositoryProbe",
    "DefaultPlayerRepositoryProbe",
]
