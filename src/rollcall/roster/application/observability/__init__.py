"""Domain-Oriented Observability for roster application services."""

from roster.application.observability.group_service_probe import (
    DefaultGroupServiceProbe,
    GroupServiceProbe,
)
from roster.application.observability.player_service_probe import (
    DefaultPlayerServiceProbe,
    PlayerServiceProbe,
)

__all__ = [
    "GroupServiceProbe",
    "DefaultGroupServiceProbe",
    "PlayerServiceProbe",
    "DefaultPlayerServiceProbe",
]
