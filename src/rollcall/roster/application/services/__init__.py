"""Application services for the roster bounded context."""

from roster.application.services.group_service import GroupService
from roster.application.services.player_service import PlayerService

__all__ = [
    "GroupService",
    "PlayerService",
]
