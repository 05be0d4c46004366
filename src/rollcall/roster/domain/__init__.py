"""Roster domain: groups and the players assigned to their teams."""

from roster.domain.value_objects import Player

__all__ = [
    "Player",
]
