"""Ports (interfaces) for the roster bounded context.

Ports define the contracts for repositories without specifying
implementation details. This allows for dependency inversion and makes the
domain layer independent of infrastructure.
"""

from roster.ports.exceptions import (
    DuplicateGroupError,
    DuplicatePlayerError,
    InvalidNameError,
    UnknownTeamError,
)
from roster.ports.repositories import IGroupRepository, IPlayerRepository

__all__ = [
    "IGroupRepository",
    "IPlayerRepository",
    "DuplicateGroupError",
    "DuplicatePlayerError",
    "InvalidNameError",
    "UnknownTeamError",
]
