"""Value objects for the roster domain.

A group is identified only by its name, so it is represented as a plain
``str`` throughout. Players have no identity outside the group that owns
them; within a group they are told apart by name and team.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Player:
    """A player assigned to one team of a group.

    ``team`` is stored as free text. The application only supplies labels
    from its configured team set, but stored data is not rejected for using
    another label.
    """

    name: str
    team: str

    def __str__(self) -> str:
        """Return string representation."""
        return f"{self.name} ({self.team})"

    def same_slot(self, other: Player) -> bool:
        """Whether other has the same name in the same team."""
        return self.name == other.name and self.team == other.team
