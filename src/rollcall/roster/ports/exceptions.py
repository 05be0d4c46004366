"""Domain exceptions for the roster bounded context.

These exceptions represent business-rule violations detected during
repository operations. They should be caught by the application layer and
presented to the user; storage faults are reported separately through
StorageError.
"""


class DuplicateGroupError(Exception):
    """Raised when creating a group whose name is already registered.

    Group names are the group's identity, so they must be unique across the
    group index.
    """

    def __init__(self, name: str):
        super().__init__(f"Group '{name}' already exists")
        self.name = name


class DuplicatePlayerError(Exception):
    """Raised when adding a player whose name is already taken in that team.

    Uniqueness is per (group, team): the same name may appear once in each
    team of a group.
    """

    def __init__(self, name: str, team: str, group: str):
        super().__init__(
            f"Player '{name}' already exists in team '{team}' of group '{group}'"
        )
        self.name = name
        self.team = team
        self.group = group


class InvalidNameError(Exception):
    """Raised when a group or player name is blank or too long.

    Names are checked after surrounding whitespace is stripped.
    """

    def __init__(self, kind: str, name: str, reason: str):
        super().__init__(f"Invalid {kind} name {name!r}: {reason}")
        self.kind = kind
        self.name = name
        self.reason = reason


class UnknownTeamError(Exception):
    """Raised when a player is assigned to a team outside the configured set."""

    def __init__(self, team: str, teams: list[str]):
        super().__init__(f"Unknown team {team!r}; expected one of {teams}")
        self.team = team
        self.teams = teams
