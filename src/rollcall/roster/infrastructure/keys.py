"""Key construction for roster collections.

Every key the roster writes is built here:

    <namespace>:groups              the group index
    <namespace>:players:<group>     the player list of one group

The group segment is percent-encoded with no safe characters, so it never
contains the separator and distinct group names always produce distinct keys.
"""

from __future__ import annotations

from urllib.parse import quote

from infrastructure.settings import KEY_SEPARATOR
from shared_kernel.storage import StorageError

DEFAULT_NAMESPACE = "@rollcall"
GROUPS_COLLECTION = "groups"
PLAYERS_COLLECTION = "players"


def _check_namespace(namespace: str) -> None:
    if not namespace or KEY_SEPARATOR in namespace:
        raise ValueError(f"Invalid key namespace: {namespace!r}")


def group_index_key(namespace: str) -> str:
    """Key of the group index."""
    _check_namespace(namespace)
    return KEY_SEPARATOR.join((namespace, GROUPS_COLLECTION))


def player_list_key(namespace: str, group: str) -> str:
    """Key of the player list belonging to group.

    Raises:
        StorageError: If group cannot be encoded as UTF-8
    """
    _check_namespace(namespace)
    try:
        segment = quote(group, safe="")
    except UnicodeEncodeError as e:
        raise StorageError(f"Group name {group!r} cannot be stored: {e}") from e
    return KEY_SEPARATOR.join((namespace, PLAYERS_COLLECTION, segment))
