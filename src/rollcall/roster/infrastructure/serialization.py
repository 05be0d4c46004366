"""Serialization of roster collections to stored bytes.

Both collections are stored as UTF-8 JSON arrays:

    group index:  ["Turma A", "Turma B"]
    player list:  [{"name": "Ana", "team": "Time A"}, ...]

A value that is not a JSON array cannot be interpreted at all and raises
StorageError. Inside a readable array, individual malformed records are
skipped and reported through ``on_malformed`` so one bad entry does not
cost the whole collection.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable
from typing import Any

from roster.domain.value_objects import Player
from shared_kernel.storage import StorageError

MalformedRecordHandler = Callable[[str, int, Any], None]


def _ignore(key: str, index: int, record: Any) -> None:
    return None


def _load_array(raw: bytes, key: str) -> list[Any]:
    try:
        document = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise StorageError(f"Value under '{key}' is not valid JSON: {e}", key=key) from e

    if not isinstance(document, list):
        raise StorageError(
            f"Value under '{key}' is a {type(document).__name__}, expected a list",
            key=key,
        )
    return document


def _dump_array(records: list[Any], key: str | None) -> bytes:
    text = json.dumps(records, ensure_ascii=False, separators=(",", ":"))
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise StorageError(f"Value for '{key}' is not valid UTF-8: {e}", key=key) from e


def encode_group_index(names: Iterable[str], key: str | None = None) -> bytes:
    """Encode group names, in order, for storage.

    Raises:
        StorageError: If a name cannot be encoded as UTF-8
    """
    return _dump_array(list(names), key)


def decode_group_index(
    raw: bytes,
    key: str,
    on_malformed: MalformedRecordHandler = _ignore,
) -> list[str]:
    """Decode a stored group index.

    Non-string entries are skipped. Repeated names are collapsed to their
    first occurrence so the returned index never holds duplicates.

    Raises:
        StorageError: If raw is not a JSON array
    """
    names: list[str] = []
    seen: set[str] = set()
    for index, record in enumerate(_load_array(raw, key)):
        if not isinstance(record, str):
            on_malformed(key, index, record)
            continue
        if record in seen:
            continue
        seen.add(record)
        names.append(record)
    return names


def encode_players(players: Iterable[Player], key: str | None = None) -> bytes:
    """Encode a player list, in order, for storage.

    Raises:
        StorageError: If a name or team cannot be encoded as UTF-8
    """
    return _dump_array([{"name": p.name, "team": p.team} for p in players], key)


def decode_players(
    raw: bytes,
    key: str,
    on_malformed: MalformedRecordHandler = _ignore,
) -> list[Player]:
    """Decode a stored player list.

    Records that are not objects with string ``name`` and ``team`` fields
    are skipped. Unknown extra fields are ignored.

    Raises:
        StorageError: If raw is not a JSON array
    """
    players: list[Player] = []
    for index, record in enumerate(_load_array(raw, key)):
        if not isinstance(record, dict):
            on_malformed(key, index, record)
            continue
        name = record.get("name")
        team = record.get("team")
        if not isinstance(name, str) or not isinstance(team, str):
            on_malformed(key, index, record)
            continue
        players.append(Player(name=name, team=team))
    return players
