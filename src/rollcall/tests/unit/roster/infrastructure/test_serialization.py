"""Unit tests for roster collection serialization."""

import json
from unittest.mock import Mock

import pytest

from roster.domain.value_objects import Player
from roster.infrastructure.serialization import (
    decode_group_index,
    decode_players,
    encode_group_index,
    encode_players,
)
from shared_kernel.storage import StorageError


class TestEncoding:
    """Tests for the encode functions."""

    def test_group_index_is_utf8_json_array(self):
        raw = encode_group_index(["Turma Á", "Turma B"])

        assert raw == '["Turma Á","Turma B"]'.encode("utf-8")

    def test_players_are_name_team_objects(self):
        raw = encode_players([Player("Ana", "Time A")])

        assert json.loads(raw) == [{"name": "Ana", "team": "Time A"}]

    def test_empty_collections_encode_to_empty_array(self):
        assert encode_group_index([]) == b"[]"
        assert encode_players([]) == b"[]"

    def test_unencodable_group_name_raises_storage_error(self):
        with pytest.raises(StorageError) as exc_info:
            encode_group_index(["G\ud800"], key="@rollcall:groups")

        assert exc_info.value.key == "@rollcall:groups"
        assert isinstance(exc_info.value.__cause__, UnicodeEncodeError)

    def test_unencodable_player_raises_storage_error(self):
        key = "@rollcall:players:G1"

        with pytest.raises(StorageError) as exc_info:
            encode_players([Player("Ana\udc80", "Time A")], key=key)

        assert exc_info.value.key == key


class TestDecodeGroupIndex:
    """Tests for decode_group_index."""

    def test_collapses_duplicates_keeping_first_position(self):
        raw = json.dumps(["A", "B", "A", "C", "B"]).encode()

        assert decode_group_index(raw, "k") == ["A", "B", "C"]

    def test_reports_malformed_entries(self):
        handler = Mock()
        raw = json.dumps(["A", {"name": "B"}, 1]).encode()

        assert decode_group_index(raw, "k", on_malformed=handler) == ["A"]
        handler.assert_any_call("k", 1, {"name": "B"})
        handler.assert_any_call("k", 2, 1)

    @pytest.mark.parametrize(
        "raw",
        [b"", b"not json", b'{"groups": []}', b'"A"', b"\xff\xfe"],
    )
    def test_rejects_unreadable_documents(self, raw):
        with pytest.raises(StorageError) as exc_info:
            decode_group_index(raw, "@rollcall:groups")

        assert exc_info.value.key == "@rollcall:groups"


class TestDecodePlayers:
    """Tests for decode_players."""

    def test_preserves_order(self):
        raw = json.dumps(
            [{"name": "B", "team": "Time A"}, {"name": "A", "team": "Time B"}]
        ).encode()

        assert decode_players(raw, "k") == [Player("B", "Time A"), Player("A", "Time B")]

    def test_keeps_duplicates_as_stored(self):
        """Reading never rewrites data; duplicates are only blocked on insert."""
        record = {"name": "A", "team": "Time A"}
        raw = json.dumps([record, record]).encode()

        assert len(decode_players(raw, "k")) == 2

    def test_rejects_non_array_document(self):
        with pytest.raises(StorageError):
            decode_players(b"null", "k")
