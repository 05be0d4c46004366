"""Unit tests for roster domain value objects."""

import dataclasses

import pytest

from roster.domain.value_objects import Player


class TestPlayer:
    """Tests for Player value object."""

    def test_is_immutable(self):
        player = Player(name="Ana", team="Time A")

        with pytest.raises(dataclasses.FrozenInstanceError):
            player.name = "Bia"  # type: ignore[misc]

    def test_equality_by_value(self):
        assert Player("Ana", "Time A") == Player("Ana", "Time A")
        assert Player("Ana", "Time A") != Player("Ana", "Time B")

    def test_same_slot_requires_name_and_team(self):
        ana_a = Player("Ana", "Time A")

        assert ana_a.same_slot(Player("Ana", "Time A"))
        assert not ana_a.same_slot(Player("Ana", "Time B"))
        assert not ana_a.same_slot(Player("Bia", "Time A"))

    def test_str_shows_team(self):
        assert str(Player("Ana", "Time A")) == "Ana (Time A)"
