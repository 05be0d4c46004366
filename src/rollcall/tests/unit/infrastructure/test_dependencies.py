"""Unit tests for infrastructure and roster wiring."""

import pytest

from infrastructure.dependencies import open_key_value_store
from infrastructure.key_value import InMemoryKeyValueStore
from infrastructure.settings import RosterSettings, StorageSettings
from roster.dependencies import Roster, open_roster
from roster.ports.exceptions import DuplicateGroupError


class TestOpenKeyValueStore:
    """Tests for open_key_value_store."""

    @pytest.mark.asyncio
    async def test_memory_backend(self):
        store = await open_key_value_store(StorageSettings(backend="memory"))

        assert isinstance(store, InMemoryKeyValueStore)


class TestOpenRoster:
    """Tests for open_roster."""

    @pytest.mark.asyncio
    async def test_services_share_one_store(self):
        roster = await open_roster(
            StorageSettings(backend="memory", key_namespace="@teste"),
            RosterSettings(teams=["Azul", "Verde"]),
        )

        assert isinstance(roster, Roster)
        await roster.groups.create_group("Turma A")
        await roster.players.add_player("Ana", "Azul", "Turma A")

        assert roster.players.teams == ["Azul", "Verde"]
        assert set(roster.store.snapshot()) == {
            "@teste:groups",
            "@teste:players:Turma%20A",
        }

    @pytest.mark.asyncio
    async def test_group_removal_cascades_through_services(self):
        roster = await open_roster(StorageSettings(backend="memory"))
        await roster.groups.create_group("Turma A")
        await roster.players.add_player("Ana", "Time A", "Turma A")

        await roster.groups.remove_group("Turma A")

        assert await roster.groups.list_groups() == []
        assert await roster.players.list_team("Turma A", "Time A") == []
        await roster.groups.create_group("Turma A")
        with pytest.raises(DuplicateGroupError):
            await roster.groups.create_group("Turma A")
