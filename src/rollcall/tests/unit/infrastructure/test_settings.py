"""Unit tests for infrastructure settings."""

import pytest
from pydantic import ValidationError

from infrastructure.settings import RosterSettings, Settings, StorageSettings


class TestStorageSettings:
    """Tests for key-value storage configuration."""

    def test_defaults(self, monkeypatch):
        """Should default to a local SQLite file."""
        monkeypatch.delenv("ROLLCALL_STORAGE_BACKEND", raising=False)
        monkeypatch.delenv("ROLLCALL_STORAGE_KEY_NAMESPACE", raising=False)
        settings = StorageSettings(_env_file=None)

        assert settings.backend == "sqlite"
        assert settings.key_namespace == "@rollcall"
        assert settings.echo is False

    def test_database_url_uses_aiosqlite(self):
        settings = StorageSettings(path="/tmp/roster.db")

        assert settings.database_url == "sqlite+aiosqlite:////tmp/roster.db"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("ROLLCALL_STORAGE_BACKEND", "memory")
        monkeypatch.setenv("ROLLCALL_STORAGE_KEY_NAMESPACE", "@escola")

        settings = StorageSettings(_env_file=None)

        assert settings.backend == "memory"
        assert settings.key_namespace == "@escola"

    def test_rejects_unknown_backend(self):
        with pytest.raises(ValidationError):
            StorageSettings(backend="redis")

    @pytest.mark.parametrize("namespace", ["", "bad:namespace"])
    def test_rejects_invalid_namespace(self, namespace):
        with pytest.raises(ValidationError):
            StorageSettings(key_namespace=namespace)


class TestRosterSettings:
    """Tests for roster rules configuration."""

    def test_default_teams(self, monkeypatch):
        monkeypatch.delenv("ROLLCALL_ROSTER_TEAMS", raising=False)

        assert RosterSettings(_env_file=None).teams == ["Time A", "Time B"]

    def test_teams_from_json_environment(self, monkeypatch):
        monkeypatch.setenv("ROLLCALL_ROSTER_TEAMS", '["Azul", "Verde", "Vermelho"]')

        assert RosterSettings(_env_file=None).teams == ["Azul", "Verde", "Vermelho"]

    def test_rejects_empty_team_list(self):
        with pytest.raises(ValidationError):
            RosterSettings(teams=[])

    def test_rejects_duplicate_teams(self):
        with pytest.raises(ValidationError):
            RosterSettings(teams=["Time A", "Time A"])

    def test_rejects_blank_team(self):
        with pytest.raises(ValidationError):
            RosterSettings(teams=["Time A", "  "])

    def test_max_name_length_bounds(self):
        with pytest.raises(ValidationError):
            RosterSettings(max_name_length=0)


class TestSettings:
    """Tests for the aggregate settings."""

    def test_rejects_unknown_log_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="verbose")

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("ROLLCALL_DEBUG", "true")
        monkeypatch.setenv("ROLLCALL_LOG_LEVEL", "warning")

        settings = Settings()

        assert settings.debug is True
        assert settings.log_level == "warning"
