"""Application settings using pydantic-settings.

Settings are loaded from environment variables with defaults suited to a
single-user, on-device install.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Key segment separator used by roster key construction.
KEY_SEPARATOR = ":"


class StorageSettings(BaseSettings):
    """Key-value storage settings.

    Environment variables:
        ROLLCALL_STORAGE_BACKEND: "sqlite" or "memory" (default: sqlite)
        ROLLCALL_STORAGE_PATH: SQLite database file (default: rollcall.db)
        ROLLCALL_STORAGE_ECHO: Log emitted SQL (default: false)
        ROLLCALL_STORAGE_KEY_NAMESPACE: Prefix of every stored key (default: @rollcall)
    """

    model_config = SettingsConfigDict(
        env_prefix="ROLLCALL_STORAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    backend: Literal["sqlite", "memory"] = Field(
        default="sqlite", description="Key-value store backend"
    )
    path: str = Field(default="rollcall.db", description="SQLite database file")
    echo: bool = Field(default=False, description="Log emitted SQL statements")
    key_namespace: str = Field(
        default="@rollcall",
        description="Prefix of every stored key",
        min_length=1,
    )

    @field_validator("key_namespace")
    @classmethod
    def validate_key_namespace(cls, value: str) -> str:
        """Reject namespaces containing the key separator."""
        if KEY_SEPARATOR in value:
            raise ValueError(
                f"key_namespace must not contain '{KEY_SEPARATOR}': {value!r}"
            )
        return value

    @property
    def database_url(self) -> str:
        """SQLAlchemy async URL for the SQLite file."""
        return f"sqlite+aiosqlite:///{self.path}"


class RosterSettings(BaseSettings):
    """Roster rules enforced by the application services.

    Environment variables:
        ROLLCALL_ROSTER_TEAMS: JSON list of team labels (default: ["Time A", "Time B"])
        ROLLCALL_ROSTER_MAX_NAME_LENGTH: Longest accepted group/player name (default: 64)
    """

    model_config = SettingsConfigDict(
        env_prefix="ROLLCALL_ROSTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    teams: list[str] = Field(
        default_factory=lambda: ["Time A", "Time B"],
        description="Team labels players can be assigned to",
        min_length=1,
    )
    max_name_length: int = Field(
        default=64,
        description="Longest accepted group or player name",
        ge=1,
        le=255,
    )

    @field_validator("teams")
    @classmethod
    def validate_teams(cls, value: list[str]) -> list[str]:
        """Team labels must be non-blank and distinct."""
        if any(not team.strip() for team in value):
            raise ValueError("team labels must not be blank")
        if len(set(value)) != len(value):
            raise ValueError(f"team labels must be distinct: {value}")
        return value


class Settings(BaseSettings):
    """Application-wide settings: debug mode and log level."""

    model_config = SettingsConfigDict(
        env_prefix="ROLLCALL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = Field(default=False, description="Debug mode")
    log_level: Literal["debug", "info", "warning", "error"] = Field(
        default="info", description="Minimum log level"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_storage_settings() -> StorageSettings:
    """Get cached storage settings."""
    return StorageSettings()


@lru_cache
def get_roster_settings() -> RosterSettings:
    """Get cached roster settings."""
    return RosterSettings()
