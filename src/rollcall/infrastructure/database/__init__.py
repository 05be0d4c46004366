"""Database infrastructure for the SQLite-backed key-value store."""

from infrastructure.database.engines import create_sessionmaker, create_store_engine
from infrastructure.database.models import Base, TimestampMixin

__all__ = [
    "Base",
    "TimestampMixin",
    "create_sessionmaker",
    "create_store_engine",
]
