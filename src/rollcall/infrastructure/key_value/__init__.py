"""Key-value store adapters."""

from infrastructure.key_value.memory import InMemoryKeyValueStore
from infrastructure.key_value.sqlalchemy_store import (
    KeyValueEntryModel,
    SqlAlchemyKeyValueStore,
)

__all__ = [
    "InMemoryKeyValueStore",
    "KeyValueEntryModel",
    "SqlAlchemyKeyValueStore",
]
