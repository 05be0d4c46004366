"""Key-value storage primitives shared across contexts."""

from shared_kernel.storage.exceptions import StorageError
from shared_kernel.storage.ports import KeyValueStore

__all__ = [
    "KeyValueStore",
    "StorageError",
]
