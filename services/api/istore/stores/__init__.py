"""Key-value stores for persisted storefront state.

Stores handle:
- Memory: process-local dict (default, tests)
- Redis: durable key-value storage shared across restarts

No business logic in stores - that belongs in services.
"""

from istore.stores.base import KeyValueStore, StorageError
from istore.stores.memory import MemoryStore

__all__ = ["KeyValueStore", "MemoryStore", "StorageError"]
