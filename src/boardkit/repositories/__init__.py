"""Repository layer for data access."""

from .filesystem import FilesystemKeyValueStore
from .memory import MemoryKeyValueStore
from .protocol import KeyValueStore
from .state_store import StateStore

__all__ = [
    "FilesystemKeyValueStore",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "StateStore",
]
