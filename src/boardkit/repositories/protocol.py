"""Persistence adapter protocol."""

from typing import Protocol


class KeyValueStore(Protocol):
    """Durable key to bytes store the board state is written through.

    The engine reads each key once at startup and rewrites the state key
    after every accepted change, so implementations only need last-write-wins
    semantics for a single in-process writer.
    """

    def get(self, key: str) -> bytes | None:
        """Return the stored value, or None if the key is absent."""
        ...

    def set(self, key: str, value: bytes) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...

    def delete(self, key: str) -> None:
        """Remove a key.

        Note:
            Does not raise an error if the key doesn't exist.
        """
        ...
