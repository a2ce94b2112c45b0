"""Filesystem-backed key-value store."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class FilesystemKeyValueStore:
    """
    Store each key as a file inside a root directory.

    The directory is created on first write, so pointing the store at a
    missing location is fine until something is saved.
    """

    def __init__(self, root: Path) -> None:
        """
        Initialize store.

        Args:
            root: Directory holding one file per key (e.g., .boardkit/)
        """
        self.root = root

    def ensure_directory(self) -> None:
        """Create the root directory if it doesn't exist."""
        self.root.mkdir(parents=True, exist_ok=True)

    def path_for(self, key: str) -> Path:
        """Get the file path for a key."""
        if not key or "/" in key or "\\" in key or key.startswith("."):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.root / key

    def get(self, key: str) -> bytes | None:
        filepath = self.path_for(key)
        if not filepath.exists():
            return None
        return filepath.read_bytes()

    def set(self, key: str, value: bytes) -> None:
        self.ensure_directory()
        filepath = self.path_for(key)
        with filepath.open("wb") as f:
            f.write(value)
        logger.debug("Wrote %d bytes to %s", len(value), filepath)

    def delete(self, key: str) -> None:
        filepath = self.path_for(key)
        if filepath.exists():
            filepath.unlink()
