"""Utility functions."""

from .datetime import from_ms, now_ms, now_utc
from .ids import IdSource, SequentialIdSource, UuidIdSource

__all__ = [
    "IdSource",
    "SequentialIdSource",
    "UuidIdSource",
    "from_ms",
    "now_ms",
    "now_utc",
]
