"""Utilities for datetime handling."""

from datetime import UTC, datetime


def now_utc() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC)


def now_ms() -> int:
    """Current time as milliseconds since the epoch."""
    return int(now_utc().timestamp() * 1000)


def from_ms(value: int) -> datetime:
    """Convert a millisecond epoch timestamp to a UTC datetime."""
    return datetime.fromtimestamp(value / 1000, UTC)
