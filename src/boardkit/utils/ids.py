"""Identifier sources."""

import itertools
import uuid
from typing import Protocol


class IdSource(Protocol):
    """Issues unique opaque identifiers."""

    def new_id(self) -> str: ...


class UuidIdSource:
    """Random identifiers, collision-free for any practical process lifetime."""

    def new_id(self) -> str:
        return uuid.uuid4().hex


class SequentialIdSource:
    """Predictable identifiers ("t1", "t2", ...) for tests and tooling."""

    def __init__(self, prefix: str = "id") -> None:
        self.prefix = prefix
        self._counter = itertools.count(1)

    def new_id(self) -> str:
        return f"{self.prefix}{next(self._counter)}"
