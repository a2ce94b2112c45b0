"""Shared fixtures."""

import pytest

from boardkit.repositories import MemoryKeyValueStore, StateStore
from boardkit.services import (
    BoardService,
    BoardStore,
    DashboardService,
    FilterService,
    UIStateService,
)
from boardkit.utils import SequentialIdSource


class FakeClock:
    """Millisecond clock that advances by one step on every read."""

    def __init__(self, start: int = 1_000, step: int = 1) -> None:
        self.now = start
        self.step = step

    def __call__(self) -> int:
        value = self.now
        self.now += self.step
        return value


@pytest.fixture
def backend() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture
def state_store(backend: MemoryKeyValueStore) -> StateStore:
    return StateStore(backend)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(state_store: StateStore, clock: FakeClock) -> BoardStore:
    """A fresh, independent store with predictable ids and timestamps."""
    return BoardStore(state_store, SequentialIdSource("id"), clock)


@pytest.fixture
def board_service(store: BoardStore) -> BoardService:
    return BoardService(store)


@pytest.fixture
def dashboard_service(store: BoardStore) -> DashboardService:
    return DashboardService(store)


@pytest.fixture
def filter_service(store: BoardStore) -> FilterService:
    return FilterService(store)


@pytest.fixture
def ui_state_service(store: BoardStore) -> UIStateService:
    return UIStateService(store)
