"""State container shared by the services."""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..models import AppState, BoardData
from ..repositories import MemoryKeyValueStore, StateStore
from ..utils import IdSource, UuidIdSource, now_ms

logger = logging.getLogger(__name__)

Listener = Callable[[AppState, AppState], None]


class BoardStore:
    """
    Holds the current snapshot and publishes new ones.

    Every accepted change replaces the snapshot wholesale, writes it through
    the state store, then notifies listeners with ``(new, old)``. Snapshots
    handed out earlier are never modified.
    """

    def __init__(
        self,
        state_store: StateStore | None = None,
        id_source: IdSource | None = None,
        clock: Callable[[], int] = now_ms,
        state: AppState | None = None,
    ) -> None:
        self.state_store = state_store or StateStore(MemoryKeyValueStore())
        self.id_source = id_source or UuidIdSource()
        self.clock = clock
        self._state = state if state is not None else self.state_store.default_state()
        self._listeners: list[Listener] = []

    @classmethod
    def open(
        cls,
        state_store: StateStore,
        id_source: IdSource | None = None,
        clock: Callable[[], int] = now_ms,
    ) -> BoardStore:
        """Create a store from whatever the state store has persisted."""
        return cls(state_store, id_source, clock, state=state_store.load())

    @property
    def state(self) -> AppState:
        """The current snapshot."""
        return self._state

    @property
    def current_board(self) -> BoardData | None:
        return self._state.current_board

    def new_id(self) -> str:
        return self.id_source.new_id()

    def now(self) -> int:
        return self.clock()

    def commit(self, new_state: AppState) -> bool:
        """
        Publish a new snapshot.

        Returns:
            True if the snapshot changed, False if ``new_state`` is the
            current snapshot (nothing is written or announced).
        """
        old_state = self._state
        if new_state is old_state:
            return False

        self._state = new_state
        try:
            self.state_store.save(new_state)
        except Exception:
            # The in-memory snapshot stays authoritative; the next commit rewrites it.
            logger.exception("Failed to persist state")

        for listener in list(self._listeners):
            try:
                listener(new_state, old_state)
            except Exception:
                logger.exception("State listener %r failed", listener)
        return True

    def update_board(self, change: Callable[[BoardData], BoardData]) -> bool:
        """Apply ``change`` to the selected board and commit the result.

        A missing board (unknown selection) or a ``change`` returning the
        same board object leaves the state untouched.
        """
        board = self._state.current_board
        if board is None:
            logger.debug("No board for selected dashboard: %s", self._state.selected)
            return False
        new_board = change(board)
        if new_board is board:
            return False
        return self.commit(self._state.with_board(new_board))

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
