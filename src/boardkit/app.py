"""boardkit application composition root."""

from __future__ import annotations

from collections.abc import Callable

from .config import Settings
from .repositories import FilesystemKeyValueStore, KeyValueStore, StateStore
from .services import (
    BoardService,
    BoardStore,
    DashboardService,
    FilterService,
    UIStateService,
)
from .utils import IdSource, now_ms


class BoardkitApp:
    """Wires the persistence backend, the state container and the services.

    Each instance owns an independent registry; nothing is shared through
    module globals.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        backend: KeyValueStore | None = None,
        id_source: IdSource | None = None,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self.settings = settings or Settings()
        self.backend: KeyValueStore = backend or FilesystemKeyValueStore(self.settings.state_dir)
        self._init_services(id_source, clock)

    def _init_services(self, id_source: IdSource | None, clock: Callable[[], int]) -> None:
        """Load persisted state and initialize services."""
        self.state_store = StateStore(
            self.backend,
            dashboard_name=self.settings.default_dashboard_name,
            column_titles=self.settings.default_columns,
        )
        self.store = BoardStore.open(self.state_store, id_source, clock)

        self.dashboard_service = DashboardService(self.store)
        self.board_service = BoardService(self.store)
        self.filter_service = FilterService(self.store)
        self.ui_state_service = UIStateService(self.store)
