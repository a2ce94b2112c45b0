"""Service for dashboard lifecycle management."""

from __future__ import annotations

import logging

from ..models import DEFAULT_DASHBOARD, BoardData
from .store import BoardStore

logger = logging.getLogger(__name__)


class DashboardService:
    """Create, select, rename and delete dashboards."""

    def __init__(self, store: BoardStore) -> None:
        self.store = store

    @property
    def selected(self) -> str:
        return self.store.state.selected

    def list_dashboards(self) -> list[tuple[str, str]]:
        """(id, display name) pairs in creation order."""
        state = self.store.state
        return [(dashboard_id, state.names.get(dashboard_id, "")) for dashboard_id in state.boards]

    def get_name(self, dashboard_id: str) -> str | None:
        return self.store.state.names.get(dashboard_id)

    def create_dashboard(self, name: str) -> str:
        """Create a dashboard with the starter columns and select it."""
        state = self.store.state
        dashboard_id = self.store.new_id()
        board = BoardData.seeded(self.store.state_store.column_titles)

        self.store.commit(
            state.model_copy(
                update={
                    "boards": {**state.boards, dashboard_id: board},
                    "names": {**state.names, dashboard_id: name},
                    "selected": dashboard_id,
                }
            )
        )
        logger.info("Dashboard created: %s (%s)", dashboard_id, name)
        return dashboard_id

    def select_dashboard(self, dashboard_id: str) -> None:
        """
        Select a dashboard.

        The id is not validated; with an unknown selection board-scoped
        changes are ignored and queries come back empty.
        """
        state = self.store.state
        if dashboard_id not in state.boards:
            logger.warning("Selecting unknown dashboard: %s", dashboard_id)
        if dashboard_id == state.selected:
            return
        self.store.commit(state.model_copy(update={"selected": dashboard_id}))

    def rename_dashboard(self, dashboard_id: str, name: str) -> None:
        """Set the display name (also for ids without a board)."""
        state = self.store.state
        if state.names.get(dashboard_id) == name:
            return
        self.store.commit(state.model_copy(update={"names": {**state.names, dashboard_id: name}}))

    def delete_dashboard(self, dashboard_id: str) -> bool:
        """
        Delete a dashboard and its board.

        The default dashboard is protected. If the deleted dashboard was
        selected, the selection falls back to the default dashboard.

        Returns:
            True if something was deleted
        """
        if dashboard_id == DEFAULT_DASHBOARD:
            logger.debug("delete_dashboard: default dashboard is protected")
            return False

        state = self.store.state
        if dashboard_id not in state.boards and dashboard_id not in state.names:
            logger.debug("delete_dashboard: dashboard not found: %s", dashboard_id)
            return False

        boards = {k: v for k, v in state.boards.items() if k != dashboard_id}
        names = {k: v for k, v in state.names.items() if k != dashboard_id}
        selected = DEFAULT_DASHBOARD if state.selected == dashboard_id else state.selected

        self.store.commit(
            state.model_copy(update={"boards": boards, "names": names, "selected": selected})
        )
        logger.info("Dashboard deleted: %s", dashboard_id)
        return True
