"""Full application state snapshot."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field

from .board import DEFAULT_COLUMN_TITLES, BoardData
from .chat import ChatMessage

DEFAULT_DASHBOARD = "default"
DEFAULT_DASHBOARD_NAME = "Main"
STATE_VERSION = 1


class AppState(BaseModel):
    """Immutable snapshot of every dashboard plus the UI-facing state.

    The reserved ``default`` dashboard always exists. Mutations never touch
    an existing snapshot; they build a new one with ``model_copy``.
    """

    model_config = ConfigDict(frozen=True)

    version: int = STATE_VERSION
    boards: dict[str, BoardData] = Field(default_factory=dict)
    names: dict[str, str] = Field(default_factory=dict)
    selected: str = DEFAULT_DASHBOARD

    # UI-facing state
    dark_mode: bool = True
    search_query: str = ""
    tag_search: str = ""
    chat_messages: tuple[ChatMessage, ...] = ()

    @classmethod
    def default(
        cls,
        dashboard_name: str = DEFAULT_DASHBOARD_NAME,
        column_titles: Sequence[str] = DEFAULT_COLUMN_TITLES,
    ) -> AppState:
        """Create the initial state: one default dashboard with seeded columns."""
        return cls(
            boards={DEFAULT_DASHBOARD: BoardData.seeded(column_titles)},
            names={DEFAULT_DASHBOARD: dashboard_name},
        )

    @property
    def current_board(self) -> BoardData | None:
        """Board of the selected dashboard, None if the selection is unknown."""
        return self.boards.get(self.selected)

    @property
    def current_name(self) -> str:
        return self.names.get(self.selected, "")

    def with_board(self, board: BoardData) -> AppState:
        """New snapshot with the selected dashboard's board replaced."""
        return self.model_copy(update={"boards": {**self.boards, self.selected: board}})

    def repaired(
        self,
        dashboard_name: str = DEFAULT_DASHBOARD_NAME,
        column_titles: Sequence[str] = DEFAULT_COLUMN_TITLES,
    ) -> AppState:
        """Restore the registry invariants on a loaded snapshot."""
        boards = self.boards
        names = self.names
        if DEFAULT_DASHBOARD not in boards:
            boards = {DEFAULT_DASHBOARD: BoardData.seeded(column_titles), **boards}
        if DEFAULT_DASHBOARD not in names:
            names = {DEFAULT_DASHBOARD: dashboard_name, **names}
        selected = self.selected if self.selected in boards else DEFAULT_DASHBOARD

        if boards is self.boards and names is self.names and selected == self.selected:
            return self
        return self.model_copy(update={"boards": boards, "names": names, "selected": selected})
