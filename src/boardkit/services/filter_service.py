"""Service for read-only views of the selected board."""

from __future__ import annotations

from ..models import ChatContext, Task
from .store import BoardStore


def parse_tags(expression: str) -> list[str]:
    """
    Parse a comma-delimited tag search.

    Entries are trimmed and lower-cased; empty entries are dropped.
    ``"Urgent, low,,"`` -> ``["urgent", "low"]``
    """
    return [tag for tag in (part.strip() for part in expression.lower().split(",")) if tag]


class FilterService:
    """Filtered task lists and the chat assistant summary."""

    def __init__(self, store: BoardStore) -> None:
        self.store = store

    def apply(self, tasks: list[Task] | tuple[Task, ...], query: str, tag_search: str) -> list[Task]:
        """
        Filter tasks by title text and tags, newest first.

        A task matches when its title contains ``query`` (case-insensitive)
        and, if any tags are given, at least one of its labels is among them.
        Ties on ``created_at`` keep their board order.
        """
        search_text = query.lower()
        tags = parse_tags(tag_search)

        result = [
            task
            for task in tasks
            if search_text in task.title.lower() and (not tags or task.has_label(tags))
        ]
        result.sort(key=lambda t: t.created_at, reverse=True)
        return result

    def filtered_tasks(self) -> list[Task]:
        """Apply the current search query and tag search to the selected board."""
        state = self.store.state
        board = state.current_board
        if board is None:
            return []
        return self.apply(board.tasks, state.search_query, state.tag_search)

    def chat_context(self) -> ChatContext:
        """Summarize the selected dashboard for the chat assistant."""
        state = self.store.state
        return ChatContext.from_board(state.current_name, state.current_board)
