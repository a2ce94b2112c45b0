"""Service for interface preferences, search text and the chat transcript."""

from __future__ import annotations

import logging

from ..models import BoardData, ChatMessage
from ..models.chat import Sender
from .store import BoardStore

logger = logging.getLogger(__name__)


class UIStateService:
    """Setters for state that carries no structural invariants."""

    def __init__(self, store: BoardStore) -> None:
        self.store = store

    def toggle_dark_mode(self) -> bool:
        """Flip dark mode and return the new value."""
        state = self.store.state
        self.store.commit(state.model_copy(update={"dark_mode": not state.dark_mode}))
        return self.store.state.dark_mode

    def set_search_query(self, query: str) -> None:
        self._set("search_query", query)

    def set_tag_search(self, tags: str) -> None:
        self._set("tag_search", tags)

    def _set(self, field: str, value: str) -> None:
        state = self.store.state
        if getattr(state, field) == value:
            return
        self.store.commit(state.model_copy(update={field: value}))

    # --- External calendar link (stored under its own key) ---

    @property
    def external_calendar_link(self) -> str | None:
        return self.store.state_store.get_calendar_link()

    def set_external_calendar_link(self, url: str) -> bool:
        try:
            self.store.state_store.set_calendar_link(url)
        except Exception:
            logger.exception("Failed to store external calendar link")
            return False
        logger.info("External calendar link set")
        return True

    def clear_external_calendar_link(self) -> bool:
        try:
            self.store.state_store.clear_calendar_link()
        except Exception:
            logger.exception("Failed to clear external calendar link")
            return False
        logger.info("External calendar link cleared")
        return True

    # --- Board-scoped settings ---

    def set_weather_location(self, location: str) -> bool:
        return self._set_board_field("weather_location", location)

    def set_board_calendar_link(self, url: str) -> bool:
        return self._set_board_field("external_calendar_link", url)

    def _set_board_field(self, field: str, value: str) -> bool:
        def change(board: BoardData) -> BoardData:
            if getattr(board, field) == value:
                return board
            return board.model_copy(update={field: value})

        return self.store.update_board(change)

    # --- Chat transcript ---

    def append_chat_message(self, sender: Sender, content: str) -> ChatMessage:
        """Append a message to the transcript; messages are never edited or removed."""
        message = ChatMessage(
            id=self.store.new_id(),
            sender=sender,
            content=content,
            timestamp=self.store.now(),
        )
        state = self.store.state
        self.store.commit(
            state.model_copy(update={"chat_messages": (*state.chat_messages, message)})
        )
        return message
