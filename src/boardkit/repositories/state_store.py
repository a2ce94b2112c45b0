"""Serialize the application state to and from a key-value store."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import yaml

from ..models import DEFAULT_COLUMN_TITLES, DEFAULT_DASHBOARD_NAME, STATE_VERSION, AppState
from .protocol import KeyValueStore

logger = logging.getLogger(__name__)


class StateStore:
    """
    Reads and writes the full state blob plus the standalone calendar link.

    The blob is a YAML document carrying a ``version`` field. The external
    calendar link lives under its own key and is never part of the blob.
    """

    STATE_KEY = "boardkit-state"
    CALENDAR_KEY = "boardkit-calendar-url"

    def __init__(
        self,
        backend: KeyValueStore,
        dashboard_name: str = DEFAULT_DASHBOARD_NAME,
        column_titles: Sequence[str] = DEFAULT_COLUMN_TITLES,
    ) -> None:
        self.backend = backend
        self.dashboard_name = dashboard_name
        self.column_titles = tuple(column_titles)

    def default_state(self) -> AppState:
        return AppState.default(self.dashboard_name, self.column_titles)

    # --- State blob ---

    def load(self) -> AppState:
        """Load the persisted state, falling back to defaults if absent or corrupt."""
        try:
            raw = self.backend.get(self.STATE_KEY)
        except OSError as e:
            logger.warning("Could not read persisted state, using defaults: %s", e)
            return self.default_state()

        if raw is None:
            logger.debug("No persisted state found, using defaults")
            return self.default_state()

        try:
            state = self.decode(raw)
        except (yaml.YAMLError, UnicodeDecodeError, ValueError) as e:
            # ValidationError is a ValueError subclass; its message names the failing field
            logger.warning("Could not load persisted state, using defaults: %s", e)
            return self.default_state()

        repaired = state.repaired(self.dashboard_name, self.column_titles)
        if repaired is not state:
            logger.info("Repaired persisted state (default dashboard or selection)")
        logger.info("Loaded state with %d dashboards", len(repaired.boards))
        return repaired

    def save(self, state: AppState) -> None:
        """Write the full state blob."""
        self.backend.set(self.STATE_KEY, self.encode(state))

    @staticmethod
    def encode(state: AppState) -> bytes:
        """Convert a snapshot to its YAML representation."""
        data = state.model_dump(mode="json")
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True).encode("utf-8")

    @staticmethod
    def decode(raw: bytes) -> AppState:
        """
        Parse a YAML blob into a snapshot.

        Raises:
            yaml.YAMLError: If the blob is not valid YAML
            ValueError: If the document is not a mapping, has an unsupported
                version, or fails model validation
        """
        data = yaml.safe_load(raw.decode("utf-8"))
        if not isinstance(data, dict):
            raise ValueError("state document is not a mapping")

        version = data.get("version", STATE_VERSION)
        if version != STATE_VERSION:
            raise ValueError(f"unsupported state version: {version!r}")

        return AppState.model_validate(data)

    # --- Standalone calendar link ---

    def get_calendar_link(self) -> str | None:
        try:
            raw = self.backend.get(self.CALENDAR_KEY)
        except OSError as e:
            logger.warning("Could not read calendar link: %s", e)
            return None
        if raw is None:
            return None
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            logger.warning("Ignoring undecodable calendar link")
            return None

    def set_calendar_link(self, url: str) -> None:
        self.backend.set(self.CALENDAR_KEY, url.encode("utf-8"))

    def clear_calendar_link(self) -> None:
        self.backend.delete(self.CALENDAR_KEY)
