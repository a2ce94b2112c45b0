"""Service layer for business logic."""

from .board_service import BoardService
from .dashboard_service import DashboardService
from .filter_service import FilterService, parse_tags
from .store import BoardStore
from .ui_state_service import UIStateService

__all__ = [
    "BoardService",
    "BoardStore",
    "DashboardService",
    "FilterService",
    "UIStateService",
    "parse_tags",
]
