"""Data models."""

from .board import DEFAULT_COLUMN_TITLES, BoardData, Column
from .chat import SENDER_ASSISTANT, SENDER_USER, ChatMessage
from .context import ChatContext, ChecklistCount, ColumnSummary, TaskSummary
from .state import DEFAULT_DASHBOARD, DEFAULT_DASHBOARD_NAME, STATE_VERSION, AppState
from .task import KIND_GROUP, KIND_ITEM, ChecklistItem, Task, TaskDraft, TaskUpdate

__all__ = [
    "DEFAULT_COLUMN_TITLES",
    "DEFAULT_DASHBOARD",
    "DEFAULT_DASHBOARD_NAME",
    "KIND_GROUP",
    "KIND_ITEM",
    "SENDER_ASSISTANT",
    "SENDER_USER",
    "STATE_VERSION",
    "AppState",
    "BoardData",
    "ChatContext",
    "ChatMessage",
    "ChecklistCount",
    "ChecklistItem",
    "Column",
    "ColumnSummary",
    "Task",
    "TaskDraft",
    "TaskSummary",
    "TaskUpdate",
]
