"""Compact board summary handed to the chat assistant."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .board import BoardData
from .task import Task


class ChecklistCount(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: int = 0
    completed: int = 0


class TaskSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str
    date: str | None = None
    labels: tuple[str, ...] = ()
    checklist: ChecklistCount = ChecklistCount()
    created_at: int

    @classmethod
    def from_task(cls, task: Task) -> TaskSummary:
        """Summarize a task; checklist counts cover top-level entries only."""
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            date=task.date,
            labels=task.labels,
            checklist=ChecklistCount(
                total=task.checklist_total,
                completed=task.checklist_completed,
            ),
            created_at=task.created_at,
        )


class ColumnSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    tasks: tuple[TaskSummary, ...] = ()


class ChatContext(BaseModel):
    """Per-dashboard summary: every column with the tasks it holds."""

    model_config = ConfigDict(frozen=True)

    dashboard_name: str
    columns: tuple[ColumnSummary, ...] = ()

    @classmethod
    def from_board(cls, dashboard_name: str, board: BoardData | None) -> ChatContext:
        """Build the summary for a board (empty when there is no board)."""
        if board is None:
            return cls(dashboard_name=dashboard_name)
        return cls(
            dashboard_name=dashboard_name,
            columns=tuple(
                ColumnSummary(
                    id=column.id,
                    title=column.title,
                    tasks=tuple(
                        TaskSummary.from_task(t) for t in board.tasks_in_column(column.id)
                    ),
                )
                for column in board.columns
            ),
        )
