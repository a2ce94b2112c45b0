"""Service for column and task changes on the selected board."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..models import BoardData, Column, Task, TaskDraft, TaskUpdate
from .store import BoardStore

logger = logging.getLogger(__name__)


class BoardService:
    """
    Column and task operations on the selected dashboard's board.

    Unknown ids never raise: the operation simply leaves the board as it
    was and reports False (or None).
    """

    def __init__(self, store: BoardStore) -> None:
        self.store = store

    @property
    def board(self) -> BoardData | None:
        return self.store.current_board

    # --- Reads ---

    def get_column(self, column_id: str) -> Column | None:
        board = self.board
        return board.get_column(column_id) if board else None

    def get_task(self, task_id: str) -> Task | None:
        board = self.board
        return board.get_task(task_id) if board else None

    def tasks_in_column(self, column_id: str) -> list[Task]:
        board = self.board
        return board.tasks_in_column(column_id) if board else []

    # --- Columns ---

    def add_column(self, title: str) -> Column | None:
        """Append a column to the board."""
        column = Column(id=self.store.new_id(), title=title)

        def change(board: BoardData) -> BoardData:
            return board.model_copy(update={"columns": (*board.columns, column)})

        if not self.store.update_board(change):
            return None
        logger.info("Column added: %s (%s)", column.id, title)
        return column

    def update_column(self, column_id: str, title: str) -> bool:
        """Retitle a column."""

        def change(board: BoardData) -> BoardData:
            column = board.get_column(column_id)
            if column is None or column.title == title:
                return board
            columns = tuple(
                c.model_copy(update={"title": title}) if c.id == column_id else c
                for c in board.columns
            )
            return board.model_copy(update={"columns": columns})

        changed = self.store.update_board(change)
        if not changed:
            logger.debug("update_column: nothing to change for %s", column_id)
        return changed

    def delete_column(self, column_id: str) -> bool:
        """Delete a column together with every task assigned to it."""

        def change(board: BoardData) -> BoardData:
            if board.get_column(column_id) is None:
                return board
            return board.model_copy(
                update={
                    "columns": tuple(c for c in board.columns if c.id != column_id),
                    "tasks": tuple(t for t in board.tasks if t.column_id != column_id),
                }
            )

        changed = self.store.update_board(change)
        if changed:
            logger.info("Column deleted: %s", column_id)
        else:
            logger.debug("delete_column: column not found: %s", column_id)
        return changed

    # --- Tasks ---

    def add_task(self, column_id: str, draft: TaskDraft | Mapping[str, Any]) -> Task | None:
        """
        Append a new task to the board.

        The column id is not checked; a task added to a missing column keeps
        the dangling reference rather than being redirected elsewhere.
        """
        if not isinstance(draft, TaskDraft):
            draft = TaskDraft.model_validate(dict(draft))

        task = Task(
            id=self.store.new_id(),
            column_id=column_id,
            title=draft.title,
            description=draft.description,
            labels=draft.labels,
            created_at=self.store.now(),
            date=draft.date,
            media_url=draft.media_url or "",
            checklist=draft.checklist or (),
        )

        def change(board: BoardData) -> BoardData:
            if board.get_column(column_id) is None:
                logger.debug("add_task: column %s does not exist", column_id)
            return board.model_copy(update={"tasks": (*board.tasks, task)})

        if not self.store.update_board(change):
            return None
        logger.info("Task created: %s (column=%s)", task.id, column_id)
        return task

    def update_task(self, task_id: str, updates: TaskUpdate | Mapping[str, Any]) -> Task | None:
        """
        Merge ``updates`` into a task.

        Only fields the caller set are merged. ``id``, ``column_id`` and
        ``created_at`` are never changed, even if present in a mapping.

        Returns:
            The updated task, or None if the task is missing or the update
            is empty.
        """
        if not isinstance(updates, TaskUpdate):
            updates = TaskUpdate.model_validate(dict(updates))
        changes = updates.changes()

        def change(board: BoardData) -> BoardData:
            index = board.index_of_task(task_id)
            if index < 0 or not changes:
                return board
            tasks = list(board.tasks)
            tasks[index] = tasks[index].model_copy(update=changes)
            return board.model_copy(update={"tasks": tuple(tasks)})

        if not self.store.update_board(change):
            logger.debug("update_task: nothing to change for %s", task_id)
            return None
        return self.get_task(task_id)

    def delete_task(self, task_id: str) -> bool:
        """Delete a task by ID."""

        def change(board: BoardData) -> BoardData:
            if board.get_task(task_id) is None:
                return board
            return board.model_copy(
                update={"tasks": tuple(t for t in board.tasks if t.id != task_id)}
            )

        changed = self.store.update_board(change)
        if changed:
            logger.info("Task deleted: %s", task_id)
        else:
            logger.debug("delete_task: task not found: %s", task_id)
        return changed

    def move_task(self, task_id: str, to_column_id: str) -> bool:
        """
        Assign a task to another column.

        The task keeps its position in the board's task sequence and the
        target column is not validated.
        """

        def change(board: BoardData) -> BoardData:
            index = board.index_of_task(task_id)
            if index < 0 or board.tasks[index].column_id == to_column_id:
                return board
            tasks = list(board.tasks)
            tasks[index] = tasks[index].model_copy(update={"column_id": to_column_id})
            return board.model_copy(update={"tasks": tuple(tasks)})

        changed = self.store.update_board(change)
        if changed:
            logger.info("Task moved: %s -> %s", task_id, to_column_id)
        else:
            logger.debug("move_task: nothing to change for %s", task_id)
        return changed

    def reorder_tasks(self, active_id: str, over_id: str) -> bool:
        """
        Move the active task to the position held by the over task.

        Both tasks must exist and share a column; otherwise nothing happens
        (move the task to the other column first). The active task is removed
        from the board's flat task sequence and reinserted at the over task's
        original index, which leaves tasks of other columns where they are.

        Returns:
            True if the task was moved
        """

        def change(board: BoardData) -> BoardData:
            active_idx = board.index_of_task(active_id)
            over_idx = board.index_of_task(over_id)
            if active_idx < 0 or over_idx < 0 or active_idx == over_idx:
                return board
            active = board.tasks[active_idx]
            if active.column_id != board.tasks[over_idx].column_id:
                return board

            tasks = list(board.tasks)
            tasks.pop(active_idx)
            tasks.insert(over_idx, active)
            return board.model_copy(update={"tasks": tuple(tasks)})

        changed = self.store.update_board(change)
        if changed:
            logger.debug("Task reordered: %s -> position of %s", active_id, over_id)
        else:
            logger.debug("reorder_tasks: ignored (%s, %s)", active_id, over_id)
        return changed
