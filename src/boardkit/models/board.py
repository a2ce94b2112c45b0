"""Board state models."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from .task import Task

DEFAULT_COLUMN_TITLES = ("To do", "In progress", "Done")


class Column(BaseModel):
    """A named lane within a board."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str


class BoardData(BaseModel):
    """Columns, tasks and settings of one dashboard."""

    model_config = ConfigDict(frozen=True)

    columns: tuple[Column, ...] = ()
    tasks: tuple[Task, ...] = ()
    external_calendar_link: str = ""
    weather_location: str = ""

    @classmethod
    def seeded(cls, titles: Sequence[str] = DEFAULT_COLUMN_TITLES) -> BoardData:
        """Create an empty board with the starter columns.

        Seeded column ids are positional ("1", "2", ...), so they are unique
        within a board and identical across freshly created boards.
        """
        return cls(
            columns=tuple(
                Column(id=str(i), title=title) for i, title in enumerate(titles, start=1)
            )
        )

    def get_column(self, column_id: str) -> Column | None:
        """Get a column by id."""
        for column in self.columns:
            if column.id == column_id:
                return column
        return None

    def get_task(self, task_id: str) -> Task | None:
        """Get a task by id."""
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def index_of_task(self, task_id: str) -> int:
        """Position of a task in the flat task sequence, or -1 if not found."""
        for i, task in enumerate(self.tasks):
            if task.id == task_id:
                return i
        return -1

    def tasks_in_column(self, column_id: str) -> list[Task]:
        """Tasks belonging to a column, in sequence order."""
        return [t for t in self.tasks if t.column_id == column_id]
