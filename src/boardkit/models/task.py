"""Task domain model."""

from __future__ import annotations

import datetime as dt
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

# Checklist node kinds
KIND_ITEM = "item"
KIND_GROUP = "group"

ChecklistKind = Literal["item", "group"]


def _date_to_str(value: Any) -> Any:
    """YAML turns unquoted ISO dates into date objects; keep them as text."""
    if isinstance(value, dt.date):
        return value.isoformat()
    return value


class ChecklistItem(BaseModel):
    """A completable checklist entry; groups may nest further entries."""

    model_config = ConfigDict(frozen=True)

    id: str
    text: str = ""
    completed: bool = False
    kind: ChecklistKind = KIND_ITEM
    children: tuple[ChecklistItem, ...] = ()

    @model_validator(mode="after")
    def _only_groups_have_children(self) -> ChecklistItem:
        if self.children and self.kind != KIND_GROUP:
            raise ValueError("only checklist groups may carry children")
        return self


class Task(BaseModel):
    """A work item on a board.

    Tasks of every column live in one flat sequence on the board; the
    ``column_id`` field decides which column renders the task.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    column_id: str
    title: str = ""
    description: str = ""
    labels: tuple[str, ...] = ()
    created_at: int = 0  # ms since epoch
    date: str | None = None
    media_url: str = ""  # embedded image payload or video embed URL
    checklist: tuple[ChecklistItem, ...] = ()

    @field_validator("date", mode="before")
    @classmethod
    def _coerce_date(cls, v: Any) -> Any:
        return _date_to_str(v)

    @property
    def checklist_total(self) -> int:
        """Number of top-level checklist entries."""
        return len(self.checklist)

    @property
    def checklist_completed(self) -> int:
        """Number of completed top-level checklist entries."""
        return sum(1 for item in self.checklist if item.completed)

    def has_label(self, wanted: list[str] | set[str]) -> bool:
        """True if any label matches one of the lower-cased ``wanted`` tags."""
        return any(label.lower() in wanted for label in self.labels)


class TaskDraft(BaseModel):
    """Caller-supplied fields for a new task."""

    model_config = ConfigDict(extra="ignore")

    title: str = ""
    description: str = ""
    labels: tuple[str, ...] = ()
    date: str | None = None
    media_url: str | None = None
    checklist: tuple[ChecklistItem, ...] | None = None

    @field_validator("date", mode="before")
    @classmethod
    def _falsy_date_is_absent(cls, v: Any) -> Any:
        return _date_to_str(v) or None


class TaskUpdate(BaseModel):
    """Partial update for an existing task.

    ``id``, ``column_id`` and ``created_at`` are not fields here, so they are
    dropped from mapping payloads and can never be merged into a task.
    """

    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    description: str | None = None
    labels: tuple[str, ...] | None = None
    date: str | None = None
    media_url: str | None = None
    checklist: tuple[ChecklistItem, ...] | None = None

    @field_validator("date", mode="before")
    @classmethod
    def _coerce_date(cls, v: Any) -> Any:
        return _date_to_str(v)

    def changes(self) -> dict:
        """Fields the caller explicitly set, keeping nested models intact.

        ``date`` may be cleared with an explicit None; None for any other
        field means "leave unchanged".
        """
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if name == "date" or getattr(self, name) is not None
        }

