"""Terminal rendering for boards and command results."""

import sys

from ..models import Column, Task
from ..utils import from_ms

GREEN = "\033[32m"
BLUE = "\033[34m"
RED = "\033[31m"
DIM = "\033[2m"
BOLD = "\033[1m"
RESET = "\033[0m"
CHECK = "\u2713"  # ✓
CROSS = "\u2717"  # ✗


def _paint(text: str, color: str) -> str:
    """Wrap text in an ANSI color when stdout is a terminal."""
    if getattr(sys.stdout, "isatty", None) and sys.stdout.isatty():
        return f"{color}{text}{RESET}"
    return text


def success(message: str) -> None:
    print(f"{_paint(CHECK, GREEN)} {message}")


def error(message: str) -> None:
    """Report a failed command on stderr."""
    print(f"{_paint(CROSS, RED)} {message}", file=sys.stderr)


def column_header(column: Column, task_count: int) -> str:
    """``To do (3)`` followed by the dimmed column id."""
    return f"{_paint(f'{column.title} ({task_count})', BOLD + BLUE)} {_paint(column.id, DIM)}"


def task_line(task: Task) -> str:
    """One-line task summary: title, labels, checklist progress, id and creation time."""
    parts = [task.title]
    if task.labels:
        parts.append(f"[{', '.join(task.labels)}]")
    if task.checklist:
        parts.append(f"{task.checklist_completed}/{task.checklist_total}")
    if task.date:
        parts.append(f"due {task.date}")
    created = from_ms(task.created_at).strftime("%Y-%m-%d %H:%M")
    parts.append(_paint(f"({task.id}, {created})", DIM))
    return " ".join(parts)


def dashboard_line(dashboard_id: str, name: str, selected: bool) -> str:
    marker = "*" if selected else " "
    return f"{marker} {name} {_paint(f'({dashboard_id})', DIM)}"
