"""Inspection and editing commands for the persisted boards."""

import json

from ..app import BoardkitApp
from .output import column_header, dashboard_line, error, success, task_line


def run_dashboards(app: BoardkitApp) -> int:
    """List dashboards, marking the selected one."""
    selected = app.dashboard_service.selected
    for dashboard_id, name in app.dashboard_service.list_dashboards():
        print(dashboard_line(dashboard_id, name, dashboard_id == selected))
    return 0


def run_select(app: BoardkitApp, dashboard_id: str) -> int:
    if app.dashboard_service.get_name(dashboard_id) is None:
        error(f"Unknown dashboard: {dashboard_id}")
        return 1
    app.dashboard_service.select_dashboard(dashboard_id)
    success(f"Selected dashboard: {app.dashboard_service.get_name(dashboard_id)}")
    return 0


def run_show(app: BoardkitApp) -> int:
    """Print every column of the selected board with its tasks."""
    board = app.board_service.board
    if board is None:
        error(f"Selected dashboard has no board: {app.dashboard_service.selected}")
        return 1

    for column in board.columns:
        tasks = board.tasks_in_column(column.id)
        print(column_header(column, len(tasks)))
        if not tasks:
            print("  (empty)")
        for task in tasks:
            print(f"  - {task_line(task)}")
    return 0


def run_search(app: BoardkitApp, query: str | None, tags: str | None) -> int:
    """Update the stored search text and tag search, then list matching tasks."""
    if query is not None:
        app.ui_state_service.set_search_query(query)
    if tags is not None:
        app.ui_state_service.set_tag_search(tags)

    tasks = app.filter_service.filtered_tasks()
    if not tasks:
        print("No matching tasks")
        return 0
    for task in tasks:
        print(f"- {task_line(task)}")
    return 0


def run_context(app: BoardkitApp) -> int:
    """Dump the chat assistant summary of the selected dashboard as JSON."""
    context = app.filter_service.chat_context()
    print(json.dumps(context.model_dump(mode="json"), indent=2, ensure_ascii=False))
    return 0


def run_add_column(app: BoardkitApp, title: str) -> int:
    column = app.board_service.add_column(title)
    if column is None:
        error("Could not add column: selected dashboard has no board")
        return 1
    success(f"Added column: {title} ({column.id})")
    return 0


def run_add_task(
    app: BoardkitApp,
    column_id: str,
    title: str,
    labels: list[str] | None = None,
    description: str = "",
    date: str | None = None,
) -> int:
    if app.board_service.get_column(column_id) is None:
        error(f"Unknown column: {column_id}")
        return 1
    task = app.board_service.add_task(
        column_id,
        {"title": title, "labels": labels or [], "description": description, "date": date},
    )
    if task is None:
        error("Could not add task")
        return 1
    success(f"Added task: {title} ({task.id})")
    return 0


def run_move(app: BoardkitApp, task_id: str, column_id: str) -> int:
    if app.board_service.get_task(task_id) is None:
        error(f"Unknown task: {task_id}")
        return 1
    if app.board_service.get_column(column_id) is None:
        error(f"Unknown column: {column_id}")
        return 1
    if app.board_service.move_task(task_id, column_id):
        success(f"Moved {task_id} to {column_id}")
    else:
        print(f"{task_id} is already in {column_id}")
    return 0
