"""CLI entry point for boardkit."""

import argparse
from pathlib import Path

from .config import Settings
from .logging import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="boardkit",
        description="Inspect and edit persisted kanban dashboards",
    )
    parser.add_argument(
        "--state-dir",
        type=Path,
        default=None,
        help="Directory holding the persisted state (default: .boardkit)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("dashboards", help="List dashboards")
    select = commands.add_parser("select", help="Select a dashboard")
    select.add_argument("dashboard_id")
    commands.add_parser("show", help="Show the selected board")
    search = commands.add_parser("search", help="Filter tasks by title and tags")
    search.add_argument("--query", default=None, help="Title substring")
    search.add_argument("--tags", default=None, help="Comma-separated tags")
    commands.add_parser("context", help="Print the chat assistant summary as JSON")
    add_column = commands.add_parser("add-column", help="Add a column")
    add_column.add_argument("title")
    add_task = commands.add_parser("add-task", help="Add a task to a column")
    add_task.add_argument("column_id")
    add_task.add_argument("title")
    add_task.add_argument("--label", action="append", dest="labels", default=None)
    add_task.add_argument("--description", default="")
    add_task.add_argument("--date", default=None)
    move = commands.add_parser("move", help="Move a task to another column")
    move.add_argument("task_id")
    move.add_argument("column_id")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    settings_kwargs: dict = {}
    if args.state_dir:
        settings_kwargs["state_dir"] = args.state_dir
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file

    settings = Settings(**settings_kwargs)
    setup_logging(settings.verbose, settings.log_file, settings.state_dir)

    # Import here so --help stays fast
    from .app import BoardkitApp
    from .cli import commands

    app = BoardkitApp(settings)

    if args.command == "dashboards":
        exit_code = commands.run_dashboards(app)
    elif args.command == "select":
        exit_code = commands.run_select(app, args.dashboard_id)
    elif args.command == "show":
        exit_code = commands.run_show(app)
    elif args.command == "search":
        exit_code = commands.run_search(app, args.query, args.tags)
    elif args.command == "context":
        exit_code = commands.run_context(app)
    elif args.command == "add-column":
        exit_code = commands.run_add_column(app, args.title)
    elif args.command == "add-task":
        exit_code = commands.run_add_task(
            app, args.column_id, args.title, args.labels, args.description, args.date
        )
    else:
        exit_code = commands.run_move(app, args.task_id, args.column_id)

    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
