"""Command-line front end for managing tasks."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import replace
from datetime import date
from pathlib import Path
from typing import Optional, Sequence

from taskdesk.arduino import NOTIFICATION, TASK_COMPLETED, ArduinoLink, find_arduino_port
from taskdesk.board import SortKey, TaskBoard
from taskdesk.models import COLUMNS, Priority, Status, Task, TaskValidationError, parse_date
from taskdesk.notifications import deadline_alerts, format_deadline_message
from taskdesk.report import write_report
from taskdesk.schedule import calendar_highlights
from taskdesk.stats import duration_distribution, status_chart_title, status_distribution
from taskdesk.storage import DatabaseError, TaskStore, default_database_path

_STATUSES = [s.value for s in Status]
_PRIORITIES = [p.value for p in Priority]


def _date_arg(text: str) -> date:
    parsed = parse_date(text)
    if parsed is None:
        raise argparse.ArgumentTypeError("date must be in YYYY-MM-DD format")
    return parsed


def _add_task_fields(parser: argparse.ArgumentParser, required: bool) -> None:
    default_status = None if not required else Status.NOT_STARTED.value
    default_priority = None if not required else Priority.LOW.value
    parser.add_argument("--description", default=None if not required else "")
    parser.add_argument("--status", choices=_STATUSES, default=default_status)
    parser.add_argument("--priority", choices=_PRIORITIES, default=default_priority)
    parser.add_argument("--start", dest="start_date", default=None if not required else "")
    parser.add_argument("--end", dest="end_date", default=None if not required else "")
    parser.add_argument("--assigned-to", dest="assigned_to", default=None if not required else "")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the task manager commands."""
    parser = argparse.ArgumentParser(prog="taskdesk", description="Task Management System")
    parser.add_argument("--db", type=Path, default=None, help="path of the task database")
    sub = parser.add_subparsers(dest="command", required=True)

    add = sub.add_parser("add", help="add a new task")
    add.add_argument("id")
    add.add_argument("name")
    _add_task_fields(add, required=True)

    modify = sub.add_parser("modify", help="edit an existing task")
    modify.add_argument("task_id")
    modify.add_argument("--id", dest="new_id", default=None)
    modify.add_argument("--name", default=None)
    _add_task_fields(modify, required=False)

    delete = sub.add_parser("delete", help="delete a task")
    delete.add_argument("task_id")
    delete.add_argument("-y", "--yes", action="store_true", help="do not ask for confirmation")

    complete = sub.add_parser("complete", help="mark a task as completed")
    complete.add_argument("task_id")

    listing = sub.add_parser("list", help="show tasks")
    listing.add_argument("--sort", choices=[k.value for k in SortKey], default=None)
    listing.add_argument("--desc", action="store_true")

    search = sub.add_parser("search", help="find tasks by id or name")
    search.add_argument("text")

    stats = sub.add_parser("stats", help="show task statistics")
    stats.add_argument("kind", choices=["status", "duration"])

    notify = sub.add_parser("notify", help="show deadline reminders")
    notify.add_argument("--today", type=_date_arg, default=None)
    notify.add_argument("--arduino", action="store_true", help="signal the Arduino board")

    sub.add_parser("calendar", help="list the days each task covers")

    report = sub.add_parser("report", help="export an HTML task report")
    report.add_argument("path", type=Path)

    listen = sub.add_parser("listen", help="complete a task when the Arduino reports it")
    listen.add_argument("task_id")
    listen.add_argument("--interval", type=float, default=0.1)

    return parser


def _print_tasks(tasks: Sequence[Task]) -> None:
    if not tasks:
        print("No tasks")
        return
    print(" | ".join(COLUMNS))
    for task in tasks:
        print(" | ".join(task.as_row()))


def _connect_arduino() -> Optional[ArduinoLink]:
    port_name = find_arduino_port()
    if port_name is None:
        print("Could not find Arduino. Check connection and try again.", file=sys.stderr)
        return None
    link = ArduinoLink.open(port_name)
    print(f"Connected to Arduino on {port_name}")
    return link


def _find(board: TaskBoard, task_id: str) -> Task:
    for task in board.tasks():
        if task.id == task_id:
            return task
    raise KeyError(task_id)


def _run(args: argparse.Namespace, board: TaskBoard) -> int:
    command = args.command

    if command == "add":
        task = board.add(
            Task(
                args.id,
                args.name,
                args.description,
                args.status,
                args.priority,
                args.start_date,
                args.end_date,
                args.assigned_to,
            )
        )
        print(f"Added {task.id}")
    elif command == "modify":
        current = _find(board, args.task_id)
        changes = {
            name: value
            for name, value in (
                ("id", args.new_id),
                ("name", args.name),
                ("description", args.description),
                ("status", args.status),
                ("priority", args.priority),
                ("start_date", args.start_date),
                ("end_date", args.end_date),
                ("assigned_to", args.assigned_to),
            )
            if value is not None
        }
        task = board.modify(args.task_id, replace(current, **changes))
        print(f"Updated {task.id}")
    elif command == "delete":
        _find(board, args.task_id)
        if not args.yes:
            answer = input("Are you sure you want to delete this task? [y/N] ")
            if answer.strip().lower() not in {"y", "yes"}:
                print("Cancelled")
                return 0
        board.delete(args.task_id)
        print(f"Deleted {args.task_id}")
    elif command == "complete":
        board.complete(args.task_id)
        print(f"Completed {args.task_id}")
    elif command == "list":
        tasks = board.sort(args.sort, args.desc) if args.sort else board.tasks()
        _print_tasks(tasks)
    elif command == "search":
        _print_tasks(board.search(args.text))
    elif command == "stats":
        return _stats(args.kind, board.tasks())
    elif command == "notify":
        alerts = deadline_alerts(board.tasks(), args.today)
        print(format_deadline_message(alerts))
        if alerts and args.arduino:
            link = _connect_arduino()
            if link is not None:
                with link:
                    link.send(NOTIFICATION)
    elif command == "calendar":
        for day, (red, green, blue) in sorted(calendar_highlights(board.tasks()).items()):
            print(f"{day.isoformat()} {red},{green},{blue}")
    elif command == "report":
        write_report(board.tasks(), args.path)
        print("Report exported successfully")
    elif command == "listen":
        _find(board, args.task_id)
        link = _connect_arduino()
        if link is None:
            return 1
        with link:
            while TASK_COMPLETED not in link.read_commands():
                time.sleep(args.interval)
        board.complete(args.task_id)
        print("Current task marked as completed via Arduino")
    return 0


def _stats(kind: str, tasks: list[Task]) -> int:
    if kind == "status":
        slices = status_distribution(tasks)
        if not slices:
            print("No tasks available for statistics", file=sys.stderr)
            return 1
        print(status_chart_title(tasks))
        for part in slices:
            print(part.label.replace("\n", " "))
        return 0
    bars = duration_distribution(tasks)
    if not bars:
        print("No tasks with valid dates available", file=sys.stderr)
        return 1
    total = sum(bar.count for bar in bars)
    print(f"Task Duration Distribution\nTotal Tasks: {total}")
    for bar in bars:
        print(f"{bar.category}: {bar.count}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the task manager with the given arguments; return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    path = args.db if args.db is not None else default_database_path()
    try:
        with TaskStore(path) as store:
            return _run(args, TaskBoard(store))
    except TaskValidationError as exc:
        print(str(exc), file=sys.stderr)
    except KeyError as exc:
        print(f"No task with ID {exc.args[0]}", file=sys.stderr)
    except DatabaseError as exc:
        print(f"Database Error: {exc}", file=sys.stderr)
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())