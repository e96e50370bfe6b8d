"""SQLite persistence for tasks."""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Union

from taskdesk.models import Task

_SCHEMA = """
CREATE TABLE IF NOT EXISTS tasks (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    description TEXT,
    status TEXT NOT NULL,
    priority TEXT NOT NULL,
    start_date TEXT NOT NULL,
    end_date TEXT NOT NULL,
    assigned_to TEXT,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
)
"""

_SELECT = (
    "SELECT id, name, description, status, priority, start_date, end_date, assigned_to "
    "FROM tasks ORDER BY end_date"
)

_INSERT = (
    "INSERT INTO tasks (id, name, description, status, priority, start_date, end_date, assigned_to) "
    "VALUES (:id, :name, :description, :status, :priority, :start_date, :end_date, :assigned_to)"
)

_UPDATE = (
    "UPDATE tasks SET id = :id, name = :name, description = :description, status = :status, "
    "priority = :priority, start_date = :start_date, end_date = :end_date, "
    "assigned_to = :assigned_to, updated_at = CURRENT_TIMESTAMP WHERE id = :old_id"
)

_DELETE = "DELETE FROM tasks WHERE id = :id"


class DatabaseError(Exception):
    """Raised when the task database cannot be opened or changed."""


def default_database_path() -> Path:
    """Return the usual location of the task database in the user's documents."""
    return Path.home() / "Documents" / "TaskManager" / "tasks.db"


def _params(task: Task) -> dict[str, str]:
    return {
        "id": task.id,
        "name": task.name,
        "description": task.description,
        "status": task.status,
        "priority": task.priority,
        "start_date": task.start_date,
        "end_date": task.end_date,
        "assigned_to": task.assigned_to,
    }


class TaskStore:
    """A task table in an SQLite database file."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = path
        if str(path) != ":memory:":
            try:
                Path(path).parent.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise DatabaseError("Could not create database directory") from exc
        try:
            self._conn = sqlite3.connect(str(path))
        except sqlite3.Error as exc:
            raise DatabaseError(f"Failed to open database: {exc}") from exc
        try:
            with self._conn:
                self._conn.execute(_SCHEMA)
        except sqlite3.Error as exc:
            self._conn.close()
            raise DatabaseError(f"Failed to create table: {exc}") from exc

    def _execute(self, action: str, sql: str, params: dict[str, str]) -> None:
        try:
            with self._conn:
                self._conn.execute(sql, params)
        except sqlite3.Error as exc:
            raise DatabaseError(f"Failed to {action}: {exc}") from exc

    def load(self) -> list[Task]:
        """Return every stored task, ordered by end date."""
        try:
            rows = self._conn.execute(_SELECT).fetchall()
        except sqlite3.Error as exc:
            raise DatabaseError(f"Failed to load tasks: {exc}") from exc
        return [Task.from_row(row) for row in rows]

    def add(self, task: Task) -> None:
        """Insert a new task."""
        self._execute("save task", _INSERT, _params(task))

    def update(self, old_id: str, task: Task) -> None:
        """Replace the task stored under old_id with task."""
        params = _params(task)
        params["old_id"] = old_id
        self._execute("update task", _UPDATE, params)

    def delete(self, task_id: str) -> None:
        """Remove the task with the given id."""
        self._execute("delete task", _DELETE, {"id": task_id})

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()

    def __enter__(self) -> "TaskStore":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()