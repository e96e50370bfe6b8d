"""Task records, their allowed values and validation rules."""

from __future__ import annotations

import re
from dataclasses import dataclass, fields, replace
from datetime import date
from enum import Enum
from typing import Collection, Iterable, Optional

COLUMNS = (
    "ID",
    "Name",
    "Description",
    "Status",
    "Priority",
    "Start Date",
    "End Date",
    "Assigned To",
)

_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
_ID_RE = re.compile(r"T[0-9]{3}")


class Status(str, Enum):
    """Progress states a task can be in."""

    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    ON_HOLD = "On Hold"


class Priority(str, Enum):
    """Priority levels a task can carry."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class TaskValidationError(ValueError):
    """Raised when a task's fields break one of the entry rules."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


def parse_date(text: str) -> Optional[date]:
    """Parse a strict YYYY-MM-DD date; return None when it is not a valid date."""
    match = _DATE_RE.fullmatch(text)
    if match is None:
        return None
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


@dataclass(frozen=True)
class Task:
    """One task, with every column held as text in table order."""

    id: str
    name: str
    description: str = ""
    status: str = Status.NOT_STARTED.value
    priority: str = Priority.LOW.value
    start_date: str = ""
    end_date: str = ""
    assigned_to: str = ""

    def __post_init__(self) -> None:
        for name in ("status", "priority"):
            value = getattr(self, name)
            if isinstance(value, Enum):
                object.__setattr__(self, name, value.value)

    def as_row(self) -> tuple[str, ...]:
        """Return the task's values in column order."""
        return tuple(getattr(self, f.name) for f in fields(self))

    @classmethod
    def from_row(cls, row: Iterable[object]) -> "Task":
        """Build a task from a sequence of column values; missing values become empty text."""
        values = ["" if value is None else str(value) for value in row]
        if len(values) != len(COLUMNS):
            raise ValueError(
                f"a task row needs {len(COLUMNS)} values, got {len(values)}"
            )
        return cls(*values)


_REQUIRED_TEXT = (
    ("id", "Task ID"),
    ("name", "Name"),
    ("description", "Description"),
    ("start_date", "Start Date"),
    ("end_date", "End Date"),
    ("assigned_to", "Assigned To"),
)


def validate_task(task: Task, existing_ids: Collection[str] = ()) -> Task:
    """Check a task against the entry rules and return it with its text trimmed."""
    for name, label in _REQUIRED_TEXT:
        if not getattr(task, name).strip():
            raise TaskValidationError(name, f"{label} cannot be empty")

    if task.status not in {s.value for s in Status}:
        raise TaskValidationError("status", f"Unknown status: {task.status}")
    if task.priority not in {p.value for p in Priority}:
        raise TaskValidationError("priority", f"Unknown priority: {task.priority}")

    if _ID_RE.fullmatch(task.id) is None:
        raise TaskValidationError(
            "id", "Task ID must be in format T followed by 3 digits (e.g., T001)"
        )

    start = parse_date(task.start_date)
    if start is None:
        raise TaskValidationError(
            "start_date", "Start date must be in YYYY-MM-DD format"
        )
    end = parse_date(task.end_date)
    if end is None:
        raise TaskValidationError("end_date", "End date must be in YYYY-MM-DD format")
    if end < start:
        raise TaskValidationError("end_date", "End date cannot be before start date")

    if task.id.strip() in existing_ids:
        raise TaskValidationError("id", "A task with this ID already exists")

    return replace(task, **{f.name: getattr(task, f.name).strip() for f in fields(task)})