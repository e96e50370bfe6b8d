"""The working list of tasks, kept in step with its store."""

from __future__ import annotations

from dataclasses import replace
from enum import Enum
from typing import Optional, Union

from taskdesk.models import Status, Task, validate_task
from taskdesk.storage import TaskStore


class SortKey(Enum):
    """Columns the task list can be sorted by."""

    ID = "id"
    START_DATE = "start_date"
    END_DATE = "end_date"


class TaskBoard:
    """An ordered list of tasks; every change is written to the store if there is one."""

    def __init__(self, store: Optional[TaskStore] = None) -> None:
        self._store = store
        self._tasks: list[Task] = store.load() if store is not None else []

    def tasks(self) -> list[Task]:
        """Return the tasks in their current order."""
        return list(self._tasks)

    def _index(self, task_id: str) -> int:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        raise KeyError(task_id)

    def add(self, task: Task) -> Task:
        """Validate and append a new task; return it as stored."""
        cleaned = validate_task(task, {t.id for t in self._tasks})
        if self._store is not None:
            self._store.add(cleaned)
        self._tasks.append(cleaned)
        return cleaned

    def modify(self, task_id: str, task: Task) -> Task:
        """Replace the task with the given id; return the new version."""
        index = self._index(task_id)
        others = {t.id for i, t in enumerate(self._tasks) if i != index}
        cleaned = validate_task(task, others)
        if self._store is not None:
            self._store.update(task_id, cleaned)
        self._tasks[index] = cleaned
        return cleaned

    def delete(self, task_id: str) -> Task:
        """Remove the task with the given id and return it."""
        index = self._index(task_id)
        if self._store is not None:
            self._store.delete(task_id)
        return self._tasks.pop(index)

    def complete(self, task_id: str) -> Task:
        """Mark the task with the given id as completed."""
        index = self._index(task_id)
        updated = replace(self._tasks[index], status=Status.COMPLETED.value)
        if self._store is not None:
            self._store.update(task_id, updated)
        self._tasks[index] = updated
        return updated

    def search(self, text: str) -> list[Task]:
        """Return tasks whose id or name contains text, ignoring case."""
        needle = text.strip().lower()
        return [
            task
            for task in self._tasks
            if needle in task.id.lower() or needle in task.name.lower()
        ]

    def sort(self, key: Union[SortKey, str], descending: bool = False) -> list[Task]:
        """Reorder the tasks by a column and return the new order."""
        column = SortKey(key).value
        self._tasks.sort(key=lambda task: getattr(task, column), reverse=descending)
        return self.tasks()