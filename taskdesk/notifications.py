"""Deadline reminders for tasks due today, tomorrow or overdue."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Iterable, Optional, Sequence

from taskdesk.models import Status, Task, parse_date

NO_DEADLINES_MESSAGE = "No upcoming deadlines found"


class DeadlineKind(str, Enum):
    """Why a task needs attention."""

    TODAY = "Today"
    TOMORROW = "Tomorrow"
    OVERDUE = "Overdue"


@dataclass(frozen=True)
class DeadlineAlert:
    """A task whose end date calls for a reminder."""

    kind: DeadlineKind
    task: Task

    def describe(self) -> str:
        """Return the reminder as one bullet line."""
        return f"• {self.kind.value}: {self.task.name} (Status: {self.task.status})"


def deadline_alerts(tasks: Iterable[Task], today: Optional[date] = None) -> list[DeadlineAlert]:
    """Return reminders for tasks ending today or tomorrow, or overdue and not completed."""
    today = today or date.today()
    tomorrow = today + timedelta(days=1)
    alerts = []
    for task in tasks:
        end = parse_date(task.end_date)
        if end is None:
            continue
        if end == today:
            alerts.append(DeadlineAlert(DeadlineKind.TODAY, task))
        elif end == tomorrow:
            alerts.append(DeadlineAlert(DeadlineKind.TOMORROW, task))
        elif end < today and task.status != Status.COMPLETED.value:
            alerts.append(DeadlineAlert(DeadlineKind.OVERDUE, task))
    return alerts


def format_deadline_message(alerts: Sequence[DeadlineAlert]) -> str:
    """Build the notification text for a list of reminders."""
    if not alerts:
        return NO_DEADLINES_MESSAGE
    lines = "\n".join(alert.describe() for alert in alerts)
    return f"You have {len(alerts)} task(s) with deadlines:\n{lines}"