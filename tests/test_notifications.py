from datetime import date

from taskdesk.models import Task
from taskdesk.notifications import (
    DeadlineAlert,
    DeadlineKind,
    deadline_alerts,
    format_deadline_message,
)

TODAY = date(2024, 5, 10)


def _task(task_id, name, status, end):
    return Task(task_id, name, "d", status, "Low", "2024-01-01", end, "a")


def test_kinds_for_each_case():
    tasks = [
        _task("T001", "due", "In Progress", "2024-05-10"),
        _task("T002", "next", "Completed", "2024-05-11"),
        _task("T003", "late", "Not Started", "2024-05-01"),
        _task("T004", "done", "Completed", "2024-05-01"),
        _task("T005", "later", "Not Started", "2024-06-01"),
        _task("T006", "none", "Not Started", ""),
        _task("T007", "bad", "Not Started", "10/05/2024"),
    ]
    alerts = deadline_alerts(tasks, TODAY)
    assert [(a.kind, a.task.id) for a in alerts] == [
        (DeadlineKind.TODAY, "T001"),
        (DeadlineKind.TOMORROW, "T002"),
        (DeadlineKind.OVERDUE, "T003"),
    ]


def test_today_is_reported_even_when_completed():
    tasks = [_task("T001", "x", "Completed", "2024-05-10")]
    assert [a.kind for a in deadline_alerts(tasks, TODAY)] == [DeadlineKind.TODAY]


def test_describe_line():
    alert = DeadlineAlert(DeadlineKind.OVERDUE, _task("T001", "Write", "On Hold", "2024-05-01"))
    assert alert.describe() == "• Overdue: Write (Status: On Hold)"


def test_message_without_alerts():
    assert format_deadline_message([]) == "No upcoming deadlines found"


def test_message_lists_every_alert():
    tasks = [
        _task("T001", "a", "In Progress", "2024-05-10"),
        _task("T002", "b", "In Progress", "2024-05-11"),
    ]
    alerts = deadline_alerts(tasks, TODAY)
    message = format_deadline_message(alerts)
    header, *lines = message.split("\n")
    assert header == f"You have {len(alerts)} task(s) with deadlines:"
    assert lines == [a.describe() for a in alerts]