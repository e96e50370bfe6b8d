from datetime import date

import pytest

from taskdesk.models import Status, Task
from taskdesk.schedule import calendar_highlights, status_color


def _task(task_id, status, start, end):
    return Task(task_id, "n", "d", status, "Low", start, end, "a")


@pytest.mark.parametrize(
    "status, color",
    [
        ("Completed", (40, 167, 69)),
        ("In Progress", (23, 162, 184)),
        ("On Hold", (108, 117, 125)),
        ("Not Started", (220, 53, 69)),
    ],
)
def test_status_color(status, color):
    assert status_color(status) == color


def test_status_color_accepts_enum():
    assert status_color(Status.COMPLETED) == status_color("Completed")


def test_span_is_inclusive():
    task = _task("T001", "In Progress", "2024-01-30", "2024-02-02")
    days = calendar_highlights([task])
    assert min(days) == date(2024, 1, 30)
    assert max(days) == date(2024, 2, 2)
    assert len(days) == (max(days) - min(days)).days + 1
    assert set(days.values()) == {status_color("In Progress")}


def test_later_task_wins_on_shared_days():
    first = _task("T001", "Completed", "2024-03-01", "2024-03-05")
    second = _task("T002", "On Hold", "2024-03-04", "2024-03-06")
    days = calendar_highlights([first, second])
    assert days[date(2024, 3, 3)] == status_color("Completed")
    assert days[date(2024, 3, 4)] == status_color("On Hold")
    assert days[date(2024, 3, 6)] == status_color("On Hold")


def test_invalid_or_reversed_dates_give_nothing():
    tasks = [
        _task("T001", "Completed", "", "2024-03-05"),
        _task("T002", "Completed", "2024-13-01", "2024-03-05"),
        _task("T003", "Completed", "2024-03-05", "2024-03-01"),
    ]
    assert calendar_highlights(tasks) == {}