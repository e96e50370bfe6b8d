from datetime import date, timedelta

import pytest

from taskdesk.models import Task
from taskdesk.stats import (
    DURATION_CATEGORIES,
    DurationBar,
    duration_axis_max,
    duration_category,
    duration_distribution,
    status_chart_title,
    status_distribution,
)


def _task(task_id, status="Not Started", start="2024-01-01", end="2024-01-01"):
    return Task(task_id, "n", "d", status, "Low", start, end, "a")


def test_status_distribution_empty():
    assert status_distribution([]) == []


def test_status_distribution_sorted_and_totals():
    tasks = [
        _task("T001", "Completed"),
        _task("T002", "In Progress"),
        _task("T003", "Completed"),
        _task("T004", "Not Started"),
    ]
    slices = status_distribution(tasks)
    assert [s.status for s in slices] == sorted({t.status for t in tasks})
    assert sum(s.count for s in slices) == len(tasks)
    assert all(s.total == len(tasks) for s in slices)
    assert sum(s.percentage for s in slices) == pytest.approx(100.0)


def test_status_slice_label():
    tasks = [_task("T001", "Completed")] + [_task(f"T00{i}", "On Hold") for i in range(2, 5)]
    completed = next(s for s in status_distribution(tasks) if s.status == "Completed")
    assert completed.label == "Completed\n1/4 (25.0%)"


def test_status_chart_title_counts_tasks():
    tasks = [_task("T001"), _task("T002")]
    assert status_chart_title(tasks) == f"Task Distribution by Status\nTotal Tasks: {len(tasks)}"


@pytest.mark.parametrize(
    "days, expected",
    [(0, "1 day"), (1, "2-7 days"), (6, "2-7 days"), (7, "1-4 weeks"),
     (29, "1-4 weeks"), (30, "1+ months")],
)
def test_duration_category_boundaries(days, expected):
    start = date(2024, 1, 1)
    assert duration_category(start, start + timedelta(days=days)) == expected


def test_duration_category_end_before_start():
    assert duration_category(date(2024, 1, 5), date(2024, 1, 1)) == "1 day"


def test_duration_distribution_skips_invalid_dates():
    tasks = [
        _task("T001", start="", end="2024-01-01"),
        _task("T002", start="2024-02-30", end="2024-03-01"),
    ]
    assert duration_distribution(tasks) == []


def test_duration_distribution_has_every_category_in_order():
    tasks = [
        _task("T001", start="2024-01-01", end="2024-01-01"),
        _task("T002", start="2024-01-01", end="2024-01-01"),
        _task("T003", start="2024-01-01", end="2024-03-01"),
        _task("T004", start="bad", end="2024-03-01"),
    ]
    bars = duration_distribution(tasks)
    assert [b.category for b in bars] == list(DURATION_CATEGORIES)
    by_name = {b.category: b.count for b in bars}
    assert by_name["1 day"] == 2
    assert by_name["1+ months"] == 1
    assert sum(by_name.values()) == 3


def test_duration_axis_max_adds_two():
    bars = [DurationBar("1 day", 4), DurationBar("2-7 days", 9)]
    assert duration_axis_max(bars) == max(b.count for b in bars) + 2
    assert duration_axis_max([]) == 2