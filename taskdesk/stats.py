"""Summary figures behind the status and duration charts."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Sequence

from taskdesk.models import Task, parse_date

DURATION_CATEGORIES = ("1 day", "2-7 days", "1-4 weeks", "1+ months")


@dataclass(frozen=True)
class StatusSlice:
    """How many tasks share one status, out of all tasks."""

    status: str
    count: int
    total: int

    @property
    def percentage(self) -> float:
        return self.count * 100.0 / self.total

    @property
    def label(self) -> str:
        """The slice's caption: status, count out of total and percentage."""
        return f"{self.status}\n{self.count}/{self.total} ({self.percentage:.1f}%)"


@dataclass(frozen=True)
class DurationBar:
    """How many tasks fall in one duration category."""

    category: str
    count: int


def status_distribution(tasks: Iterable[Task]) -> list[StatusSlice]:
    """Count tasks per status, ordered by status name; empty when there are no tasks."""
    counts = Counter(task.status for task in tasks)
    total = sum(counts.values())
    return [StatusSlice(status, counts[status], total) for status in sorted(counts)]


def status_chart_title(tasks: Iterable[Task]) -> str:
    """Return the title of the status chart for the given tasks."""
    total = sum(1 for _ in tasks)
    return f"Task Distribution by Status\nTotal Tasks: {total}"


def duration_category(start: date, end: date) -> str:
    """Name the duration category of a task running from start to end inclusive."""
    days = (end - start).days + 1
    if days <= 1:
        return "1 day"
    if days <= 7:
        return "2-7 days"
    if days <= 30:
        return "1-4 weeks"
    return "1+ months"


def duration_distribution(tasks: Iterable[Task]) -> list[DurationBar]:
    """Count tasks with valid dates per duration category.

    Every category is present, in fixed order; the result is empty when no
    task has both dates valid.
    """
    counts: Counter[str] = Counter()
    for task in tasks:
        start = parse_date(task.start_date)
        end = parse_date(task.end_date)
        if start is None or end is None:
            continue
        counts[duration_category(start, end)] += 1
    if not counts:
        return []
    return [DurationBar(category, counts[category]) for category in DURATION_CATEGORIES]


def duration_axis_max(bars: Sequence[DurationBar]) -> int:
    """Return the top of the count axis: the largest bar plus two."""
    return max((bar.count for bar in bars), default=0) + 2