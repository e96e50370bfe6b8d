"""Calendar colouring of the days each task spans."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable

from taskdesk.models import Status, Task, parse_date

Color = tuple[int, int, int]

_STATUS_COLORS: dict[str, Color] = {
    Status.COMPLETED.value: (40, 167, 69),
    Status.IN_PROGRESS.value: (23, 162, 184),
    Status.ON_HOLD.value: (108, 117, 125),
}
_DEFAULT_COLOR: Color = (220, 53, 69)


def status_color(status: str) -> Color:
    """Return the RGB colour used for days of a task with this status."""
    return _STATUS_COLORS.get(str(status), _DEFAULT_COLOR)


def calendar_highlights(tasks: Iterable[Task]) -> dict[date, Color]:
    """Map every day from each task's start to end date to its status colour.

    Tasks later in the list take precedence on shared days; tasks without
    two valid dates are skipped.
    """
    highlights: dict[date, Color] = {}
    for task in tasks:
        start = parse_date(task.start_date)
        end = parse_date(task.end_date)
        if start is None or end is None:
            continue
        color = status_color(task.status)
        day = start
        while day <= end:
            highlights[day] = color
            day += timedelta(days=1)
    return highlights