"""Printable task report."""

from __future__ import annotations

from html import escape
from pathlib import Path
from typing import Iterable, Union

from taskdesk.models import COLUMNS, Task


def render_report(tasks: Iterable[Task]) -> str:
    """Render the tasks as an HTML table under a report heading."""
    parts = ["<h1>Task Report</h1><table border='1'><tr>"]
    parts.extend(f"<th>{escape(header)}</th>" for header in COLUMNS)
    parts.append("</tr>")
    for task in tasks:
        cells = "".join(f"<td>{escape(value)}</td>" for value in task.as_row())
        parts.append(f"<tr>{cells}</tr>")
    parts.append("</table>")
    return "".join(parts)


def write_report(tasks: Iterable[Task], path: Union[str, Path]) -> Path:
    """Write the report as an HTML document to path and return the path."""
    target = Path(path)
    body = render_report(tasks)
    document = (
        "<!DOCTYPE html>\n<html><head><meta charset='utf-8'>"
        "<title>Task Report</title></head><body>"
        f"{body}</body></html>\n"
    )
    target.write_text(document, encoding="utf-8")
    return target