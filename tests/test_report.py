from taskdesk.models import COLUMNS, Task
from taskdesk.report import render_report, write_report


def _tasks():
    return [
        Task("T001", "Plan", "first", "Completed", "High", "2024-01-01", "2024-01-02", "Ann"),
        Task("T002", "Build", "second", "In Progress", "Low", "2024-01-03", "2024-01-09", "Bob"),
    ]


def test_report_starts_with_heading_and_headers():
    html = render_report([])
    header_cells = "".join(f"<th>{c}</th>" for c in COLUMNS)
    assert html == f"<h1>Task Report</h1><table border='1'><tr>{header_cells}</tr></table>"


def test_report_has_a_row_per_task():
    tasks = _tasks()
    html = render_report(tasks)
    assert html.count("<tr>") == len(tasks) + 1
    assert html.count("<td>") == len(tasks) * len(COLUMNS)
    for task in tasks:
        assert "".join(f"<td>{v}</td>" for v in task.as_row()) in html


def test_report_escapes_markup():
    task = Task("T003", "<b>x</b>", "a & b", "Completed", "Low", "2024-01-01", "2024-01-01", "c")
    html = render_report([task])
    assert "<b>" not in html
    assert "&lt;b&gt;x&lt;/b&gt;" in html
    assert "a &amp; b" in html


def test_write_report_round_trip(tmp_path):
    tasks = _tasks()
    target = tmp_path / "report.html"
    returned = write_report(tasks, target)
    assert returned == target
    assert render_report(tasks) in target.read_text(encoding="utf-8")