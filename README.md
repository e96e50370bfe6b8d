# taskdesk

A command-line task manager. It keeps tasks in an SQLite database, reminds
you of deadlines, summarises tasks by status and duration, exports an HTML
report, and can talk to an Arduino Uno over a serial port.

Each task has an ID (`T` followed by three digits, such as `T001`), a name,
a description, a status (`Not Started`, `In Progress`, `Completed`,
`On Hold`), a priority (`Low`, `Medium`, `High`, `Critical`), a start date
and an end date in `YYYY-MM-DD` form, and the person it is assigned to.
A new or edited task is only accepted when none of its text fields is
empty, the ID has the right form and is not already taken, both dates are
valid, and the end date is not before the start date.

## Installation

```
pip install .
```

## Command line

By default `taskdesk` works on `Documents/TaskManager/tasks.db` in your home
directory, creating it if needed. Use `--db PATH` before the subcommand to
choose another file. Run `taskdesk --help` or `taskdesk <command> --help`
for the full list of options.

```
taskdesk add T001 "Write report" --description "Quarterly summary" \
    --status "In Progress" --priority High \
    --start 2024-01-02 --end 2024-01-10 --assigned-to Alice
taskdesk modify T001 --status Completed      # --id, --name and the add options
taskdesk delete T001                          # asks first; -y skips the question
taskdesk complete T001
taskdesk list                                 # ordered by end date
taskdesk list --sort start_date --desc        # id, start_date or end_date
taskdesk search report                        # matches ID or name, any case
taskdesk stats status                         # or: taskdesk stats duration
taskdesk notify --today 2024-01-09            # --arduino also signals the board
taskdesk calendar                             # each covered day with an R,G,B colour
taskdesk report tasks.html
taskdesk listen T001 --interval 0.1
```

- `notify` lists tasks ending today or tomorrow, and tasks past their end
  date that are not completed. With `--arduino`, when there is at least one
  reminder, a `NOTIFICATION` line is sent to the board.
- `listen` waits until the Arduino sends a `TASK_COMPLETED` line, then marks
  the given task as completed.
- `list --sort` orders the output only; the stored tasks are unchanged.

The command exits with status 1 when a task is invalid or not found, when
the database cannot be used, or when there is nothing to show statistics for.

## Using it from Python

```python
from datetime import date

from taskdesk.board import SortKey, TaskBoard
from taskdesk.models import Task
from taskdesk.notifications import deadline_alerts, format_deadline_message
from taskdesk.report import write_report
from taskdesk.stats import duration_distribution, status_distribution
from taskdesk.storage import TaskStore, default_database_path

with TaskStore(default_database_path()) as store:
    board = TaskBoard(store)
    board.add(Task.from_row([
        "T001", "Write report", "Quarterly summary", "In Progress",
        "High", "2024-01-02", "2024-01-10", "Alice",
    ]))

    print(format_deadline_message(deadline_alerts(board.tasks(), date.today())))
    for part in status_distribution(board.tasks()):
        print(part.label)
    board.sort(SortKey.END_DATE)
    write_report(board.tasks(), "report.html")
```

The modules are:

- `taskdesk.models`: the `Task` record, the `Status` and `Priority` enums,
  `parse_date`, and `validate_task`, which raises `TaskValidationError`
  (with the offending `field`) and returns the task with its text trimmed.
- `taskdesk.storage`: `TaskStore`, an SQLite-backed table of tasks with
  `load`, `add`, `update`, `delete` and `close`; it raises `DatabaseError`
  when the database cannot be opened or changed. `default_database_path`
  gives the usual location.
- `taskdesk.board`: `TaskBoard`, the working list of tasks, with `add`,
  `modify`, `delete`, `complete`, `search` and `sort` by a `SortKey`;
  changes are written to its store, if it has one.
- `taskdesk.notifications`: `deadline_alerts`, returning `DeadlineAlert`s of
  kind `DeadlineKind.TODAY`, `TOMORROW` or `OVERDUE`, and
  `format_deadline_message`.
- `taskdesk.stats`: `status_distribution` (`StatusSlice`s with count,
  total, percentage and label), `status_chart_title`, `duration_category`,
  `duration_distribution` (`DurationBar`s for 1 day, 2-7 days, 1-4 weeks,
  1+ months) and `duration_axis_max`.
- `taskdesk.schedule`: `status_color` and `calendar_highlights`, mapping
  every day a task spans to its status colour.
- `taskdesk.report`: `render_report` (an HTML table) and `write_report`
  (a complete HTML file).
- `taskdesk.arduino`: `find_arduino_port`, `parse_commands` and
  `ArduinoLink`, which sends and reads newline-terminated messages at
  9600 baud.
- `taskdesk.cli`: `build_parser` and `main`, behind the `taskdesk` command.

## What it does not do

taskdesk has no graphical window or calendar view: the calendar is printed
as a list of days and colours. Statistics are printed as text and not drawn
as charts or saved as images. Reports are HTML, not PDF. Deadline reminders
are printed to the terminal rather than shown as desktop notifications, and
they are only checked when you run `taskdesk notify`.