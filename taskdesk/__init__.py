"""Task management with SQLite storage, deadline reminders, statistics, HTML reports and an Arduino serial link."""

__version__ = "0.1.0"