"""Training log - entries, progress hints, session rotation and CSV export."""

from liftlog.history.export import export_log_csv
from liftlog.history.log import (
    LogEntry,
    LogEntryError,
    build_result,
    delete_last,
    dump_log,
    find_last,
    format_result,
    load_log,
    new_entry,
    next_session_label,
    progress_hint,
    search_log,
)

__all__ = [
    "LogEntry",
    "LogEntryError",
    "build_result",
    "delete_last",
    "dump_log",
    "export_log_csv",
    "find_last",
    "format_result",
    "load_log",
    "new_entry",
    "next_session_label",
    "progress_hint",
    "search_log",
]
