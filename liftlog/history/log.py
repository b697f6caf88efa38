"""Training Log - entries, results and progress hints.

The log is history only: nothing here feeds back into program generation.
A progress hint tells the athlete when a rule's trigger has been met
(a clean set at the top of the rep range); applying the increment is up
to them.
"""

import json
import time
from datetime import date
from typing import Any, Literal, get_args

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from liftlog.planning.output.models import Program, SessionItem

LoadUnits = Literal["lb", "kg", "bw", "bw+"]

NO_VALUE = "—"


class LogEntryError(ValueError):
    """Raised when a log entry cannot be built from the given input."""


class LogEntry(BaseModel):
    """One logged set.

    Attributes:
        ts: Entry timestamp, epoch milliseconds (orders the log)
        date: Training date (ISO)
        session_id: Program session ID
        session_label: Session label at the time of logging
        item_id: Session item ID
        item_name: Exercise name at the time of logging
        log_type: loadreps, timed or circuit
        result: Type-specific result record
        clean: Whether the set was performed with acceptable form
        notes: Free text
    """

    model_config = ConfigDict(populate_by_name=True)

    ts: int
    date: str
    session_id: str = Field(alias="sessionId")
    session_label: str = Field(alias="sessionLabel")
    item_id: str = Field(alias="itemId")
    item_name: str = Field(alias="itemName")
    log_type: Literal["loadreps", "timed", "circuit"] = Field(alias="logType")
    result: dict[str, Any] | None = None
    clean: bool = False
    notes: str = ""

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


def load_log(records: Any) -> list[LogEntry]:
    """Rebuild log entries from stored records.

    Records that no longer validate are skipped with a warning.
    """
    if not records:
        return []
    if not isinstance(records, list):
        logger.warning(f"Stored log is not a list, treating as empty: {type(records).__name__}")
        return []

    entries: list[LogEntry] = []
    for index, record in enumerate(records):
        try:
            entries.append(LogEntry.model_validate(record))
        except ValidationError as e:
            logger.warning(f"Skipping invalid log record #{index}: {e.error_count()} validation errors")
    return entries


def dump_log(entries: list[LogEntry]) -> list[dict[str, Any]]:
    return [e.to_record() for e in entries]


def _positive(value: float | None, message: str) -> float:
    if value is None or value <= 0:
        raise LogEntryError(message)
    return value


def _whole(value: float) -> int | float:
    # 135.0 is stored as 135
    return int(value) if float(value).is_integer() else value


def build_result(
    log_type: str,
    *,
    reps: int | None = None,
    weight: float | None = None,
    units: str = "lb",
    seconds: float | None = None,
    intensity: str = "",
    rounds: int | None = None,
    minutes: float | None = None,
) -> dict[str, Any]:
    """Build the result record for a log type.

    Args:
        log_type: loadreps, timed or circuit
        reps: Repetitions (loadreps)
        weight: Load (loadreps; ignored for plain bodyweight)
        units: lb, kg, bw or bw+ (loadreps)
        seconds: Duration (timed)
        intensity: Optional intensity note (timed)
        rounds: Completed rounds (circuit)
        minutes: Total minutes (circuit)

    Returns:
        Result record; whole numbers are stored as integers

    Raises:
        LogEntryError: If a required value is missing or not positive, or
            the units are unknown
    """
    if log_type == "loadreps":
        _positive(reps, "Enter reps.")
        if units not in get_args(LoadUnits):
            raise LogEntryError(f"Choose units: {', '.join(get_args(LoadUnits))}.")
        if units == "bw":
            return {"reps": reps, "units": units, "weight": None}
        if weight is None or weight < 0:
            raise LogEntryError("Enter weight.")
        return {"reps": reps, "units": units, "weight": _whole(weight)}
    if log_type == "timed":
        _positive(seconds, "Enter seconds.")
        return {"seconds": _whole(seconds), "intensity": intensity}
    if log_type == "circuit":
        _positive(rounds, "Enter rounds.")
        _positive(minutes, "Enter total minutes.")
        return {"rounds": rounds, "minutes": _whole(minutes)}
    raise LogEntryError(f"Unknown log type: {log_type}")


def new_entry(
    program: Program,
    session_id: str,
    item_id: str,
    result: dict[str, Any],
    clean: bool = False,
    notes: str = "",
    on_date: date | None = None,
    ts: int | None = None,
) -> LogEntry:
    """Create a log entry for an item of the current program.

    Raises:
        LogEntryError: If the session or item does not exist
    """
    session = program.session_by_id(session_id)
    item = next((it for it in session.items if it.id == item_id), None) if session else None
    if session is None or item is None:
        raise LogEntryError("Choose session + item.")

    return LogEntry(
        ts=int(time.time() * 1000) if ts is None else ts,
        date=(on_date or date.today()).isoformat(),
        session_id=session.id,
        session_label=session.label,
        item_id=item.id,
        item_name=item.name,
        log_type=item.log_type,
        result=result,
        clean=clean,
        notes=notes.strip(),
    )


def _num(value: Any) -> str:
    if value is None:
        return "?"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_result(entry: LogEntry | None) -> str:
    """Human-readable result, e.g. ``135lb × 8`` or ``5 rounds in 20 min``."""
    if entry is None:
        return NO_VALUE
    result = entry.result or {}
    if entry.log_type == "loadreps":
        units = result.get("units") or "lb"
        reps = _num(result.get("reps"))
        if units == "bw":
            return f"bw × {reps}"
        if units == "bw+":
            return f"bw+{_num(result.get('weight'))} × {reps}"
        return f"{_num(result.get('weight'))}{units} × {reps}"
    if entry.log_type == "timed":
        return f"{_num(result.get('seconds'))}s"
    if entry.log_type == "circuit":
        return f"{_num(result.get('rounds'))} rounds in {_num(result.get('minutes'))} min"
    return NO_VALUE


def newest_first(log: list[LogEntry]) -> list[LogEntry]:
    # Equal timestamps: the later-appended entry is newer
    return sorted(reversed(log), key=lambda e: e.ts, reverse=True)


def find_last(log: list[LogEntry], session_id: str, item_id: str) -> LogEntry | None:
    """Most recent entry for a session item."""
    return next((e for e in newest_first(log) if e.session_id == session_id and e.item_id == item_id), None)


def progress_hint(
    item: SessionItem | None,
    last: LogEntry | None,
    clean: bool,
    current: dict[str, Any] | None,
) -> str:
    """Progress hint for the set being logged.

    The increment is earned once the item has history and the current set
    is clean and reaches the top of the rep range.

    Args:
        item: Session item being logged
        last: Previous entry for the item, if any
        clean: Whether the current set is clean
        current: Current result record

    Returns:
        Hint text
    """
    if item is None or item.rule is None or item.log_type != "loadreps":
        return NO_VALUE

    rule = item.rule
    base = f"Target {rule.rep_min}-{rule.rep_max} reps"
    if last is None or not current or not clean:
        return base

    reps = current.get("reps")
    if isinstance(reps, int | float) and reps >= rule.rep_max:
        return f"Earned: next time +{_num(rule.inc)}"
    return base


def next_session_label(program: Program | None, log: list[LogEntry]) -> str:
    """Label of the session that follows the most recently logged one."""
    if program is None or not program.sessions:
        return NO_VALUE
    if not log:
        return program.sessions[0].label

    last = newest_first(log)[0]
    ids = [s.id for s in program.sessions]
    index = ids.index(last.session_id) if last.session_id in ids else -1
    return program.sessions[(index + 1) % len(program.sessions)].label


def search_log(log: list[LogEntry], query: str = "") -> list[LogEntry]:
    """Newest-first entries whose text matches a case-insensitive query."""
    q = query.strip().lower()
    entries = newest_first(log)
    if not q:
        return entries

    def blob(e: LogEntry) -> str:
        return f"{e.date} {e.session_label} {e.item_name} {json.dumps(e.result)} {e.notes}".lower()

    return [e for e in entries if q in blob(e)]


def delete_last(log: list[LogEntry]) -> list[LogEntry]:
    """Return the log without its newest entry."""
    if not log:
        return []
    newest = newest_first(log)[0]
    return [e for e in log if e is not newest]
