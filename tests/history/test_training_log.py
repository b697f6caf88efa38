"""Tests for the training log: results, hints, rotation, search."""

from datetime import date

import pytest

from liftlog.history import (
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
from liftlog.planning import generate_program


@pytest.fixture
def program(hit_strength_profile):
    return generate_program(hit_strength_profile, now=0)


def _entry(program, session_index: int, item_index: int, result: dict, ts: int, clean: bool = False, notes: str = ""):
    session = program.sessions[session_index]
    return new_entry(
        program,
        session.id,
        session.items[item_index].id,
        result,
        clean=clean,
        notes=notes,
        on_date=date(2024, 9, 1),
        ts=ts,
    )


def test_build_result_loadreps():
    """Test load/rep results and bodyweight variants."""
    assert build_result("loadreps", reps=8, weight=185, units="lb") == {"reps": 8, "units": "lb", "weight": 185}
    assert build_result("loadreps", reps=12, units="bw") == {"reps": 12, "units": "bw", "weight": None}
    assert build_result("loadreps", reps=6, weight=25, units="bw+")["weight"] == 25


@pytest.mark.parametrize(
    ("log_type", "kwargs", "message"),
    [
        ("loadreps", {"weight": 100}, "Enter reps."),
        ("loadreps", {"reps": 0, "weight": 100}, "Enter reps."),
        ("loadreps", {"reps": 5}, "Enter weight."),
        ("timed", {}, "Enter seconds."),
        ("circuit", {"minutes": 20}, "Enter rounds."),
        ("circuit", {"rounds": 5}, "Enter total minutes."),
    ],
)
def test_build_result_requires_values(log_type, kwargs, message):
    """Test that missing values are rejected with a prompt."""
    with pytest.raises(LogEntryError, match=message):
        build_result(log_type, **kwargs)


def test_new_entry_snapshots_labels(program):
    """Test that entries capture session label and item name."""
    entry = _entry(program, 1, 0, {"reps": 8, "units": "lb", "weight": 185}, ts=10, clean=True, notes="  felt good ")
    assert entry.session_label == "Day B"
    assert entry.item_name == program.sessions[1].items[0].name
    assert entry.log_type == "loadreps"
    assert entry.date == "2024-09-01"
    assert entry.notes == "felt good"


def test_new_entry_unknown_item(program):
    """Test that entries must reference the current program."""
    with pytest.raises(LogEntryError, match="Choose session"):
        new_entry(program, program.sessions[0].id, "I999", {"reps": 1})
    with pytest.raises(LogEntryError):
        new_entry(program, "S999", program.sessions[0].items[0].id, {"reps": 1})


def test_log_record_round_trip(program):
    """Test the stored camelCase log record."""
    entry = _entry(program, 0, 0, {"reps": 8, "units": "lb", "weight": 100}, ts=5)
    records = dump_log([entry])
    assert {"sessionId", "sessionLabel", "itemId", "itemName", "logType"} <= set(records[0])
    assert load_log(records) == [entry]
    assert load_log(None) == []


def test_format_result(program):
    """Test human-readable results."""
    loaded = _entry(program, 1, 0, {"reps": 8, "units": "lb", "weight": 185.0}, ts=1)
    bodyweight = _entry(program, 1, 0, {"reps": 12, "units": "bw", "weight": None}, ts=2)
    weighted = _entry(program, 1, 0, {"reps": 6, "units": "bw+", "weight": 25}, ts=3)

    assert format_result(loaded) == "185lb × 8"
    assert format_result(bodyweight) == "bw × 12"
    assert format_result(weighted) == "bw+25 × 6"
    assert format_result(None) == "—"


def test_progress_hint(program):
    """Test target and earned hints."""
    item = program.sessions[1].items[0]
    top = {"reps": 8, "units": "lb", "weight": 185}
    below = {"reps": 6, "units": "lb", "weight": 185}
    last = _entry(program, 1, 0, below, ts=1)

    assert progress_hint(item, None, True, top) == "Target 5-8 reps"
    assert progress_hint(item, last, False, top) == "Target 5-8 reps"
    assert progress_hint(item, last, True, below) == "Target 5-8 reps"
    assert progress_hint(item, last, True, top) == "Earned: next time +5"
    assert progress_hint(None, last, True, top) == "—"


def test_find_last_and_rotation(program):
    """Test most-recent lookup and next-session rotation."""
    assert next_session_label(None, []) == "—"
    assert next_session_label(program, []) == "Day A"

    first = _entry(program, 0, 0, {"reps": 8, "units": "lb", "weight": 100}, ts=1)
    second = _entry(program, 0, 0, {"reps": 9, "units": "lb", "weight": 100}, ts=2)
    log = [second, first]

    assert find_last(log, first.session_id, first.item_id) == second
    assert next_session_label(program, log) == "Day B"

    last_day = _entry(program, 2, 0, {"reps": 10, "units": "lb", "weight": 30}, ts=3)
    assert next_session_label(program, [*log, last_day]) == "Day A"


def test_search_and_delete_last(program):
    """Test newest-first search and deleting the newest entry."""
    a = _entry(program, 0, 0, {"reps": 8, "units": "lb", "weight": 100}, ts=1, notes="easy")
    b = _entry(program, 1, 0, {"reps": 5, "units": "lb", "weight": 225}, ts=2, notes="grindy")
    log = [a, b]

    assert search_log(log) == [b, a]
    assert search_log(log, "GRIND") == [b]
    assert search_log(log, "225") == [b]
    assert search_log(log, "day a") == [a]

    assert delete_last(log) == [a]
    assert delete_last([]) == []


def test_build_result_rejects_unknown_units():
    """Test that load units are limited to lb, kg, bw and bw+."""
    with pytest.raises(LogEntryError, match="Choose units"):
        build_result("loadreps", reps=8, weight=100, units="stones")


def test_build_result_stores_whole_numbers_as_int():
    """Test that 135.0 is stored as 135 and fractional loads are kept."""
    result = build_result("loadreps", reps=8, weight=135.0, units="lb")
    assert result["weight"] == 135
    assert isinstance(result["weight"], int)
    assert build_result("loadreps", reps=8, weight=22.5, units="kg")["weight"] == 22.5
    assert isinstance(build_result("timed", seconds=45.0)["seconds"], int)
    assert isinstance(build_result("circuit", rounds=5, minutes=20.0)["minutes"], int)


def test_load_log_skips_invalid_records(program):
    """Test that one broken record does not discard the rest of the log."""
    entry = _entry(program, 0, 0, {"reps": 8, "units": "lb", "weight": 100}, ts=5)
    records = [{"ts": "not-a-time"}, *dump_log([entry])]

    assert load_log(records) == [entry]
    assert load_log({"ATL": "not a list"}) == []
