"""Mandatory Unit Tests for Program Invariants.

These tests must never be removed.
CI must fail if these tests fail.
"""

import pytest

from liftlog.planning import ProgramInvariantError, generate_program, validate_program
from liftlog.planning.output.models import Program, ProgramMeta, Session, SessionItem


def _item(item_id: str, name: str, pattern: str) -> SessionItem:
    return SessionItem(id=item_id, name=name, log_type="loadreps", pattern=pattern, default_units="lb")


def _program(*items: SessionItem) -> Program:
    meta = ProgramMeta(style="general", goal="muscle", freq=2, recovery="schedule", units="lb", created_at=0)
    return Program(meta=meta, sessions=[Session(id="S99", label="Full Body A", items=list(items))])


def test_generated_program_is_valid(hit_strength_profile):
    """Test that generated programs pass validation."""
    validate_program(generate_program(hit_strength_profile))


def test_duplicate_exercise_raises():
    """Test that a repeated exercise name raises ProgramInvariantError."""
    program = _program(_item("I1", "Curl", "accessory"), _item("I2", "Curl", "accessory"))
    with pytest.raises(ProgramInvariantError) as exc_info:
        validate_program(program)
    assert exc_info.value.code == "INVALID_PROGRAM"
    assert exc_info.value.details == ["DUPLICATE_EXERCISE: Full Body A: Curl"]


def test_repeated_main_pattern_raises():
    """Test that a repeated main pattern raises ProgramInvariantError."""
    program = _program(_item("I1", "Flat press", "push"), _item("I2", "Push-up", "push"))
    with pytest.raises(ProgramInvariantError) as exc_info:
        validate_program(program)
    assert exc_info.value.details == ["PATTERN_REPEATED: Full Body A: push"]


def test_repeatable_patterns_allowed():
    """Test that accessory/core/mobility may repeat."""
    program = _program(
        _item("I1", "Curl", "accessory"),
        _item("I2", "Lateral raise", "accessory"),
        _item("I3", "Side plank", "core"),
        _item("I4", "Dead bug / hollow hold", "core"),
    )
    validate_program(program)


def test_session_too_short_raises():
    """Test the optional minimum session size."""
    program = _program(_item("I1", "Flat press", "push"))
    validate_program(program, min_items=1)
    with pytest.raises(ProgramInvariantError) as exc_info:
        validate_program(program, min_items=3)
    assert exc_info.value.details == ["SESSION_TOO_SHORT: Full Body A: 1 < 3"]


def test_errors_accumulate():
    """Test that every violation is reported, not just the first."""
    program = _program(
        _item("I1", "Flat press", "push"),
        _item("I2", "Flat press", "push"),
    )
    with pytest.raises(ProgramInvariantError) as exc_info:
        validate_program(program, min_items=5)
    codes = [detail.split(":")[0] for detail in exc_info.value.details]
    assert codes == ["DUPLICATE_EXERCISE", "PATTERN_REPEATED", "SESSION_TOO_SHORT"]


def test_violation_codes_deduplicated():
    """Test distinct violation codes in first-seen order."""
    err = ProgramInvariantError(
        "INVALID_PROGRAM",
        ["PATTERN_REPEATED: Push A: push", "DUPLICATE_EXERCISE: Pull A: Curl", "PATTERN_REPEATED: Legs A: squat"],
    )
    assert err.violation_codes == ["PATTERN_REPEATED", "DUPLICATE_EXERCISE"]
