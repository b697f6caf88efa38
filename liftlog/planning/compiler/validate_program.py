"""Post-hoc Program Validation.

The generator omits blocks it cannot fill instead of failing. Callers that
need guarantees (a minimum session size, or a check on a stored program
that was edited by hand) validate here. All failures raise
ProgramInvariantError.
"""

from collections import Counter

from liftlog.planning.errors import ProgramInvariantError
from liftlog.planning.logging import log_program_invariant_failure
from liftlog.planning.output.models import Program
from liftlog.planning.selection.eligibility import is_main_pattern


def validate_program(program: Program, min_items: int | None = None) -> None:
    """Validate session invariants of a program.

    Args:
        program: Program to validate
        min_items: Optional minimum number of items per session

    Raises:
        ProgramInvariantError: If any invariant is violated
    """
    errors: list[str] = []

    for session in program.sessions:
        # ---- Name uniqueness ----
        names = Counter(item.name for item in session.items)
        errors.extend(f"DUPLICATE_EXERCISE: {session.label}: {name}" for name, n in names.items() if n > 1)

        # ---- Pattern diversity ----
        patterns = Counter(p for p in session.patterns if is_main_pattern(p))
        errors.extend(f"PATTERN_REPEATED: {session.label}: {p}" for p, n in patterns.items() if n > 1)

        # ---- Minimum size ----
        if min_items is not None and len(session.items) < min_items:
            errors.append(f"SESSION_TOO_SHORT: {session.label}: {len(session.items)} < {min_items}")

    if errors:
        err = ProgramInvariantError("INVALID_PROGRAM", errors)
        log_program_invariant_failure(
            err,
            {"style": program.meta.style, "goal": program.meta.goal, "sessions": len(program.sessions)},
        )
        raise err
