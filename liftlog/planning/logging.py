"""Logging for rejected programs."""

from loguru import logger

from liftlog.planning.errors import ProgramInvariantError


def log_program_invariant_failure(err: ProgramInvariantError, context: dict[str, str | int]) -> None:
    """Log a rejected program before the error propagates.

    One error line names the violation codes; each detail follows at debug
    level.

    Args:
        err: Validation error about to be raised
        context: Program facts bound to every line (style, goal, sessions)
    """
    bound = logger.bind(code=err.code, **context)
    bound.error(f"PROGRAM_INVARIANT_FAILED {err.code}: {', '.join(err.violation_codes)} ({len(err.details)} violations)")
    for detail in err.details:
        bound.debug(detail)
