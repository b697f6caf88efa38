"""Errors for programs that break a session rule.

Generation never raises for these: blocks nothing can fill are skipped and
frequencies are clamped. ``validate_program`` is the only raiser. It reports
every violation at once, one detail line each, led by its code:

- DUPLICATE_EXERCISE: the same exercise twice in one session
- PATTERN_REPEATED: a main pattern (push, pull, squat, hinge, dips, ...)
  twice in one session
- SESSION_TOO_SHORT: fewer items than the caller asked for
"""


class ProgramInvariantError(RuntimeError):
    """A program failed validation.

    Attributes:
        code: Overall error code ("INVALID_PROGRAM")
        details: Violations, e.g. ``"PATTERN_REPEATED: Push A: push"``
    """

    def __init__(self, code: str, details: list[str]):
        self.code = code
        self.details = details
        super().__init__(f"{code}: {details}")

    @property
    def violation_codes(self) -> list[str]:
        """Distinct violation codes in first-seen order."""
        return list(dict.fromkeys(detail.split(":", 1)[0] for detail in self.details))
