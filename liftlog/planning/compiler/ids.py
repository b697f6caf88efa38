"""Identifier sequence for one generation run.

Each run owns its own sequence, so concurrent or repeated runs never
share counter state.
"""

import itertools


class IdSequence:
    """Monotonic identifier source shared by sessions and items of one program."""

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)

    def next_id(self, prefix: str) -> str:
        return f"{prefix}{next(self._counter)}"

    def item_id(self) -> str:
        return self.next_id("I")

    def session_id(self) -> str:
        return self.next_id("S")
