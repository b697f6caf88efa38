"""Deterministic Selector.

Picks one candidate from a filtered list using a stable string hash.
There is no randomness source: a fixed seed and a fixed candidate list
always resolve to the same exercise, across processes and platforms.
"""

from collections.abc import Sequence, Set

from loguru import logger

from liftlog.planning.invariants import FNV_OFFSET_BASIS, FNV_PRIME, SEED_SEPARATOR, UINT32_MASK
from liftlog.planning.library.catalog import ExerciseDefinition


def _code_units(seed: str) -> list[int]:
    raw = seed.encode("utf-16-le", errors="surrogatepass")
    return [int.from_bytes(raw[i : i + 2], "little") for i in range(0, len(raw), 2)]


def fnv1a_32(seed: str) -> int:
    """FNV-1a 32-bit hash of a seed string.

    Folds UTF-16 code units (identical to bytes for ASCII seeds), so
    programs generated earlier resolve to the same exercises.

    Args:
        seed: Seed string

    Returns:
        Unsigned 32-bit hash
    """
    h = FNV_OFFSET_BASIS
    for unit in _code_units(seed):
        h ^= unit
        h = (h * FNV_PRIME) & UINT32_MASK
    return h


def make_seed(*parts: object) -> str:
    return SEED_SEPARATOR.join(str(p) for p in parts)


def select_exercise(
    candidates: Sequence[ExerciseDefinition],
    seed: str,
    used_names: Set[str] = frozenset(),
) -> ExerciseDefinition | None:
    """Select one candidate reproducibly.

    Strategy:
    - Start index = hash(seed) mod len(candidates)
    - Probe forward with wrap-around to the first unused name

    Args:
        candidates: Eligible candidates (may be empty)
        seed: Seed string for this slot
        used_names: Names already claimed in the session

    Returns:
        Selected exercise, or None when nothing can fill the slot
    """
    if not candidates:
        return None

    base = fnv1a_32(seed)
    for offset in range(len(candidates)):
        choice = candidates[(base + offset) % len(candidates)]
        if choice.name not in used_names:
            return choice

    logger.debug(f"Every candidate already used for seed={seed!r}")
    return None
