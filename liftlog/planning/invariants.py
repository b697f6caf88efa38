"""Global Generation Invariants - Single Source of Truth.

Every selector, builder, rule stage and validator imports its constants
from here - nowhere else.

DETERMINISM COMMITMENT
======================
The generator has no randomness source. Every choice is derived from a
seed string built from the profile and the slot being filled, so the same
profile always yields the same sessions.
"""

# Session frequency bounds (sessions per week); out-of-range requests clamp
MIN_SESSIONS_PER_WEEK = 2
MAX_SESSIONS_PER_WEEK = 6

# Patterns that may repeat within a session; every other pattern is "main"
REPEATABLE_PATTERNS: frozenset[str] = frozenset({"accessory", "core", "mobility"})

# Tolerance-gated patterns (rated good / limited / avoid)
TOLERANCE_GATED_PATTERNS: tuple[str, ...] = ("squat", "hinge", "overhead", "dips")

# Spine sensitivity "high" textual denylist
SPINE_DENY_SUBSTRINGS: tuple[str, ...] = ("deadlift",)
SPINE_DENY_EXACT: frozenset[str] = frozenset({"squat", "back squat"})

# Bodyweight is always available
BODYWEIGHT_TAG = "bw"

# FNV-1a 32-bit parameters
FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619
UINT32_MASK = 0xFFFFFFFF

# Seed component separator
SEED_SEPARATOR = "|"

# Progression defaults (hypertrophy baseline)
BASELINE_REP_RANGE = (8, 12)
SMALL_INCREMENT: dict[str, float] = {"lb": 2.5, "kg": 1.25}
LARGE_INCREMENT: dict[str, float] = {"lb": 5.0, "kg": 2.5}

# Progression trigger: advance when a clean set reaches the top of the range
PROGRESSION_TRIGGER = "clean_at_top"


def clamp_frequency(freq: int) -> int:
    """Clamp a requested session frequency into the supported range."""
    return max(MIN_SESSIONS_PER_WEEK, min(MAX_SESSIONS_PER_WEEK, int(freq)))
