"""EligibilityFilter - pure inclusion predicate.

Decides whether a catalog exercise may fill a slot in the session being
built. No I/O, no randomness: the same inputs always give the same answer.
"""

from collections.abc import Iterable, Set

from liftlog.planning.invariants import (
    REPEATABLE_PATTERNS,
    SPINE_DENY_EXACT,
    SPINE_DENY_SUBSTRINGS,
    TOLERANCE_GATED_PATTERNS,
)
from liftlog.planning.library.catalog import ExerciseDefinition
from liftlog.planning.schemas.profile import Profile


def is_main_pattern(pattern: str) -> bool:
    """Main patterns appear at most once per session."""
    return pattern not in REPEATABLE_PATTERNS


def movement_blocked(profile: Profile, pattern: str) -> bool:
    """Check the tolerance rating for tolerance-gated patterns."""
    if pattern not in TOLERANCE_GATED_PATTERNS:
        return False
    return getattr(profile.tolerance, pattern) == "avoid"


def spine_blocked(profile: Profile, name: str) -> bool:
    if profile.spine != "high":
        return False
    lowered = name.lower()
    return lowered in SPINE_DENY_EXACT or any(s in lowered for s in SPINE_DENY_SUBSTRINGS)


def tolerance_blocked(profile: Profile, name: str) -> bool:
    """Name-based tolerance gates for pull-ups and dips.

    Pull-up and dip variations need a "good" rating; "limited" is not enough.
    """
    lowered = name.lower()
    if "pull-up" in lowered and profile.tolerance.pullups != "good":
        return True
    return lowered == "dips" and profile.tolerance.dips != "good"


def is_eligible(
    profile: Profile,
    exercise: ExerciseDefinition,
    used_names: Set[str],
    used_patterns: Set[str],
    preferred_pattern: str | None = None,
) -> bool:
    """Decide whether an exercise may fill the current slot.

    Rules (all must pass):
    1. Preferred pattern, when given, matches exactly
    2. Pattern not rated "avoid"
    3. At least one required equipment tag is owned
    4. Name not already used in the session
    5. Main pattern not already used in the session
    6. Spine-sensitivity denylist
    7. Pull-up / dip tolerance gates

    Args:
        profile: Athlete profile
        exercise: Candidate exercise
        used_names: Exercise names already in the session
        used_patterns: Patterns already in the session
        preferred_pattern: Optional exact pattern constraint

    Returns:
        True if the exercise may be selected
    """
    if preferred_pattern is not None and exercise.pattern != preferred_pattern:
        return False
    if movement_blocked(profile, exercise.pattern):
        return False
    if profile.owned_tags().isdisjoint(exercise.tags):
        return False
    if exercise.name in used_names:
        return False
    if is_main_pattern(exercise.pattern) and exercise.pattern in used_patterns:
        return False
    if spine_blocked(profile, exercise.name):
        return False
    return not tolerance_blocked(profile, exercise.name)


def filter_candidates(
    profile: Profile,
    pool: Iterable[ExerciseDefinition],
    used_names: Set[str],
    used_patterns: Set[str],
    preferred_pattern: str | None = None,
) -> list[ExerciseDefinition]:
    """Filter a pool down to eligible exercises, preserving pool order."""
    return [ex for ex in pool if is_eligible(profile, ex, used_names, used_patterns, preferred_pattern)]
