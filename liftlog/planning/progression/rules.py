"""ProgressionRuleEngine - Rep Range & Increment Derivation.

A rule starts from the hypertrophy baseline and passes through an ordered
tuple of stages. Stages are cumulative, not mutually exclusive: each one
sees the draft left by the stages before it.

Stage order:
1. goal        - strength / endurance ranges and increments
2. hit         - HIT bias on compound patterns (replaces the range only)
3. spine       - high spine sensitivity widens squat/hinge ranges
4. gender      - profile-level default bias (female)
"""

from collections.abc import Callable
from dataclasses import dataclass, replace

from liftlog.planning.invariants import BASELINE_REP_RANGE, LARGE_INCREMENT, SMALL_INCREMENT
from liftlog.planning.output.models import ProgressionRule
from liftlog.planning.schemas.profile import Goal, Profile, Style


@dataclass(frozen=True)
class RuleDraft:
    rep_min: int
    rep_max: int
    inc: float


RuleStage = Callable[[Profile, str, RuleDraft], RuleDraft]


def baseline(profile: Profile) -> RuleDraft:
    rep_min, rep_max = BASELINE_REP_RANGE
    return RuleDraft(rep_min=rep_min, rep_max=rep_max, inc=SMALL_INCREMENT[profile.units])


def goal_stage(profile: Profile, pattern: str, draft: RuleDraft) -> RuleDraft:
    if profile.goal == Goal.STRENGTH:
        return RuleDraft(rep_min=3, rep_max=6, inc=LARGE_INCREMENT[profile.units])
    if profile.goal == Goal.ENDURANCE:
        return RuleDraft(rep_min=12, rep_max=20, inc=SMALL_INCREMENT[profile.units])
    return draft


def hit_stage(profile: Profile, pattern: str, draft: RuleDraft) -> RuleDraft:
    """HIT biases compounds lower; the increment is left alone."""
    if profile.style != Style.HIT:
        return draft
    if pattern in ("squat", "hinge"):
        return replace(draft, rep_min=5, rep_max=8)
    if pattern in ("push", "pull"):
        return replace(draft, rep_min=6, rep_max=10)
    return draft


def spine_stage(profile: Profile, pattern: str, draft: RuleDraft) -> RuleDraft:
    """Safer lower-body range with the smallest jumps. Ranges only widen."""
    if profile.spine != "high" or pattern not in ("squat", "hinge"):
        return draft
    return RuleDraft(
        rep_min=max(draft.rep_min, 6),
        rep_max=max(draft.rep_max, 10),
        inc=SMALL_INCREMENT[profile.units],
    )


def gender_stage(profile: Profile, pattern: str, draft: RuleDraft) -> RuleDraft:
    # Defaults only; logged data is expected to take over.
    if profile.gender != "female":
        return draft
    return RuleDraft(
        rep_min=draft.rep_min + 1,
        rep_max=draft.rep_max + 2,
        inc=SMALL_INCREMENT[profile.units],
    )


RULE_STAGES: tuple[RuleStage, ...] = (goal_stage, hit_stage, spine_stage, gender_stage)


def rule_for(profile: Profile, pattern: str) -> ProgressionRule | None:
    """Derive the progression rule for a load/rep exercise.

    Args:
        profile: Athlete profile
        pattern: Movement pattern of the selected exercise

    Returns:
        ProgressionRule, or None for the mobility goal (no load/rep
        progression applies)
    """
    if profile.goal == Goal.MOBILITY:
        return None

    draft = baseline(profile)
    for stage in RULE_STAGES:
        draft = stage(profile, pattern, draft)

    return ProgressionRule(rep_min=draft.rep_min, rep_max=draft.rep_max, inc=draft.inc)
