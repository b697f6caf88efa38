"""ProgramAssembler - Top-Level Entry Point.

Profile in, Program out. A pure function of the profile plus wall-clock
time, which is read only for the metadata timestamp.
"""

import time

from loguru import logger

from liftlog.planning.compiler.ids import IdSequence
from liftlog.planning.compiler.recipes import recipes_for
from liftlog.planning.compiler.session_builder import build_session
from liftlog.planning.invariants import clamp_frequency
from liftlog.planning.output.models import Program, ProgramMeta
from liftlog.planning.schemas.profile import Profile


def _now_ms() -> int:
    return int(time.time() * 1000)


def generate_program(profile: Profile, ids: IdSequence | None = None, now: int | None = None) -> Program:
    """Generate a complete training program.

    Steps:
    1. Clamp frequency
    2. Build metadata (creation timestamp in epoch ms)
    3. Look up session recipes for the style
    4. Build each session with its positional index

    Args:
        profile: Athlete profile
        ids: Identifier sequence (a fresh one per call by default)
        now: Creation timestamp override, epoch milliseconds

    Returns:
        Program; sessions may be shorter than their recipes when the
        profile leaves a block with no eligible exercise
    """
    ids = ids or IdSequence()
    freq = clamp_frequency(profile.freq)
    if freq != profile.freq:
        logger.info(f"Clamped session frequency {profile.freq} -> {freq}")

    meta = ProgramMeta(
        style=profile.style.value,
        goal=profile.goal.value,
        freq=freq,
        recovery=profile.recovery,
        units=profile.units,
        created_at=_now_ms() if now is None else now,
    )

    recipes = recipes_for(profile.style, freq)
    sessions = [build_session(profile, recipe, index, ids) for index, recipe in enumerate(recipes)]

    skipped = sum(len(r.blocks) for r in recipes) - sum(len(s.items) for s in sessions)
    logger.info(
        f"Generated program: style={meta.style} goal={meta.goal} sessions={len(sessions)} "
        f"items={sum(len(s.items) for s in sessions)} skipped_blocks={skipped}"
    )

    return Program(meta=meta, sessions=sessions)
