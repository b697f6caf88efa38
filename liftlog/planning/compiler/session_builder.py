"""SessionBuilder - Block-by-Block Session Assembly.

Walks a recipe's blocks in order. Each block is filled from its sources by
filtering then seeded selection. A block nothing can fill is omitted: the
session is shorter, generation never fails.
"""

from loguru import logger

from liftlog.planning.compiler.ids import IdSequence
from liftlog.planning.compiler.recipes import Block, SessionRecipe
from liftlog.planning.library.catalog import ExerciseDefinition, get_pool
from liftlog.planning.output.models import Session, SessionItem
from liftlog.planning.progression.rules import rule_for
from liftlog.planning.schemas.profile import Profile
from liftlog.planning.selection.eligibility import filter_candidates
from liftlog.planning.selection.selector import make_seed, select_exercise


def block_seed(profile: Profile, label: str, session_index: int, block_name: str, block_index: int) -> str:
    """Seed string for one slot: style|goal|units|gender|label|session|block|position."""
    return make_seed(
        profile.style.value,
        profile.goal.value,
        profile.units,
        profile.gender,
        label,
        session_index,
        block_name,
        block_index,
    )


def fill_block(
    profile: Profile,
    block: Block,
    seed: str,
    used_names: set[str],
    used_patterns: set[str],
) -> ExerciseDefinition | None:
    """Fill one block, trying its sources in order.

    The first source keeps the block seed as-is; fallback sources append
    their pool name so they resolve independently.
    """
    for position, source in enumerate(block.sources):
        candidates = filter_candidates(
            profile,
            get_pool(source.pool),
            used_names,
            used_patterns,
            preferred_pattern=source.preferred_pattern,
        )
        source_seed = seed if position == 0 else make_seed(seed, source.pool)
        choice = select_exercise(candidates, source_seed, used_names)
        if choice is not None:
            return choice
    return None


def build_session(profile: Profile, recipe: SessionRecipe, session_index: int, ids: IdSequence) -> Session:
    """Build one session from its recipe.

    Args:
        profile: Athlete profile
        recipe: Session recipe (label + ordered blocks)
        session_index: Positional index of the session in the program
        ids: Identifier sequence of the current run

    Returns:
        Session whose items respect name uniqueness and pattern diversity
    """
    items: list[SessionItem] = []
    used_names: set[str] = set()
    used_patterns: set[str] = set()

    for block_index, block in enumerate(recipe.blocks):
        seed = block_seed(profile, recipe.label, session_index, block.name, block_index)
        exercise = fill_block(profile, block, seed, used_names, used_patterns)
        if exercise is None:
            logger.debug(f"Block unfilled: session={recipe.label!r} block={block.name}#{block_index}")
            continue

        used_names.add(exercise.name)
        used_patterns.add(exercise.pattern)
        items.append(
            SessionItem(
                id=ids.item_id(),
                name=exercise.name,
                log_type=exercise.log_type,
                pattern=exercise.pattern,
                rule=rule_for(profile, exercise.pattern) if exercise.log_type == "loadreps" else None,
                default_units=profile.units,
            )
        )

    return Session(id=ids.session_id(), label=recipe.label, items=items)
