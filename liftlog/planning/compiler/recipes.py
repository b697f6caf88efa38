"""SessionRecipeTable - Structure First.

Defines WHAT sessions exist and which pattern slots each one fills,
before any exercise is chosen. Pure lookup: one case per style.
"""

from collections.abc import Callable
from dataclasses import dataclass

from liftlog.planning.invariants import clamp_frequency
from liftlog.planning.library.catalog import PoolName
from liftlog.planning.schemas.profile import Style


@dataclass(frozen=True)
class BlockSource:
    """Catalog pool to draw from, optionally constrained to one pattern."""

    pool: PoolName
    preferred_pattern: str | None = None


@dataclass(frozen=True)
class Block:
    """A single slot in a session recipe.

    Attributes:
        name: Slot name (part of the selection seed)
        sources: Ordered sources; later ones are fallbacks used only when
            the earlier ones cannot fill the slot
    """

    name: str
    sources: tuple[BlockSource, ...]


@dataclass(frozen=True)
class SessionRecipe:
    label: str
    blocks: tuple[Block, ...]


def _block(name: str, *sources: tuple[PoolName, str | None]) -> Block:
    return Block(name=name, sources=tuple(BlockSource(pool, pattern) for pool, pattern in sources))


# Standard slots (gym pools)
PUSH = _block("push", ("push", "push"))
PULL = _block("pull", ("pull", "pull"))
SQUAT = _block("squat", ("squat", "squat"))
HINGE = _block("hinge", ("hinge", "hinge"))
ACCESSORY = _block("accessory", ("accessories", None))
DIPS = _block("dips", ("accessories", "dips"))
CORE = _block("core", ("pilates", "core"))
MOBILITY = _block("mobility", ("pilates", "mobility"))
# Without cardio equipment the slot becomes a core circuit
CARDIO = _block("cardio", ("tactical", "cardio"), ("tactical", "core"))


def _recipe(label: str, *blocks: Block) -> SessionRecipe:
    return SessionRecipe(label=label, blocks=blocks)


FULL_BODY_A = _recipe("Full Body A", PUSH, PULL, SQUAT, ACCESSORY, CORE)
FULL_BODY_B = _recipe("Full Body B", PULL, PUSH, HINGE, ACCESSORY, CORE)
UPPER_A = _recipe("Upper A", PUSH, PULL, ACCESSORY, ACCESSORY)
LOWER_A = _recipe("Lower A", SQUAT, HINGE, ACCESSORY, CORE)
UPPER_B = _recipe("Upper B", PULL, PUSH, DIPS, ACCESSORY)
LOWER_B = _recipe("Lower B", HINGE, SQUAT, ACCESSORY, CORE)

# Default style recipes keyed by (already clamped) frequency
GENERAL_RECIPES: dict[int, tuple[SessionRecipe, ...]] = {
    2: (FULL_BODY_A, FULL_BODY_B),
    3: (
        _recipe("Push", PUSH, DIPS, ACCESSORY, CORE),
        _recipe("Pull", PULL, ACCESSORY, ACCESSORY, CORE),
        _recipe("Legs", SQUAT, HINGE, ACCESSORY, CORE),
    ),
    4: (UPPER_A, LOWER_A, UPPER_B, LOWER_B),
    5: (
        UPPER_A,
        LOWER_A,
        _recipe("Push", PUSH, DIPS, ACCESSORY, CORE),
        _recipe("Pull", PULL, ACCESSORY, ACCESSORY, CORE),
        _recipe("Legs", SQUAT, HINGE, ACCESSORY, MOBILITY),
    ),
    6: (
        _recipe("Push A", PUSH, DIPS, ACCESSORY, CORE),
        _recipe("Pull A", PULL, ACCESSORY, ACCESSORY, CORE),
        _recipe("Legs A", SQUAT, HINGE, ACCESSORY, CORE),
        _recipe("Push B", PUSH, ACCESSORY, DIPS, MOBILITY),
        _recipe("Pull B", PULL, ACCESSORY, CORE, MOBILITY),
        _recipe("Legs B", HINGE, SQUAT, ACCESSORY, MOBILITY),
    ),
}

PILATES_BLOCKS: tuple[Block, ...] = (
    _block("pilates", ("pilates", None)),
    MOBILITY,
    _block("pilates", ("pilates", None)),
    MOBILITY,
)

TACTICAL_BLOCKS: tuple[Block, ...] = (
    _block("push", ("tactical", "push")),
    PULL,
    _block("squat", ("tactical", "squat")),
    CARDIO,
)

CALISTHENICS_BLOCKS: tuple[Block, ...] = (
    _block("push", ("calisthenics", "push")),
    _block("pull", ("calisthenics", "pull"), ("pull", "pull")),
    _block("squat", ("calisthenics", "squat"), ("squat", "squat")),
    _block("core", ("calisthenics", "core"), ("pilates", "core")),
)

HIT_RECIPES: tuple[SessionRecipe, ...] = (
    _recipe("Day A", PUSH, PULL, DIPS, ACCESSORY),
    _recipe("Day B", SQUAT, HINGE, ACCESSORY),
    _recipe("Day C", ACCESSORY, ACCESSORY, ACCESSORY, ACCESSORY),
)


def _general(frequency: int) -> list[SessionRecipe]:
    return list(GENERAL_RECIPES[frequency])


def _hit(frequency: int) -> list[SessionRecipe]:
    return list(HIT_RECIPES[:frequency])


def _replicated(blocks: tuple[Block, ...]) -> Callable[[int], list[SessionRecipe]]:
    def recipes(frequency: int) -> list[SessionRecipe]:
        return [SessionRecipe(label=f"Session {i + 1}", blocks=blocks) for i in range(frequency)]

    return recipes


RECIPE_TABLE: dict[Style, Callable[[int], list[SessionRecipe]]] = {
    Style.GENERAL: _general,
    Style.TRADITIONAL: _general,
    Style.HIT: _hit,
    Style.CALISTHENICS: _replicated(CALISTHENICS_BLOCKS),
    Style.TACTICAL: _replicated(TACTICAL_BLOCKS),
    Style.PILATES: _replicated(PILATES_BLOCKS),
}


def recipes_for(style: Style | str, frequency: int) -> list[SessionRecipe]:
    """Return the ordered session recipes for a style and frequency.

    Frequency is clamped to the supported range first; out-of-range
    requests never fail.

    Args:
        style: Training style
        frequency: Requested sessions per week

    Returns:
        Ordered list of session recipes
    """
    return RECIPE_TABLE[Style(style)](clamp_frequency(frequency))
