"""ExerciseCatalog - Library Unit.

Definitions describe WHAT an exercise is, never how much of it to do.
Pools are ordered; order is only the tie-break basis for seeded selection,
so reordering a pool changes which exercise a stored seed resolves to.
"""

from dataclasses import dataclass
from typing import Literal

Pattern = Literal["push", "pull", "squat", "hinge", "accessory", "core", "mobility", "cardio", "dips", "overhead"]
LogType = Literal["loadreps", "timed", "circuit"]
PoolName = Literal["push", "pull", "squat", "hinge", "accessories", "pilates", "tactical", "calisthenics"]


@dataclass(frozen=True)
class ExerciseDefinition:
    """Static exercise definition - selection-only.

    Attributes:
        name: Exercise name (unique within its pool)
        pattern: Movement pattern
        log_type: How results are logged (load+reps, timed, circuit rounds)
        tags: Equipment tags; at least one must be owned
    """

    name: str
    pattern: Pattern
    log_type: LogType
    tags: tuple[str, ...]


def _ex(name: str, pattern: Pattern, log_type: LogType, *tags: str) -> ExerciseDefinition:
    return ExerciseDefinition(name=name, pattern=pattern, log_type=log_type, tags=tags)


POOLS: dict[PoolName, tuple[ExerciseDefinition, ...]] = {
    "push": (
        _ex("Incline press", "push", "loadreps", "bench", "barbell", "dumbbell"),
        _ex("Flat press", "push", "loadreps", "bench", "barbell", "dumbbell"),
        _ex("Landmine press", "push", "loadreps", "landmine"),
        _ex("Push-up", "push", "loadreps", "bw"),
    ),
    "pull": (
        _ex("Cable row", "pull", "loadreps", "cables"),
        _ex("Seated row (attachment)", "pull", "loadreps", "cables"),
        _ex("Lat pulldown", "pull", "loadreps", "cables"),
        _ex("Pull-up", "pull", "loadreps", "pullup", "bw"),
    ),
    "squat": (
        _ex("Split squat", "squat", "loadreps", "dumbbell", "bw"),
        _ex("Step-up", "squat", "loadreps", "bench", "dumbbell", "bw"),
        _ex("Goblet squat", "squat", "loadreps", "dumbbell"),
        _ex("Squat", "squat", "loadreps", "rack", "barbell"),
    ),
    "hinge": (
        _ex("Hip thrust / glute bridge", "hinge", "loadreps", "bench", "barbell", "bw"),
        _ex("Cable pull-through", "hinge", "loadreps", "cables"),
        _ex("RDL (light/controlled)", "hinge", "loadreps", "barbell", "dumbbell"),
    ),
    "accessories": (
        _ex("Lateral raise", "accessory", "loadreps", "dumbbell", "cables"),
        _ex("Curl", "accessory", "loadreps", "dumbbell", "cables", "barbell"),
        _ex("Triceps pressdown", "accessory", "loadreps", "cables"),
        _ex("Calf raise", "accessory", "loadreps", "bw", "barbell", "dumbbell"),
        _ex("Dips", "dips", "loadreps", "dip", "bw"),
    ),
    "pilates": (
        _ex("Breath + bracing", "core", "timed", "bw"),
        _ex("Dead bug / hollow hold", "core", "timed", "bw"),
        _ex("Side plank", "core", "timed", "bw"),
        _ex("Hip mobility flow", "mobility", "timed", "bw"),
        _ex("Thoracic mobility flow", "mobility", "timed", "bw"),
    ),
    "tactical": (
        _ex("Push-up interval", "push", "timed", "bw"),
        _ex("Squat / lunge interval", "squat", "timed", "bw"),
        _ex("Core circuit", "core", "circuit", "bw"),
        _ex("Run/ruck/bike interval", "cardio", "timed", "cardio"),
    ),
    "calisthenics": (
        _ex("Push-up (variation)", "push", "loadreps", "bw"),
        _ex("Pull-up (variation)", "pull", "loadreps", "pullup", "bw"),
        _ex("Dip (variation)", "dips", "loadreps", "dip", "bw"),
        _ex("Split squat progression", "squat", "loadreps", "bw"),
        _ex("Hollow hold / plank", "core", "timed", "bw"),
    ),
}


def get_pool(name: PoolName) -> tuple[ExerciseDefinition, ...]:
    """Return a catalog pool by name.

    Raises:
        KeyError: If the pool does not exist
    """
    return POOLS[name]
