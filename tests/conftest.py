"""Root conftest for all tests.

This file makes shared fixtures available across all test modules.
"""

import sys
from pathlib import Path

import pytest
from loguru import logger

# Add project root to path
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from liftlog.planning.schemas.profile import Equipment, MovementTolerance, Profile

_ALL_GOOD = MovementTolerance(squat="good", hinge="good", overhead="good", dips="good", pullups="good")
_BODYWEIGHT_ONLY = Equipment(
    barbell=False,
    dumbbell=False,
    cables=False,
    landmine=False,
    pullup=False,
    dip=False,
    bench=False,
    cardio=False,
)
_FULL_GYM = Equipment(
    barbell=True,
    dumbbell=True,
    cables=True,
    landmine=True,
    pullup=True,
    dip=True,
    bench=True,
    cardio=True,
)


@pytest.fixture(autouse=True)
def reset_loguru_handlers():
    """Drop handlers added during a test (e.g. by CLI invocations)."""
    yield
    logger.remove()


@pytest.fixture
def hit_strength_profile() -> Profile:
    """HIT / strength profile with a typical home gym and no restrictions."""
    return Profile(
        style="hit",
        goal="strength",
        freq=3,
        units="lb",
        equipment=Equipment(
            barbell=True,
            dumbbell=True,
            cables=True,
            landmine=False,
            pullup=True,
            dip=False,
            bench=True,
            cardio=False,
        ),
        tolerance=_ALL_GOOD,
        spine="none",
    )


@pytest.fixture
def all_good() -> MovementTolerance:
    """Every movement tolerated."""
    return _ALL_GOOD


@pytest.fixture
def bodyweight_only() -> Equipment:
    """No equipment owned; bodyweight is implied."""
    return _BODYWEIGHT_ONLY


@pytest.fixture
def full_gym() -> Equipment:
    """Every piece of equipment owned."""
    return _FULL_GYM
