"""Tests for the session recipe table.

Tests enforce:
1. Frequency is clamped to 2-6, never rejected
2. Default styles have a distinct recipe per frequency
3. HIT uses a fixed A/B/C structure truncated to the frequency
4. Scalable styles replicate one block sequence per session
"""

import pytest

from liftlog.planning.compiler.recipes import CARDIO, GENERAL_RECIPES, TACTICAL_BLOCKS, recipes_for
from liftlog.planning.invariants import clamp_frequency


@pytest.mark.parametrize(("requested", "expected"), [(-3, 2), (0, 2), (1, 2), (2, 2), (4, 4), (6, 6), (10, 6)])
def test_clamp_frequency(requested, expected):
    """Test frequency clamping."""
    assert clamp_frequency(requested) == expected


def test_general_recipe_per_frequency():
    """Test that each frequency has its own recipe with as many sessions."""
    for freq in range(2, 7):
        recipes = recipes_for("general", freq)
        assert len(recipes) == freq
        assert recipes == list(GENERAL_RECIPES[freq])

    assert [r.label for r in recipes_for("general", 4)] == ["Upper A", "Lower A", "Upper B", "Lower B"]
    assert [r.label for r in recipes_for("general", 3)] == ["Push", "Pull", "Legs"]


def test_traditional_shares_general_recipes():
    """Test that traditional uses the default recipes."""
    for freq in range(2, 7):
        assert recipes_for("traditional", freq) == recipes_for("general", freq)


def test_out_of_range_frequency_clamps():
    """Test that out-of-range requests clamp instead of failing."""
    assert len(recipes_for("general", 10)) == 6
    assert len(recipes_for("general", 1)) == 2


def test_hit_fixed_structure():
    """Test the HIT A/B/C structure."""
    assert [r.label for r in recipes_for("hit", 3)] == ["Day A", "Day B", "Day C"]
    assert [r.label for r in recipes_for("hit", 6)] == ["Day A", "Day B", "Day C"]
    assert [r.label for r in recipes_for("hit", 2)] == ["Day A", "Day B"]

    day_b = recipes_for("hit", 3)[1]
    assert [b.name for b in day_b.blocks] == ["squat", "hinge", "accessory"]


@pytest.mark.parametrize("style", ["pilates", "tactical", "calisthenics"])
def test_scalable_styles_replicate_blocks(style):
    """Test that scalable styles repeat one block sequence per session."""
    recipes = recipes_for(style, 5)
    assert [r.label for r in recipes] == [f"Session {i}" for i in range(1, 6)]
    assert len({r.blocks for r in recipes}) == 1


def test_fallback_sources_ordered():
    """Test that calisthenics pull falls back to the gym pull pool."""
    pull = recipes_for("calisthenics", 2)[0].blocks[1]
    assert [s.pool for s in pull.sources] == ["calisthenics", "pull"]
    assert all(s.preferred_pattern == "pull" for s in pull.sources)


def test_unknown_style_rejected():
    """Test that an unknown style is a programming error."""
    with pytest.raises(ValueError):
        recipes_for("zumba", 3)


def test_tactical_cardio_slot_falls_back_to_core():
    """Test that the shared cardio slot carries the core-circuit fallback."""
    assert TACTICAL_BLOCKS[-1] is CARDIO
    assert [(s.pool, s.preferred_pattern) for s in CARDIO.sources] == [("tactical", "cardio"), ("tactical", "core")]
