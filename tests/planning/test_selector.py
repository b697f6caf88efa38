"""Tests for the deterministic selector.

Tests enforce:
1. FNV-1a 32-bit hash matches the reference vectors
2. Start index is hash mod candidate count
3. Forward probing skips names already used
4. Empty candidate lists select nothing
"""

from liftlog.planning.library.catalog import POOLS, ExerciseDefinition
from liftlog.planning.selection.selector import fnv1a_32, make_seed, select_exercise


def _candidates(*names: str) -> list[ExerciseDefinition]:
    return [ExerciseDefinition(name=n, pattern="accessory", log_type="loadreps", tags=("bw",)) for n in names]


def test_fnv1a_reference_vectors():
    """Test FNV-1a 32-bit against the published reference values."""
    assert fnv1a_32("") == 0x811C9DC5
    assert fnv1a_32("a") == 0xE40C292C
    assert fnv1a_32("foobar") == 0xBF9CF968


def test_fnv1a_fits_in_32_bits():
    """Test that long seeds still hash into an unsigned 32-bit value."""
    h = fnv1a_32("hit|strength|lb|unspecified|Day B|1|squat|0" * 20)
    assert 0 <= h <= 0xFFFFFFFF


def test_make_seed_joins_with_separator():
    """Test seed construction."""
    assert make_seed("hit", "strength", 1, "squat", 0) == "hit|strength|1|squat|0"


def test_start_index_is_hash_mod_length():
    """Test that the hash picks the start index."""
    candidates = _candidates("A", "B", "C")
    # fnv1a_32("a") = 3826002220, 3826002220 % 3 == 1
    assert select_exercise(candidates, "a").name == "B"


def test_probe_skips_used_names():
    """Test forward probing past a name already claimed in the session."""
    candidates = _candidates("A", "B", "C")
    assert select_exercise(candidates, "a", used_names={"B"}).name == "C"
    assert select_exercise(candidates, "a", used_names={"B", "C"}).name == "A"


def test_all_names_used_selects_nothing():
    """Test that a fully claimed list selects nothing."""
    candidates = _candidates("A", "B")
    assert select_exercise(candidates, "a", used_names={"A", "B"}) is None


def test_empty_candidates_select_nothing():
    """Test that an empty candidate list is an unfilled slot, not an error."""
    assert select_exercise([], "anything") is None


def test_selection_is_deterministic():
    """Test that a fixed seed and list always resolve to the same exercise."""
    pool = list(POOLS["accessories"])
    first = select_exercise(pool, "general|muscle|lb|unspecified|Upper A|0|accessory|2")
    for _ in range(10):
        assert select_exercise(pool, "general|muscle|lb|unspecified|Upper A|0|accessory|2") == first
