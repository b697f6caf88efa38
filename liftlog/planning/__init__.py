"""Planning module - deterministic workout-program generation.

This module provides:
- Static exercise catalog and per-style session recipes
- Eligibility filtering and seeded (hash-based) exercise selection
- Goal / injury / gender sensitive progression rules
- Program assembly and post-hoc validation

The generator has no randomness source and keeps no state between calls.
"""

from liftlog.planning.compiler.assemble_program import generate_program
from liftlog.planning.compiler.ids import IdSequence
from liftlog.planning.compiler.recipes import recipes_for
from liftlog.planning.compiler.validate_program import validate_program
from liftlog.planning.errors import ProgramInvariantError
from liftlog.planning.output.models import Program, ProgramMeta, ProgressionRule, Session, SessionItem
from liftlog.planning.progression.rules import rule_for
from liftlog.planning.schemas.profile import Goal, Profile, Style

__all__ = [
    "Goal",
    "IdSequence",
    "Profile",
    "Program",
    "ProgramInvariantError",
    "ProgramMeta",
    "ProgressionRule",
    "Session",
    "SessionItem",
    "Style",
    "generate_program",
    "recipes_for",
    "rule_for",
    "validate_program",
]
