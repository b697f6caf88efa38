"""Profile - Immutable Input Contract.

This is the ONLY object allowed to enter the program generator.
It is validated only as far as exercise selection needs; frequency is
accepted as given and clamped downstream, never rejected.
"""

from enum import StrEnum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from liftlog.planning.invariants import BODYWEIGHT_TAG

Units = Literal["lb", "kg"]
Gender = Literal["unspecified", "male", "female"]
Recovery = Literal["schedule", "recovered"]
Tolerance = Literal["good", "limited", "avoid"]
SpineSensitivity = Literal["none", "mild", "high"]


class Style(StrEnum):
    GENERAL = "general"
    TRADITIONAL = "traditional"
    HIT = "hit"
    CALISTHENICS = "calisthenics"
    TACTICAL = "tactical"
    PILATES = "pilates"


class Goal(StrEnum):
    MUSCLE = "muscle"
    STRENGTH = "strength"
    RECOMP = "recomp"
    ENDURANCE = "endurance"
    MOBILITY = "mobility"


class Equipment(BaseModel):
    """Equipment the athlete owns. Bodyweight is implied."""

    model_config = ConfigDict(frozen=True)

    barbell: bool = True
    dumbbell: bool = True
    cables: bool = True
    landmine: bool = False
    pullup: bool = True
    dip: bool = True
    bench: bool = True
    cardio: bool = False

    def owned_tags(self) -> frozenset[str]:
        """Resolve ownership flags into the equipment tags exercises require."""
        tags = {BODYWEIGHT_TAG}
        if self.barbell:
            tags.update({"barbell", "rack"})
        for flag in ("dumbbell", "cables", "landmine", "pullup", "dip", "bench", "cardio"):
            if getattr(self, flag):
                tags.add(flag)
        return frozenset(tags)


class MovementTolerance(BaseModel):
    model_config = ConfigDict(frozen=True)

    squat: Tolerance = "limited"
    hinge: Tolerance = "limited"
    overhead: Tolerance = "limited"
    dips: Tolerance = "good"
    pullups: Tolerance = "good"


_EQUIPMENT_KEYS = ("barbell", "dumbbell", "cables", "landmine", "pullup", "dip", "bench", "cardio")
_TOLERANCE_KEYS = ("squat", "hinge", "overhead", "dips", "pullups")


class Profile(BaseModel):
    """Complete athlete profile - immutable generator input.

    Attributes:
        style: Training style (drives session recipes)
        goal: Primary goal (drives progression rules)
        freq: Requested sessions per week (clamped to 2-6 by the generator)
        recovery: Recovery style, carried into program metadata only
        units: Load unit system
        gender: Optional; biases default rep ranges only
        equipment: Equipment ownership flags
        tolerance: Movement tolerance ratings
        spine: Spine sensitivity (high unless stated, the cautious default)
    """

    model_config = ConfigDict(frozen=True)

    style: Style = Style.GENERAL
    goal: Goal = Goal.MUSCLE
    freq: int = 3
    recovery: Recovery = "schedule"
    units: Units = "lb"
    gender: Gender = "unspecified"

    equipment: Equipment = Field(default_factory=Equipment)
    tolerance: MovementTolerance = Field(default_factory=MovementTolerance)
    spine: SpineSensitivity = "high"

    def owned_tags(self) -> frozenset[str]:
        return self.equipment.owned_tags()

    @classmethod
    def from_builder_config(cls, cfg: dict[str, Any]) -> "Profile":
        """Build a profile from the flat builder record.

        The builder record is the persisted form of the plan builder
        (``eq_*`` ownership flags, ``mv_*`` tolerances, ``inj_spine``).
        Missing keys fall back to model defaults.

        Args:
            cfg: Flat builder configuration

        Returns:
            Validated Profile
        """
        data: dict[str, Any] = {
            key: cfg[key] for key in ("style", "goal", "freq", "recovery", "units", "gender") if key in cfg
        }
        data["equipment"] = {key: cfg[f"eq_{key}"] for key in _EQUIPMENT_KEYS if f"eq_{key}" in cfg}
        data["tolerance"] = {key: cfg[f"mv_{key}"] for key in _TOLERANCE_KEYS if f"mv_{key}" in cfg}
        if "inj_spine" in cfg:
            data["spine"] = cfg["inj_spine"]
        return cls.model_validate(data)

    def to_builder_config(self) -> dict[str, Any]:
        """Flatten this profile into the builder record."""
        cfg: dict[str, Any] = {
            "style": self.style.value,
            "goal": self.goal.value,
            "freq": str(self.freq),
            "recovery": self.recovery,
            "units": self.units,
            "gender": self.gender,
        }
        for key in _EQUIPMENT_KEYS:
            cfg[f"eq_{key}"] = getattr(self.equipment, key)
        for key in _TOLERANCE_KEYS:
            cfg[f"mv_{key}"] = getattr(self.tolerance, key)
        cfg["inj_spine"] = self.spine
        return cfg
