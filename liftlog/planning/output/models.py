"""ProgressionRule, SessionItem, Session & Program - Generator Output.

These are the final, concrete output of the generator. Field aliases are
the stored interchange format (camelCase) and must not change: existing
stored programs are read back through them.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from liftlog.planning.invariants import PROGRESSION_TRIGGER


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ProgressionRule(_Record):
    """Target rep range and load increment for a load/rep exercise.

    Attributes:
        rep_min: Bottom of the rep range
        rep_max: Top of the rep range (advance when a clean set reaches it)
        inc: Load increment in the profile's units
        trigger: Advancement condition (always clean_at_top)
    """

    rep_min: int = Field(alias="repMin", ge=1)
    rep_max: int = Field(alias="repMax", ge=1)
    inc: float = Field(gt=0)
    trigger: Literal["clean_at_top"] = PROGRESSION_TRIGGER

    @model_validator(mode="after")
    def validate_range(self) -> "ProgressionRule":
        """Rep range must be non-empty."""
        if self.rep_min >= self.rep_max:
            raise ValueError(f"repMin ({self.rep_min}) must be below repMax ({self.rep_max})")
        return self


class SessionItem(_Record):
    id: str
    name: str
    log_type: Literal["loadreps", "timed", "circuit"] = Field(alias="logType")
    pattern: str
    rule: ProgressionRule | None = None
    default_units: Literal["lb", "kg"] = Field(alias="defaultUnits")


class Session(_Record):
    id: str
    label: str
    items: list[SessionItem]

    @property
    def patterns(self) -> list[str]:
        return [item.pattern for item in self.items]


class ProgramMeta(_Record):
    """Program metadata.

    Attributes:
        style: Training style
        goal: Primary goal
        freq: Resolved (clamped) sessions per week
        recovery: Recovery style
        units: Unit system
        created_at: Creation timestamp, epoch milliseconds
    """

    style: str
    goal: str
    freq: int
    recovery: str
    units: Literal["lb", "kg"]
    created_at: int = Field(alias="createdAt")


class Program(_Record):
    meta: ProgramMeta
    sessions: list[Session]

    def to_record(self) -> dict[str, Any]:
        """Serialize to the stored interchange record."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Program":
        return cls.model_validate(record)

    def session_by_label(self, label: str) -> Session | None:
        return next((s for s in self.sessions if s.label == label), None)

    def session_by_id(self, session_id: str) -> Session | None:
        return next((s for s in self.sessions if s.id == session_id), None)
