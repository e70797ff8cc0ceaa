"""Patient profile schemas for simulated MI practice sessions.

A PatientProfile is generated once per practice session from a
PatientProfileTemplate and held for the session's duration. Over HTTP the
profile is exchanged in camelCase (``presentingProblem``, ``stageOfChange``)
but either casing is accepted on input.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# === Enums ===


class StageOfChange(str, Enum):
    """Transtheoretical Model stages, in order."""

    PRECONTEMPLATION = "Precontemplation"
    CONTEMPLATION = "Contemplation"
    PREPARATION = "Preparation"
    ACTION = "Action"
    MAINTENANCE = "Maintenance"


class DifficultyLevel(str, Enum):
    """Practice difficulty, mapped onto a subset of stages."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


Sex = Literal["Male", "Female", "Non-binary"]


# === Static reference data ===


@dataclass(frozen=True, slots=True)
class PatientProfileTemplate:
    topic: str
    presenting_problem: str
    history: str
    chief_complaint: str
    background: str  # contains the "{age}" placeholder
    age_range: tuple[int, int]
    conflicting_chief_complaint: str | None = None

    def __post_init__(self) -> None:
        low, high = self.age_range
        if low > high:
            raise ValueError(
                f"Invalid age range {self.age_range!r} for topic {self.topic!r}"
            )


# === API schemas ===


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PatientProfile(_CamelModel):
    """A concrete simulated patient for one practice session."""

    name: str
    age: int = Field(ge=0)
    sex: Sex
    background: str
    presenting_problem: str
    topic: str
    history: str
    chief_complaint: str
    stage_of_change: StageOfChange


class PatientProfileFilters(_CamelModel):
    """Optional constraints on profile generation.

    An explicit stage_of_change always wins over difficulty.
    """

    topic: str | None = None
    stage_of_change: StageOfChange | None = None
    difficulty: DifficultyLevel | None = None
