"""Exercise schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from plates.core.enums import ExerciseType, MuscleGroup


def _as_list(value):
    if isinstance(value, (str, MuscleGroup)):
        return [value]
    return value


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


class ExerciseCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    muscle_group: list[MuscleGroup] = Field(..., min_length=1)
    exercise_type: ExerciseType = ExerciseType.STRENGTH
    uses_body_weight: bool = False

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Exercise name is required")
        return v

    @field_validator("muscle_group", mode="before")
    @classmethod
    def single_group_to_list(cls, v):
        return _as_list(v)


class ExerciseSettingsUpdate(BaseModel):
    """Per-user settings; blank strings clear a value."""

    user_pr_reps: int | None = Field(None, ge=1, le=100)
    pinned_note: str | None = Field(None, max_length=1000)
    goal_weight: float | None = Field(None, gt=0)
    goal_reps: int | None = Field(None, ge=1)

    @field_validator("pinned_note", "goal_weight", "goal_reps", mode="before")
    @classmethod
    def blank_clears(cls, v):
        return _blank_to_none(v)


class ExerciseRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    muscle_group: list[str]
    exercise_type: ExerciseType
    is_base: bool = False
    uses_body_weight: bool = False
    created_at: datetime | None = None

    @field_validator("muscle_group", mode="before")
    @classmethod
    def single_group_to_list(cls, v):
        return _as_list(v)


class ExerciseWithUserData(ExerciseRead):
    """Exercise merged with the caller's settings for it."""

    user_pr_reps: int | None = None
    pinned_note: str | None = None
    goal_weight: float | None = None
    goal_reps: int | None = None
