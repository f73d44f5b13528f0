"""WorkoutSet schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from plates.core.enums import ExerciseType
from plates.services.time_format import parse_time_to_minutes, validate_time_string


def _duration_minutes(value):
    """Accept decimal minutes or a "MM:SS" / "HH:MM:SS" string."""
    if isinstance(value, str):
        error = validate_time_string(value)
        if error:
            raise ValueError(error)
        return parse_time_to_minutes(value)
    return value


class WorkoutSetBase(BaseModel):
    weight: float | None = Field(None, ge=0)
    reps: int | None = Field(None, ge=0)
    distance: float | None = Field(None, gt=0, description="Miles")
    duration: float | None = Field(None, gt=0, description="Minutes, or a time string like 23:45")
    notes: str | None = Field(None, max_length=500)

    @field_validator("duration", mode="before")
    @classmethod
    def parse_duration(cls, v):
        return _duration_minutes(v)


class WorkoutSetCreate(WorkoutSetBase):
    exercise_id: UUID
    date: datetime | None = Field(None, description="Defaults to now")


class WorkoutSetUpdate(WorkoutSetBase):
    date: datetime | None = None


class WorkoutSetRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    exercise_id: UUID
    user_id: UUID | None = None
    weight: float | None = None
    reps: int | None = None
    distance: float | None = None
    duration: float | None = None
    date: datetime
    notes: str | None = None
    created_at: datetime | None = None


class WorkoutSetWithExercise(WorkoutSetRead):
    """Set flattened with its exercise's name, muscle groups and type (history view)."""

    exercise_name: str | None = None
    muscle_group: list[str] | None = None
    exercise_type: ExerciseType | None = None
