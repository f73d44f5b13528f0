"""Workout (exercise grouping) schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WorkoutCreate(BaseModel):
    name: str = Field(..., max_length=255)

    @field_validator("name")
    @classmethod
    def name_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Workout name is required")
        return v


class WorkoutUpdate(BaseModel):
    name: str | None = Field(None, max_length=255)
    display_order: int | None = Field(None, ge=0)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("Workout name cannot be empty")
        return v


class WorkoutRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    name: str
    display_order: int
    created_at: datetime | None = None
    exercise_ids: list[UUID] = []


class WorkoutExercisesUpdate(BaseModel):
    exercise_ids: list[UUID]


class WorkoutExercisesRead(BaseModel):
    success: bool = True
    exercise_ids: list[UUID]


class WorkoutReorder(BaseModel):
    workout_ids: list[UUID] = Field(..., min_length=1)
