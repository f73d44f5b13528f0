"""Exercise and per-user exercise settings."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, Boolean, DateTime, Enum, Float, ForeignKey, Integer, String, Text, UniqueConstraint, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship

from plates.core.enums import ExerciseType
from plates.db.base import Base


class Exercise(Base):
    """Exercise definition. Base exercises are shown to every user; others are user-added."""

    __tablename__ = "exercises"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    # List of MuscleGroup values, e.g. ["Chest", "Triceps"]; first entry is the primary group
    muscle_group: Mapped[list[str]] = mapped_column(
        JSON().with_variant(JSONB, "postgresql"), nullable=False, default=list
    )
    exercise_type: Mapped[ExerciseType] = mapped_column(
        Enum(ExerciseType), default=ExerciseType.STRENGTH, nullable=False
    )
    is_base: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    uses_body_weight: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    user_links: Mapped[list["UserExercise"]] = relationship(
        "UserExercise", back_populates="exercise", cascade="all, delete-orphan"
    )
    sets: Mapped[list["WorkoutSet"]] = relationship(
        "WorkoutSet", back_populates="exercise", cascade="all, delete-orphan"
    )


class UserExercise(Base):
    """A user's link to an exercise with their PR display reps, note and goals."""

    __tablename__ = "user_exercises"
    __table_args__ = (UniqueConstraint("user_id", "exercise_id", name="uq_user_exercises_user_exercise"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    exercise_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("exercises.id", ondelete="CASCADE"), nullable=False
    )
    user_pr_reps: Mapped[int | None] = mapped_column(Integer, nullable=True)
    pinned_note: Mapped[str | None] = mapped_column(Text, nullable=True)
    goal_weight: Mapped[float | None] = mapped_column(Float, nullable=True)  # strength goal
    goal_reps: Mapped[int | None] = mapped_column(Integer, nullable=True)  # body-weight goal
    hidden: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    exercise: Mapped["Exercise"] = relationship("Exercise", back_populates="user_links")
