"""Set logging endpoints (strength and cardio)."""

from __future__ import annotations

import logging
import uuid
from collections import defaultdict
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from plates.core.enums import ExerciseType
from plates.core.security import CurrentUser, get_current_user
from plates.db.session import get_db
from plates.models.exercise import Exercise
from plates.models.workout_set import WorkoutSet
from plates.schemas.workout_set import (
    WorkoutSetCreate,
    WorkoutSetRead,
    WorkoutSetUpdate,
    WorkoutSetWithExercise,
)
from plates.services.muscle import get_muscle_groups

logger = logging.getLogger(__name__)
router = APIRouter()


def _require_fields_for_type(exercise_type: ExerciseType, data: dict) -> None:
    """Strength sets need weight and reps; cardio sets need distance and duration."""
    if exercise_type == ExerciseType.CARDIO:
        if data.get("distance") is None or data.get("duration") is None:
            raise HTTPException(status_code=400, detail="distance and duration are required for cardio sets")
    elif data.get("weight") is None or data.get("reps") is None:
        raise HTTPException(status_code=400, detail="exercise_id, weight, and reps are required")


async def _get_own_set_or_404(db: AsyncSession, set_id: uuid.UUID, user_id: uuid.UUID) -> WorkoutSet:
    result = await db.execute(
        select(WorkoutSet).where(WorkoutSet.id == set_id, WorkoutSet.user_id == user_id)
    )
    set_ = result.scalar_one_or_none()
    if not set_:
        raise HTTPException(status_code=404, detail="Set not found")
    return set_


@router.get("", response_model=list[WorkoutSetRead])
async def list_sets_for_exercise(
    exercise_id: uuid.UUID | None = None,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Full set history for one exercise, newest first."""
    if exercise_id is None:
        raise HTTPException(status_code=400, detail="exercise_id parameter is required")
    result = await db.execute(
        select(WorkoutSet)
        .where(WorkoutSet.user_id == user.id, WorkoutSet.exercise_id == exercise_id)
        .order_by(WorkoutSet.date.desc())
    )
    return list(result.scalars().all())


@router.get("/all", response_model=list[WorkoutSetWithExercise])
async def list_all_sets(
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Every set the caller logged, newest first, flattened with exercise name/muscles/type."""
    result = await db.execute(
        select(WorkoutSet)
        .where(WorkoutSet.user_id == user.id)
        .options(selectinload(WorkoutSet.exercise))
        .order_by(WorkoutSet.date.desc())
    )
    out = []
    for s in result.scalars().all():
        read = WorkoutSetWithExercise.model_validate(s)
        if s.exercise is not None:
            read.exercise_name = s.exercise.name
            read.muscle_group = get_muscle_groups(s.exercise)
            read.exercise_type = s.exercise.exercise_type
        out.append(read)
    return out


@router.get("/bulk", response_model=dict[str, list[WorkoutSetRead]])
async def list_sets_grouped(
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Every set the caller logged, grouped by exercise id (newest first within each group)."""
    result = await db.execute(
        select(WorkoutSet)
        .where(WorkoutSet.user_id == user.id)
        .order_by(WorkoutSet.date.desc())
    )
    grouped: dict[str, list[WorkoutSetRead]] = defaultdict(list)
    for s in result.scalars().all():
        grouped[str(s.exercise_id)].append(WorkoutSetRead.model_validate(s))
    return dict(grouped)


@router.post("", response_model=WorkoutSetRead, status_code=201)
async def log_set(
    payload: WorkoutSetCreate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Log a set. Date defaults to now."""
    result = await db.execute(select(Exercise).where(Exercise.id == payload.exercise_id))
    exercise = result.scalar_one_or_none()
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")

    data = payload.model_dump()
    _require_fields_for_type(exercise.exercise_type, data)
    if data["date"] is None:
        data["date"] = datetime.now(timezone.utc)

    set_ = WorkoutSet(user_id=user.id, **data)
    db.add(set_)
    await db.flush()
    await db.refresh(set_)
    logger.debug("User %s logged set %s for exercise %s", user.id, set_.id, exercise.id)
    return set_


@router.patch("/{set_id}", response_model=WorkoutSetRead)
async def update_set(
    set_id: uuid.UUID,
    payload: WorkoutSetUpdate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Edit a set (partial). The result must still carry the fields its exercise type needs."""
    set_ = await _get_own_set_or_404(db, set_id, user.id)
    data = payload.model_dump(exclude_unset=True)
    if "date" in data and data["date"] is None:
        raise HTTPException(status_code=400, detail="date cannot be cleared")

    exercise = await db.get(Exercise, set_.exercise_id)
    if exercise is not None:
        merged = {f: getattr(set_, f) for f in ("weight", "reps", "distance", "duration")}
        merged.update(data)
        _require_fields_for_type(exercise.exercise_type, merged)

    for k, v in data.items():
        setattr(set_, k, v)
    await db.flush()
    await db.refresh(set_)
    return set_


@router.delete("/{set_id}", status_code=204)
async def delete_set(
    set_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Delete a set."""
    set_ = await _get_own_set_or_404(db, set_id, user.id)
    await db.delete(set_)
    return None
