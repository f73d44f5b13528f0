"""Workout endpoints: named, ordered groupings of exercises."""

from __future__ import annotations

import uuid
from collections import defaultdict

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from plates.core.security import CurrentUser, get_current_user
from plates.db.session import get_db
from plates.models.exercise import Exercise
from plates.models.workout import Workout, WorkoutExercise
from plates.schemas.workout import (
    WorkoutCreate,
    WorkoutExercisesRead,
    WorkoutExercisesUpdate,
    WorkoutRead,
    WorkoutReorder,
    WorkoutUpdate,
)

router = APIRouter()


def _read(workout: Workout, exercise_ids: list[uuid.UUID] | None = None) -> WorkoutRead:
    return WorkoutRead(
        id=workout.id,
        user_id=workout.user_id,
        name=workout.name,
        display_order=workout.display_order,
        created_at=workout.created_at,
        exercise_ids=exercise_ids or [],
    )


async def _get_own_workout_or_404(db: AsyncSession, workout_id: uuid.UUID, user_id: uuid.UUID) -> Workout:
    result = await db.execute(
        select(Workout).where(Workout.id == workout_id, Workout.user_id == user_id)
    )
    workout = result.scalar_one_or_none()
    if not workout:
        raise HTTPException(status_code=404, detail="Workout not found")
    return workout


async def _exercise_ids(db: AsyncSession, workout_id: uuid.UUID) -> list[uuid.UUID]:
    result = await db.execute(
        select(WorkoutExercise.exercise_id)
        .where(WorkoutExercise.workout_id == workout_id)
        .order_by(WorkoutExercise.display_order)
    )
    return list(result.scalars().all())


@router.get("", response_model=list[WorkoutRead])
async def list_workouts(
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """The caller's workouts in display order, each with its ordered exercise ids."""
    result = await db.execute(
        select(Workout).where(Workout.user_id == user.id).order_by(Workout.display_order)
    )
    workouts = list(result.scalars().all())
    if not workouts:
        return []

    links = await db.execute(
        select(WorkoutExercise.workout_id, WorkoutExercise.exercise_id)
        .where(WorkoutExercise.workout_id.in_([w.id for w in workouts]))
        .order_by(WorkoutExercise.display_order)
    )
    by_workout: dict[uuid.UUID, list[uuid.UUID]] = defaultdict(list)
    for workout_id, exercise_id in links.all():
        by_workout[workout_id].append(exercise_id)
    return [_read(w, by_workout.get(w.id)) for w in workouts]


@router.post("", response_model=WorkoutRead, status_code=201)
async def create_workout(
    payload: WorkoutCreate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Create an empty workout after the caller's last one."""
    result = await db.execute(
        select(func.max(Workout.display_order)).where(Workout.user_id == user.id)
    )
    max_order = result.scalar()
    workout = Workout(
        user_id=user.id,
        name=payload.name,
        display_order=(max_order if max_order is not None else -1) + 1,
    )
    db.add(workout)
    await db.flush()
    await db.refresh(workout)
    return _read(workout)


# Declared before /{workout_id} routes so "reorder" is not parsed as an id.
@router.put("/reorder")
async def reorder_workouts(
    payload: WorkoutReorder,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Set display_order from list position. Every id must belong to the caller."""
    ids = payload.workout_ids
    result = await db.execute(
        select(Workout).where(Workout.user_id == user.id, Workout.id.in_(ids))
    )
    workouts = {w.id: w for w in result.scalars().all()}
    if len(workouts) != len(set(ids)) or len(ids) != len(set(ids)):
        raise HTTPException(status_code=404, detail="One or more workouts not found")
    for position, workout_id in enumerate(ids):
        workouts[workout_id].display_order = position
    await db.flush()
    return {"success": True}


@router.patch("/{workout_id}", response_model=WorkoutRead)
async def update_workout(
    workout_id: uuid.UUID,
    payload: WorkoutUpdate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Rename or move a workout."""
    workout = await _get_own_workout_or_404(db, workout_id, user.id)
    data = payload.model_dump(exclude_unset=True, exclude_none=True)
    if not data:
        raise HTTPException(status_code=400, detail="No fields to update")
    for k, v in data.items():
        setattr(workout, k, v)
    await db.flush()
    await db.refresh(workout)
    return _read(workout, await _exercise_ids(db, workout.id))


@router.delete("/{workout_id}", status_code=204)
async def delete_workout(
    workout_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Delete a workout and its exercise links (exercises and sets are untouched)."""
    workout = await _get_own_workout_or_404(db, workout_id, user.id)
    await db.delete(workout)
    return None


@router.put("/{workout_id}/exercises", response_model=WorkoutExercisesRead)
async def set_workout_exercises(
    workout_id: uuid.UUID,
    payload: WorkoutExercisesUpdate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Replace the workout's exercise list; order follows the given list."""
    workout = await _get_own_workout_or_404(db, workout_id, user.id)
    wanted = set(payload.exercise_ids)
    if wanted:
        found = await db.execute(select(Exercise.id).where(Exercise.id.in_(wanted)))
        if len(set(found.scalars().all())) != len(wanted):
            raise HTTPException(status_code=404, detail="One or more exercises not found")
    await db.execute(delete(WorkoutExercise).where(WorkoutExercise.workout_id == workout.id))
    for position, exercise_id in enumerate(payload.exercise_ids):
        db.add(WorkoutExercise(workout_id=workout.id, exercise_id=exercise_id, display_order=position))
    await db.flush()
    return WorkoutExercisesRead(exercise_ids=payload.exercise_ids)
