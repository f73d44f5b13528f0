"""Exercise endpoints: the caller's exercise feed, shared catalogue and per-user settings."""

from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from plates.core.enums import ALL_MUSCLES_TAB
from plates.core.security import CurrentUser, get_current_user
from plates.db.session import get_db
from plates.models.exercise import Exercise, UserExercise
from plates.schemas.exercise import (
    ExerciseCreate,
    ExerciseRead,
    ExerciseSettingsUpdate,
    ExerciseWithUserData,
)
from plates.services.muscle import exercise_matches_muscle_tab, get_muscle_groups

logger = logging.getLogger(__name__)
router = APIRouter()

USER_SETTINGS_FIELDS = ("user_pr_reps", "pinned_note", "goal_weight", "goal_reps")


def _with_user_data(exercise: Exercise, link: UserExercise | None) -> ExerciseWithUserData:
    read = ExerciseWithUserData.model_validate(exercise)
    if link is not None:
        for field in USER_SETTINGS_FIELDS:
            setattr(read, field, getattr(link, field))
    return read


async def _get_link(db: AsyncSession, user_id: uuid.UUID, exercise_id: uuid.UUID) -> UserExercise | None:
    result = await db.execute(
        select(UserExercise).where(
            UserExercise.user_id == user_id,
            UserExercise.exercise_id == exercise_id,
        )
    )
    return result.scalar_one_or_none()


async def _get_or_create_link(db: AsyncSession, user_id: uuid.UUID, exercise_id: uuid.UUID) -> UserExercise:
    link = await _get_link(db, user_id, exercise_id)
    if link is None:
        link = UserExercise(user_id=user_id, exercise_id=exercise_id)
        db.add(link)
    return link


async def _get_exercise_or_404(db: AsyncSession, exercise_id: uuid.UUID) -> Exercise:
    result = await db.execute(select(Exercise).where(Exercise.id == exercise_id))
    exercise = result.scalar_one_or_none()
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return exercise


@router.get("", response_model=list[ExerciseWithUserData])
async def list_exercises(
    muscle_group: str | None = None,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Base exercises plus the caller's added ones, minus hidden, optionally filtered by muscle tab."""
    base_result = await db.execute(select(Exercise).where(Exercise.is_base.is_(True)))
    links_result = await db.execute(
        select(UserExercise)
        .where(UserExercise.user_id == user.id)
        .options(selectinload(UserExercise.exercise))
    )
    links = {link.exercise_id: link for link in links_result.scalars().all()}

    exercises: dict[uuid.UUID, Exercise] = {ex.id: ex for ex in base_result.scalars().all()}
    for link in links.values():
        if link.exercise is not None:
            exercises.setdefault(link.exercise_id, link.exercise)

    out = []
    for ex in exercises.values():
        link = links.get(ex.id)
        if link is not None and link.hidden:
            continue
        if muscle_group and muscle_group != ALL_MUSCLES_TAB and not exercise_matches_muscle_tab(ex, muscle_group):
            continue
        out.append(_with_user_data(ex, link))
    out.sort(key=lambda e: e.name.lower())
    return out


@router.get("/all", response_model=list[ExerciseRead])
async def list_all_exercises(
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Every exercise (base and user-created), for name autocomplete."""
    result = await db.execute(select(Exercise).order_by(Exercise.name))
    return list(result.scalars().all())


@router.post("", response_model=ExerciseWithUserData, status_code=201)
async def create_exercise(
    payload: ExerciseCreate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Add an exercise to the caller's feed, reusing an existing one with the same name and muscle groups."""
    groups = [g.value for g in payload.muscle_group]
    candidates = await db.execute(
        select(Exercise).where(func.lower(Exercise.name) == payload.name.lower())
    )
    exercise = next(
        (ex for ex in candidates.scalars().all() if get_muscle_groups(ex) == groups),
        None,
    )

    if exercise is not None:
        logger.info("Linking existing exercise %s for user %s", exercise.id, user.id)
    else:
        exercise = Exercise(
            name=payload.name,
            muscle_group=groups,
            exercise_type=payload.exercise_type,
            uses_body_weight=payload.uses_body_weight,
            is_base=False,
        )
        db.add(exercise)
        await db.flush()
        logger.info("Created exercise %s for user %s", exercise.id, user.id)

    link = await _get_or_create_link(db, user.id, exercise.id)
    link.hidden = False
    await db.flush()
    await db.refresh(exercise)
    return _with_user_data(exercise, link)


@router.get("/{exercise_id}", response_model=ExerciseWithUserData)
async def get_exercise(
    exercise_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Get a single exercise with the caller's settings."""
    exercise = await _get_exercise_or_404(db, exercise_id)
    link = await _get_link(db, user.id, exercise_id)
    return _with_user_data(exercise, link)


@router.patch("/{exercise_id}", response_model=ExerciseWithUserData)
async def update_exercise_settings(
    exercise_id: uuid.UUID,
    payload: ExerciseSettingsUpdate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Update the caller's PR reps, pinned note or goals for an exercise (partial)."""
    data = payload.model_dump(exclude_unset=True)
    if not data:
        raise HTTPException(status_code=400, detail="No valid fields to update")
    exercise = await _get_exercise_or_404(db, exercise_id)
    link = await _get_or_create_link(db, user.id, exercise_id)
    for k, v in data.items():
        setattr(link, k, v)
    await db.flush()
    return _with_user_data(exercise, link)


@router.delete("/{exercise_id}", status_code=204)
async def hide_exercise(
    exercise_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Remove an exercise from the caller's feed. Sets and settings are kept."""
    await _get_exercise_or_404(db, exercise_id)
    link = await _get_or_create_link(db, user.id, exercise_id)
    link.hidden = True
    await db.flush()
    return None
