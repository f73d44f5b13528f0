"""Exercise statistics endpoint - derived records for the caller's sets of one exercise."""

from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from plates.core.constants import DEFAULT_PR_REPS
from plates.core.enums import ExerciseType
from plates.core.security import CurrentUser, get_current_user
from plates.db.session import get_db
from plates.models.exercise import Exercise, UserExercise
from plates.models.workout_set import WorkoutSet
from plates.schemas.workout_set import WorkoutSetRead
from plates.services import records
from plates.services.strength import daily_strength_scores
from plates.services.time_format import format_minutes_to_time

logger = logging.getLogger(__name__)
router = APIRouter()


def _set_or_none(set_: WorkoutSet | None) -> WorkoutSetRead | None:
    return WorkoutSetRead.model_validate(set_) if set_ is not None else None


def _strength_stats(sets: list[WorkoutSet], pr_reps: int) -> dict:
    return {
        "pr_reps": pr_reps,
        "current_max": records.current_max(sets, pr_reps),
        "personal_records": records.personal_records(sets),
        "top_set_last_session": _set_or_none(records.top_set_last_session(sets)),
        "strength_scores": daily_strength_scores(sets),
    }


def _cardio_stats(sets: list[WorkoutSet]) -> dict:
    best = records.best_pace_set(sets)
    best_pace = None
    if best is not None:
        best_pace = {
            "set": _set_or_none(best),
            "pace": round(records.pace(best), 2),
            "time": format_minutes_to_time(best.duration),
        }
    return {
        "best_distance": records.best_distance(sets),
        "best_pace": best_pace,
        "cardio_records": [
            {**pr, "time": format_minutes_to_time(pr["best_time"]), "best_pace": round(pr["best_pace"], 2)}
            for pr in records.cardio_records(sets)
        ],
        "pace_history": records.pace_history(sets),
    }


@router.get("/{exercise_id}/stats")
async def exercise_stats(
    exercise_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """
    Derived stats for one exercise from the caller's sets:
    - total_sets, last_set, last_set_excluding_today
    - strength: current max at the preferred PR reps, PRs for 1/3/5/8/10 reps,
      top set of the last session, best strength score per day
    - cardio: best distance, best pace, records for standard distances, pace history
    """
    ex_result = await db.execute(select(Exercise).where(Exercise.id == exercise_id))
    exercise = ex_result.scalar_one_or_none()
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")

    link_result = await db.execute(
        select(UserExercise).where(
            UserExercise.user_id == user.id,
            UserExercise.exercise_id == exercise_id,
        )
    )
    link = link_result.scalar_one_or_none()

    sets_result = await db.execute(
        select(WorkoutSet)
        .where(WorkoutSet.user_id == user.id, WorkoutSet.exercise_id == exercise_id)
        .order_by(WorkoutSet.date.desc())
    )
    sets = list(sets_result.scalars().all())

    payload = {
        "exercise_id": exercise_id,
        "exercise_type": exercise.exercise_type,
        "uses_body_weight": exercise.uses_body_weight,
        "total_sets": len(sets),
        "last_set": _set_or_none(records.last_set(sets)),
        "last_set_excluding_today": _set_or_none(records.last_set_excluding_today(sets)),
    }
    if exercise.exercise_type == ExerciseType.CARDIO:
        payload.update(_cardio_stats(sets))
    else:
        pr_reps = link.user_pr_reps if link and link.user_pr_reps else DEFAULT_PR_REPS
        payload.update(_strength_stats(sets, pr_reps))
    return payload
