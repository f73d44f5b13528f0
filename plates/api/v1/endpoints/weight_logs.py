"""Body weight log endpoints."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from plates.api.v1.endpoints.profile import get_profile, set_current_weight
from plates.core.security import CurrentUser, get_current_user
from plates.db.session import get_db
from plates.models.body_weight_log import BodyWeightLog
from plates.schemas.body import (
    BodyWeightLogCreate,
    BodyWeightLogRead,
    BodyWeightLogUpdate,
    WeightSummaryRead,
)
from plates.services.weight import weight_summary

router = APIRouter()


async def _get_own_log_or_404(db: AsyncSession, log_id: uuid.UUID, user_id: uuid.UUID) -> BodyWeightLog:
    result = await db.execute(
        select(BodyWeightLog).where(BodyWeightLog.id == log_id, BodyWeightLog.user_id == user_id)
    )
    log = result.scalar_one_or_none()
    if not log:
        raise HTTPException(status_code=404, detail="Weight log not found")
    return log


@router.get("", response_model=list[BodyWeightLogRead])
async def list_weight_logs(
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Weight history, newest first."""
    result = await db.execute(
        select(BodyWeightLog)
        .where(BodyWeightLog.user_id == user.id)
        .order_by(desc(BodyWeightLog.date))
    )
    return list(result.scalars().all())


@router.get("/stats", response_model=Optional[WeightSummaryRead])
async def weight_stats(
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Starting/current/highest/lowest weight and total change; null with no logs."""
    result = await db.execute(select(BodyWeightLog).where(BodyWeightLog.user_id == user.id))
    profile = await get_profile(db, user.id)
    return weight_summary(
        result.scalars().all(),
        goal_weight=profile.goal_weight if profile else None,
    )


@router.post("", response_model=BodyWeightLogRead, status_code=201)
async def create_weight_log(
    payload: BodyWeightLogCreate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Log a weigh-in and make it the profile's current weight."""
    log = BodyWeightLog(
        user_id=user.id,
        weight=payload.weight,
        date=payload.date or datetime.now(timezone.utc),
        notes=payload.notes or None,
    )
    db.add(log)
    await db.flush()
    await set_current_weight(db, user.id, payload.weight)
    await db.refresh(log)
    return log


@router.patch("/{log_id}", response_model=BodyWeightLogRead)
async def update_weight_log(
    log_id: uuid.UUID,
    payload: BodyWeightLogUpdate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Edit a weigh-in (partial)."""
    log = await _get_own_log_or_404(db, log_id, user.id)
    data = payload.model_dump(exclude_unset=True)
    if data.get("weight", 0) is None or ("date" in data and data["date"] is None):
        raise HTTPException(status_code=400, detail="weight and date cannot be cleared")
    for k, v in data.items():
        setattr(log, k, v)
    await db.flush()
    await db.refresh(log)
    return log


@router.delete("/{log_id}", status_code=204)
async def delete_weight_log(
    log_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Delete a weigh-in."""
    log = await _get_own_log_or_404(db, log_id, user.id)
    await db.delete(log)
    return None
