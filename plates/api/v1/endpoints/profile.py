"""Profile endpoints - current and goal body weight."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from plates.core.constants import INITIAL_WEIGH_IN_NOTE
from plates.core.security import CurrentUser, get_current_user
from plates.db.session import get_db
from plates.models.body_weight_log import BodyWeightLog
from plates.models.user_profile import UserProfile
from plates.schemas.body import MessageRead, UserProfileRead, UserProfileUpdate

logger = logging.getLogger(__name__)
router = APIRouter()


async def get_profile(db: AsyncSession, user_id: uuid.UUID) -> UserProfile | None:
    result = await db.execute(select(UserProfile).where(UserProfile.user_id == user_id))
    return result.scalar_one_or_none()


async def set_current_weight(db: AsyncSession, user_id: uuid.UUID, weight: float) -> UserProfile:
    """Create or update the profile's current_weight (called whenever a weight is logged)."""
    profile = await get_profile(db, user_id)
    if profile:
        profile.current_weight = weight
        profile.updated_at = datetime.now(timezone.utc)
    else:
        profile = UserProfile(user_id=user_id, current_weight=weight)
        db.add(profile)
    await db.flush()
    return profile


def _metadata_weight(value) -> float | None:
    """Sign-up metadata may carry weights as numbers or strings."""
    if value in (None, ""):
        return None
    try:
        weight = float(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring non-numeric sign-up weight %r", value)
        return None
    return weight if weight > 0 else None


@router.get("", response_model=UserProfileRead)
async def read_profile(
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """The caller's profile, or just their user_id if none is saved yet."""
    profile = await get_profile(db, user.id)
    if profile is None:
        return UserProfileRead(user_id=user.id)
    return profile


@router.put("", response_model=UserProfileRead)
async def upsert_profile(
    payload: UserProfileUpdate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Create or replace current/goal weight. Omitted values are cleared."""
    profile = await get_profile(db, user.id)
    if profile:
        profile.current_weight = payload.current_weight
        profile.goal_weight = payload.goal_weight
        profile.updated_at = datetime.now(timezone.utc)
    else:
        profile = UserProfile(
            user_id=user.id,
            current_weight=payload.current_weight,
            goal_weight=payload.goal_weight,
        )
        db.add(profile)
    await db.flush()
    await db.refresh(profile)
    return profile


@router.post("/init", response_model=MessageRead)
async def init_profile(
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """
    First-login setup from sign-up metadata (initial_weight, goal_weight).
    Does nothing when a profile already exists or no weights were given.
    """
    if await get_profile(db, user.id) is not None:
        return MessageRead(message="Profile already exists")

    initial_weight = _metadata_weight(user.user_metadata.get("initial_weight"))
    goal_weight = _metadata_weight(user.user_metadata.get("goal_weight"))
    if initial_weight is None and goal_weight is None:
        return MessageRead(message="No initial weight data")

    db.add(UserProfile(user_id=user.id, current_weight=initial_weight, goal_weight=goal_weight))
    if initial_weight is not None:
        db.add(
            BodyWeightLog(
                user_id=user.id,
                weight=initial_weight,
                date=datetime.now(timezone.utc),
                notes=INITIAL_WEIGH_IN_NOTE,
            )
        )
    await db.flush()
    logger.info("Initialized profile for user %s", user.id)
    return MessageRead(message="Profile initialized successfully")
