"""Liveness and readiness probes."""

import logging
import os

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from plates.core.config import Settings, get_settings
from plates.db.session import get_db
from plates.models.exercise import Exercise

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("")
async def health(settings: Settings = Depends(get_settings)):
    """Liveness. Includes built_at when BACKEND_BUILT_AT is set."""
    payload: dict = {"status": "ok", "service": settings.app_name, "environment": settings.environment}
    built_at = os.environ.get("BACKEND_BUILT_AT")
    if built_at:
        payload["built_at"] = built_at
    return payload


@router.get("/ready")
async def readiness(db: AsyncSession = Depends(get_db)):
    """Database reachable and the shared exercise catalogue seeded."""
    try:
        result = await db.execute(
            select(func.count()).select_from(Exercise).where(Exercise.is_base.is_(True))
        )
    except SQLAlchemyError as e:
        logger.warning("Readiness check failed: %s", e)
        return JSONResponse(status_code=500, content={"status": "error", "database": "unavailable"})
    base_exercises = result.scalar_one()
    if not base_exercises:
        logger.warning("Readiness: no base exercises; run scripts/seed_base_exercises.py")
    return {"status": "ok", "database": "connected", "base_exercises": base_exercises}
