"""Calculator tools: duration parsing and strength score (pure logic, no DB)."""

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from plates.services.strength import calculate_strength_score
from plates.services.time_format import (
    format_minutes_to_time,
    parse_time_to_minutes,
    validate_time_string,
)

router = APIRouter()


class ParsedTimeResponse(BaseModel):
    minutes: float
    formatted: str


class StrengthScoreResponse(BaseModel):
    weight: float
    reps: int
    score: float | None


@router.get("/parse-time", response_model=ParsedTimeResponse)
async def parse_time(value: str = Query(..., description="MM:SS or HH:MM:SS")):
    """Decimal minutes and the normalized display string for a duration."""
    error = validate_time_string(value)
    if error:
        raise HTTPException(status_code=400, detail=error)
    minutes = parse_time_to_minutes(value)
    return ParsedTimeResponse(minutes=minutes, formatted=format_minutes_to_time(minutes))


@router.get("/strength-score", response_model=StrengthScoreResponse)
async def strength_score(
    weight: float = Query(..., ge=0),
    reps: int = Query(..., ge=0),
):
    """Estimated one-rep max for weight x reps (null when either is zero)."""
    score = calculate_strength_score(weight, reps)
    return StrengthScoreResponse(
        weight=weight,
        reps=reps,
        score=round(score, 1) if score is not None else None,
    )
