"""Body weight Pydantic schemas - UserProfile and BodyWeightLog."""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


# ── UserProfile ──────────────────────────────────────────────────────────

class UserProfileUpdate(BaseModel):
    current_weight: Optional[float] = Field(None, gt=0, lt=1500)
    goal_weight: Optional[float] = Field(None, gt=0, lt=1500)


class UserProfileRead(BaseModel):
    """Profile row, or just user_id for users who have not saved one yet."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[UUID] = None
    user_id: UUID
    current_weight: Optional[float] = None
    goal_weight: Optional[float] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class MessageRead(BaseModel):
    message: str


# ── BodyWeightLog ────────────────────────────────────────────────────────

class BodyWeightLogCreate(BaseModel):
    weight: float = Field(..., gt=0, lt=1500, description="Body weight in lbs")
    date: Optional[datetime] = Field(None, description="Defaults to now")
    notes: Optional[str] = Field(None, max_length=1000)


class BodyWeightLogUpdate(BaseModel):
    weight: Optional[float] = Field(None, gt=0, lt=1500)
    date: Optional[datetime] = None
    notes: Optional[str] = Field(None, max_length=1000)


class BodyWeightLogRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    weight: float
    date: datetime
    notes: Optional[str] = None
    created_at: Optional[datetime] = None


class WeightSummaryRead(BaseModel):
    current: float
    starting: float
    highest: float
    lowest: float
    change: float
    goal_weight: Optional[float] = None
    goal_reached: bool = False
