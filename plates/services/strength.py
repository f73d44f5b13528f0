"""Strength score: estimated one-rep max, comparable across rep ranges."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Iterable, Protocol


class StrengthSetLike(Protocol):
    weight: float | None
    reps: int | None
    date: datetime


@dataclass(frozen=True)
class StrengthScore:
    score: float
    weight: float
    reps: int


def calculate_strength_score(weight: float | None, reps: int | None) -> float | None:
    """
    Estimated 1RM for a single set.
    Brzycki for 1-10 reps, Epley for 11+; None when weight or reps is missing or not positive.
    """
    if weight is None or reps is None or weight <= 0 or reps <= 0:
        return None
    if reps == 1:
        return float(weight)
    if reps <= 10:
        # Brzycki
        return weight * (36 / (37 - reps))
    # Epley
    return weight * (1 + reps / 30)


def set_strength_score(set_: StrengthSetLike) -> StrengthScore | None:
    """Score rounded to one decimal, with the weight and reps that produced it."""
    score = calculate_strength_score(set_.weight, set_.reps)
    if score is None:
        return None
    return StrengthScore(score=round(score, 1), weight=float(set_.weight), reps=int(set_.reps))


def as_utc(moment: datetime) -> datetime:
    """Naive timestamps (SQLite rows) are taken as UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def day_of(moment: datetime) -> date:
    """Calendar day in UTC."""
    return as_utc(moment).date()


def daily_strength_scores(sets: Iterable[StrengthSetLike]) -> list[dict]:
    """Best score per calendar day, oldest first (chart series)."""
    best: dict[date, StrengthScore] = {}
    for s in sets:
        scored = set_strength_score(s)
        if scored is None:
            continue
        d = day_of(s.date)
        if d not in best or scored.score > best[d].score:
            best[d] = scored
    return [
        {"date": d.isoformat(), "score": sc.score, "weight": sc.weight, "reps": sc.reps}
        for d, sc in sorted(best.items())
    ]
