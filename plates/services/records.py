"""Personal records and session lookups over in-memory set lists.

All functions are pure: they take the sets already fetched for one exercise
and return derived values. Inputs may be ORM rows or API schemas; only the
weight/reps/distance/duration/date attributes are read.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Iterable, Protocol, Sequence, TypeVar

from plates.core.constants import (
    CARDIO_DISTANCE_TOLERANCE,
    CARDIO_PR_DISTANCES,
    DISTANCE_LABELS,
    PR_REP_THRESHOLDS,
)
from plates.services.strength import as_utc, day_of


class SetLike(Protocol):
    weight: float | None
    reps: int | None
    distance: float | None
    duration: float | None
    date: datetime


S = TypeVar("S", bound=SetLike)


def _newest_first(sets: Iterable[S]) -> list[S]:
    return sorted(sets, key=lambda s: as_utc(s.date), reverse=True)


def _today() -> date:
    return datetime.now(timezone.utc).date()


# ---- Strength ----


def personal_records(sets: Sequence[SetLike], thresholds: Iterable[int] = PR_REP_THRESHOLDS) -> list[dict]:
    """
    For each rep threshold R, the heaviest set with reps >= R and its date.
    Thresholds with no qualifying set are left out. Ties keep the first set in input order.
    """
    records = []
    for reps in thresholds:
        best = None
        for s in sets:
            if s.reps is None or s.weight is None or s.reps < reps:
                continue
            if best is None or s.weight > best.weight:
                best = s
        if best is not None:
            records.append({"reps": reps, "weight": float(best.weight), "date": best.date})
    return records


def current_max(sets: Iterable[SetLike], min_reps: int) -> float | None:
    """Heaviest weight among sets with at least min_reps reps."""
    weights = [
        float(s.weight) for s in sets
        if s.reps is not None and s.weight is not None and s.reps >= min_reps
    ]
    return max(weights) if weights else None


def last_set(sets: Iterable[S]) -> S | None:
    ordered = _newest_first(sets)
    return ordered[0] if ordered else None


def last_set_excluding_today(sets: Iterable[S], today: date | None = None) -> S | None:
    """Most recent set logged before today (the "last session" shown on cards)."""
    today = today or _today()
    previous = [s for s in _newest_first(sets) if day_of(s.date) < today]
    return previous[0] if previous else None


def top_set_last_session(sets: Iterable[S], today: date | None = None) -> S | None:
    """Heaviest set from the most recent day before today."""
    today = today or _today()
    previous = [s for s in _newest_first(sets) if day_of(s.date) < today]
    if not previous:
        return None
    session_day = day_of(previous[0].date)
    session = [s for s in previous if day_of(s.date) == session_day]
    top = session[0]
    for s in session[1:]:
        if (s.weight or 0) > (top.weight or 0):
            top = s
    return top


# ---- Cardio ----


def pace(set_: SetLike) -> float | None:
    """Minutes per mile, or None without a positive distance and a duration."""
    if not set_.distance or not set_.duration or set_.distance <= 0:
        return None
    return set_.duration / set_.distance


def best_distance(sets: Iterable[SetLike]) -> float | None:
    distances = [float(s.distance) for s in sets if s.distance is not None and s.distance > 0]
    return max(distances) if distances else None


def distance_label(distance: float) -> str:
    label = DISTANCE_LABELS.get(distance)
    if label:
        return label
    return f"{distance:g} mi"


def cardio_records(sets: Sequence[SetLike], distances: Iterable[float] = CARDIO_PR_DISTANCES) -> list[dict]:
    """Fastest session near each standard distance (within the tolerance), with its pace."""
    records = []
    for target in distances:
        relevant = [
            s for s in sets
            if s.distance and abs(s.distance - target) <= CARDIO_DISTANCE_TOLERANCE + 1e-9
        ]
        if not relevant:
            continue
        best = relevant[0]
        for s in relevant[1:]:
            if (s.duration or float("inf")) < (best.duration or float("inf")):
                best = s
        if best.distance and best.duration:
            records.append({
                "distance": float(best.distance),
                "label": distance_label(target),
                "best_time": float(best.duration),
                "best_pace": best.duration / best.distance,
                "date": best.date,
            })
    return records


def best_pace_set(sets: Iterable[S]) -> S | None:
    best = None
    best_pace = None
    for s in sets:
        p = pace(s)
        if p is None:
            continue
        if best_pace is None or p < best_pace:
            best, best_pace = s, p
    return best


def pace_history(sets: Iterable[SetLike]) -> list[dict]:
    """Pace per session, oldest first, rounded to 2 decimals."""
    points = []
    for s in sorted(sets, key=lambda x: as_utc(x.date)):
        p = pace(s)
        if p is None:
            continue
        points.append({
            "date": s.date,
            "pace": round(p, 2),
            "distance": float(s.distance),
            "duration": float(s.duration),
        })
    return points
