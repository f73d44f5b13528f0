"""Body weight summary for the weight page header."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Protocol

from plates.services.strength import as_utc


class WeightLogLike(Protocol):
    weight: float
    date: datetime


def weight_summary(logs: Iterable[WeightLogLike], goal_weight: float | None = None) -> dict | None:
    """current (latest), starting (oldest), highest, lowest and change; None without logs."""
    ordered = sorted(logs, key=lambda log: as_utc(log.date))
    if not ordered:
        return None
    weights = [float(log.weight) for log in ordered]
    current = weights[-1]
    starting = weights[0]
    return {
        "current": current,
        "starting": starting,
        "highest": max(weights),
        "lowest": min(weights),
        "change": round(current - starting, 2),
        "goal_weight": goal_weight,
        "goal_reached": goal_weight is not None and current == goal_weight,
    }
