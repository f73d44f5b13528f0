"""Conversions between colon time strings and decimal minutes (cardio durations)."""

from __future__ import annotations

import math
import re

from plates.core.constants import MAX_DURATION_MINUTES

_NON_TIME_CHARS = re.compile(r"[^\d:]")


def _round_half_up(value: float, digits: int = 0) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def parse_time_to_minutes(time_string: str | None) -> float | None:
    """
    Parse "HH:MM:SS", "MM:SS", "M:SS" or "SS" into decimal minutes (2 places).
    Returns None for anything unparseable or out of range, e.g. "99:99".
    """
    if not time_string or not isinstance(time_string, str):
        return None
    cleaned = _NON_TIME_CHARS.sub("", time_string.strip())
    if not cleaned:
        return None

    try:
        parts = [int(p) for p in cleaned.split(":")]
    except ValueError:
        return None

    hours = minutes = seconds = 0
    if len(parts) == 3:
        hours, minutes, seconds = parts
    elif len(parts) == 2:
        minutes, seconds = parts
    elif len(parts) == 1:
        seconds = parts[0]
    else:
        return None

    if not 0 <= seconds < 60:
        return None
    if minutes < 0 or (len(parts) == 3 and minutes >= 60):
        return None
    if hours < 0:
        return None

    total = hours * 60 + minutes + seconds / 60
    return _round_half_up(total, 2)


def format_minutes_to_time(minutes: float | None) -> str:
    """Decimal minutes to "H:MM:SS" (an hour or more) or "M:SS"."""
    if not isinstance(minutes, (int, float)) or isinstance(minutes, bool) or math.isnan(minutes) or minutes < 0:
        return "0:00"
    total_seconds = int(_round_half_up(minutes * 60))
    hours, rest = divmod(total_seconds, 3600)
    mins, secs = divmod(rest, 60)
    if hours > 0:
        return f"{hours}:{mins:02d}:{secs:02d}"
    return f"{mins}:{secs:02d}"


def validate_time_string(time_string: str | None) -> str | None:
    """Error message for an unusable duration string, or None when valid."""
    if not time_string or not time_string.strip():
        return "Time is required"
    parsed = parse_time_to_minutes(time_string)
    if parsed is None:
        return "Invalid time format. Use MM:SS or HH:MM:SS"
    if parsed <= 0:
        return "Time must be greater than 0"
    if parsed > MAX_DURATION_MINUTES:
        return "Time cannot exceed 24 hours"
    return None
