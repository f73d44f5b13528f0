"""Muscle group helpers for exercise filtering."""

from __future__ import annotations

from typing import Protocol

from plates.core.enums import ALL_MUSCLES_TAB, MuscleGroup

_ARM_GROUPS = {MuscleGroup.ARMS.value, MuscleGroup.BICEPS.value, MuscleGroup.TRICEPS.value}


class HasMuscleGroup(Protocol):
    muscle_group: list[str] | str


def get_muscle_groups(exercise: HasMuscleGroup) -> list[str]:
    """Muscle groups as a list; legacy single-string values become a one-item list."""
    groups = exercise.muscle_group
    if isinstance(groups, str):
        return [groups]
    return [g.value if isinstance(g, MuscleGroup) else g for g in groups or []]


def get_primary_muscle_group(exercise: HasMuscleGroup) -> str | None:
    groups = get_muscle_groups(exercise)
    return groups[0] if groups else None


def exercise_matches_muscle_tab(exercise: HasMuscleGroup, tab: str) -> bool:
    """True when the exercise belongs on the tab; the Arms tab also covers Biceps and Triceps."""
    if tab == ALL_MUSCLES_TAB:
        return True
    groups = get_muscle_groups(exercise)
    if tab == MuscleGroup.ARMS.value:
        return any(g in _ARM_GROUPS for g in groups)
    return tab in groups
