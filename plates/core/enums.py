"""Shared enums for models and API."""

from enum import Enum


class ExerciseType(str, Enum):
    """How an exercise is logged."""

    STRENGTH = "strength"  # weight & reps
    CARDIO = "cardio"  # distance & duration


class MuscleGroup(str, Enum):
    """Muscle groups an exercise can target."""

    CHEST = "Chest"
    BACK = "Back"
    LEGS = "Legs"
    SHOULDERS = "Shoulders"
    ARMS = "Arms"
    BICEPS = "Biceps"
    TRICEPS = "Triceps"
    CORE = "Core"
    CARDIO = "Cardio"


# Tab filter value that matches every exercise
ALL_MUSCLES_TAB = "All"
