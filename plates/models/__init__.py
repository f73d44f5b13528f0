"""ORM models - import all so Base.metadata is complete."""

from plates.models.body_weight_log import BodyWeightLog
from plates.models.exercise import Exercise, UserExercise
from plates.models.user_profile import UserProfile
from plates.models.workout import Workout, WorkoutExercise
from plates.models.workout_set import WorkoutSet

__all__ = [
    "BodyWeightLog",
    "Exercise",
    "UserExercise",
    "UserProfile",
    "Workout",
    "WorkoutExercise",
    "WorkoutSet",
]
