"""API v1 router aggregation."""

from fastapi import APIRouter

from plates.api.v1.endpoints import (
    exercise_stats,
    exercises,
    health,
    profile,
    sets,
    tools,
    weight_logs,
    workouts,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(exercises.router, prefix="/exercises", tags=["exercises"])
api_router.include_router(exercise_stats.router, prefix="/exercises", tags=["exercise-stats"])
api_router.include_router(sets.router, prefix="/sets", tags=["sets"])
api_router.include_router(workouts.router, prefix="/workouts", tags=["workouts"])
api_router.include_router(weight_logs.router, prefix="/weight-logs", tags=["weight-logs"])
api_router.include_router(profile.router, prefix="/profile", tags=["profile"])
api_router.include_router(tools.router, prefix="/tools", tags=["tools"])
