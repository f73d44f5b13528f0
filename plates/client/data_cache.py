"""Client-side cache of the caller's exercises and sets.

Pages share one WorkoutDataClient. It refetches only when its data is older
than the stale threshold (or when forced), and never runs two full fetches at
once. Derived values (PRs, last session, current max) are computed from the
cached lists.
"""

from __future__ import annotations

import asyncio
import logging
import time
import uuid
from datetime import date
from typing import Callable

import httpx

from plates.core.constants import PR_REP_THRESHOLDS, STALE_THRESHOLD_SECONDS
from plates.schemas.exercise import ExerciseWithUserData
from plates.schemas.workout_set import WorkoutSetRead
from plates.services import records

logger = logging.getLogger(__name__)


class WorkoutDataClient:
    """In-memory copy of /exercises and /sets/bulk with a fixed freshness window."""

    def __init__(
        self,
        http: httpx.AsyncClient,
        stale_after: float = STALE_THRESHOLD_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.http = http
        self.stale_after = stale_after
        self._clock = clock
        self.exercises: list[ExerciseWithUserData] = []
        self.sets: dict[str, list[WorkoutSetRead]] = {}
        self.last_fetched: float | None = None
        self.loading = False
        self._fetch_in_progress = False

    def is_fresh(self) -> bool:
        return self.last_fetched is not None and self._clock() - self.last_fetched < self.stale_after

    async def fetch_all_data(self, force: bool = False) -> bool:
        """
        Refresh exercises and sets in parallel.
        Returns False when skipped (fresh cache or a fetch already running).
        """
        if not force and self.is_fresh():
            return False
        if self._fetch_in_progress:
            return False
        self._fetch_in_progress = True
        self.loading = True
        try:
            # Both requests always finish before the in-flight flag is cleared
            exercises_response, sets_response = await asyncio.gather(
                self.http.get("/exercises"),
                self.http.get("/sets/bulk"),
                return_exceptions=True,
            )
            for result in (exercises_response, sets_response):
                if isinstance(result, BaseException) and not isinstance(result, httpx.HTTPError):
                    raise result
            transport_errors = [r for r in (exercises_response, sets_response) if isinstance(r, httpx.HTTPError)]
            for e in transport_errors:
                logger.error("Error fetching workout data: %s", e)

            if self._ok(exercises_response, "exercises"):
                self.exercises = [ExerciseWithUserData.model_validate(e) for e in exercises_response.json()]
            if self._ok(sets_response, "sets"):
                self.sets = {
                    exercise_id: [WorkoutSetRead.model_validate(s) for s in items]
                    for exercise_id, items in sets_response.json().items()
                }
            if not transport_errors:
                self.last_fetched = self._clock()
        finally:
            self.loading = False
            self._fetch_in_progress = False
        return True

    @staticmethod
    def _ok(result: httpx.Response | httpx.HTTPError, what: str) -> bool:
        if isinstance(result, httpx.HTTPError):
            return False
        if not result.is_success:
            logger.warning("Fetching %s failed with status %s", what, result.status_code)
            return False
        return True

    async def refresh_exercise_sets(self, exercise_id: uuid.UUID | str) -> None:
        """Refetch one exercise's sets (after logging a set) and extend the cache window."""
        key = str(exercise_id)
        try:
            response = await self.http.get("/sets", params={"exercise_id": key})
        except httpx.HTTPError as e:
            logger.error("Error refreshing sets for %s: %s", key, e)
            return
        if response.is_success:
            self.sets[key] = [WorkoutSetRead.model_validate(s) for s in response.json()]
            self.last_fetched = self._clock()

    def add_exercise(self, exercise: ExerciseWithUserData) -> None:
        self.exercises.append(exercise)
        self.sets[str(exercise.id)] = []

    # ---- Lookups over cached data ----

    def get_exercise_by_id(self, exercise_id: uuid.UUID | str) -> ExerciseWithUserData | None:
        key = str(exercise_id)
        return next((e for e in self.exercises if str(e.id) == key), None)

    def get_exercise_sets(self, exercise_id: uuid.UUID | str) -> list[WorkoutSetRead]:
        return self.sets.get(str(exercise_id), [])

    def get_last_set(self, exercise_id: uuid.UUID | str) -> WorkoutSetRead | None:
        return records.last_set(self.get_exercise_sets(exercise_id))

    def get_last_set_excluding_today(
        self, exercise_id: uuid.UUID | str, today: date | None = None
    ) -> WorkoutSetRead | None:
        return records.last_set_excluding_today(self.get_exercise_sets(exercise_id), today)

    def get_top_set_last_session(
        self, exercise_id: uuid.UUID | str, today: date | None = None
    ) -> WorkoutSetRead | None:
        return records.top_set_last_session(self.get_exercise_sets(exercise_id), today)

    def get_current_max(self, exercise_id: uuid.UUID | str, min_reps: int) -> float | None:
        return records.current_max(self.get_exercise_sets(exercise_id), min_reps)

    def get_best_distance(self, exercise_id: uuid.UUID | str) -> float | None:
        return records.best_distance(self.get_exercise_sets(exercise_id))

    def get_personal_records(self, exercise_id: uuid.UUID | str) -> list[dict]:
        return records.personal_records(self.get_exercise_sets(exercise_id), PR_REP_THRESHOLDS)
