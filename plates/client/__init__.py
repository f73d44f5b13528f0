"""Client-side helpers for consumers of the Plates API."""

from plates.client.data_cache import WorkoutDataClient

__all__ = ["WorkoutDataClient"]
