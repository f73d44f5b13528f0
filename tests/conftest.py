"""Pytest configuration and fixtures."""

from __future__ import annotations

import os
import uuid
from datetime import datetime, timezone
from typing import AsyncIterator, Callable

# Settings are read at import time; point them at SQLite and a known token secret first.
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite+aiosqlite://")
os.environ.setdefault("AUTH_JWT_SECRET", "test-secret")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from plates.core.enums import ExerciseType
from plates.core.security import CurrentUser, get_current_user
from plates.db.base import prepare_database
from plates.db.session import get_db
from plates.main import app
from plates.models import Exercise

USER_ID = uuid.UUID("00000000-0000-0000-0000-0000000000a1")
OTHER_USER_ID = uuid.UUID("00000000-0000-0000-0000-0000000000b2")


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio event loop for pytest-anyio tests."""
    return "asyncio"


@pytest.fixture
async def session_maker(anyio_backend) -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await prepare_database(engine)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    await engine.dispose()


@pytest.fixture
def login() -> Callable[[uuid.UUID], None]:
    """Switch the authenticated caller for subsequent requests."""

    def _login(user_id: uuid.UUID, user_metadata: dict | None = None) -> None:
        user = CurrentUser(id=user_id, user_metadata=user_metadata or {})
        app.dependency_overrides[get_current_user] = lambda: user

    return _login


@pytest.fixture
async def client(session_maker, login) -> AsyncIterator[AsyncClient]:
    """API client logged in as USER_ID, backed by the per-test database."""

    async def _get_test_db() -> AsyncIterator[AsyncSession]:
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _get_test_db
    login(USER_ID)
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test/api/v1"
        ) as c:
            yield c
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
async def base_exercises(session_maker) -> dict[str, Exercise]:
    """A few shared exercises visible to every user."""
    rows = [
        Exercise(name="Bench Press", muscle_group=["Chest", "Triceps"], is_base=True),
        Exercise(name="Barbell Curl", muscle_group=["Biceps"], is_base=True),
        Exercise(name="Squat", muscle_group=["Legs"], is_base=True),
        Exercise(name="Pull-ups", muscle_group=["Back", "Biceps"], is_base=True, uses_body_weight=True),
        Exercise(
            name="Running",
            muscle_group=["Cardio"],
            exercise_type=ExerciseType.CARDIO,
            is_base=True,
        ),
    ]
    async with session_maker() as session:
        session.add_all(rows)
        await session.commit()
    return {ex.name: ex for ex in rows}


def utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)
