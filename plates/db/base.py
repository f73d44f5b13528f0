"""SQLAlchemy declarative base and table setup."""

from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base for all ORM models."""

    pass


async def prepare_database(engine: AsyncEngine) -> None:
    """Create any missing tables (no migrations; existing tables are left as they are)."""
    # Model modules register their tables on import
    import plates.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_database(engine: AsyncEngine) -> None:
    import plates.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
