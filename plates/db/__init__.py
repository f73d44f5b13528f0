"""Database package: engine, session, base."""

from plates.db.base import Base, prepare_database
from plates.db.session import async_session_maker, get_db

__all__ = ["Base", "async_session_maker", "get_db", "prepare_database"]
