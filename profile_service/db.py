"""
Database access for the SQL profile store.

One process-wide engine bound to DATABASE_URL. SqlProfileStore commits its
own writes, so sessions handed out here never commit: on exit anything the
store left uncommitted is rolled back and the session is closed.

Usage:
    from profile_service.db import db

    db.initialize("sqlite:///profiles.db")
    with db.session() as session:
        store = SqlProfileStore(session)
"""

from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import get_settings


class Base(DeclarativeBase):
    """Declarative base for the profiles table."""


def _is_in_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:")


def build_engine(url: str) -> Engine:
    """
    Create the engine for a database URL.

    An in-memory SQLite database only exists per connection, so it is pinned
    to a single shared connection. Every SQLite engine is opened for use
    across request threads.
    """
    settings = get_settings()
    options: dict = {"echo": settings.debug, "pool_pre_ping": settings.db_pool_pre_ping}
    if url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False}
        if _is_in_memory_sqlite(url):
            options["poolclass"] = StaticPool
    return create_engine(url, **options)


class DatabaseManager:
    """Holds the engine and session factory once initialize() has run."""

    def __init__(self):
        self.engine: Engine | None = None
        self._sessions: sessionmaker[Session] | None = None

    def initialize(self, database_url: str | None = None) -> None:
        """
        Connect to the database and create the profiles table if missing.

        Safe to call again; later calls are ignored until dispose().
        Connection and DDL failures propagate as SQLAlchemyError, and the
        manager stays uninitialized.
        """
        if self.engine is not None:
            return

        # Registers ProfileRecord on Base.metadata
        from .models import ProfileRecord

        engine = build_engine(database_url or get_settings().database_url)
        try:
            Base.metadata.create_all(bind=engine, tables=[ProfileRecord.__table__])
        except Exception:
            engine.dispose()
            raise

        self.engine = engine
        self._sessions = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Session for one unit of work; the store is responsible for commits."""
        if self._sessions is None:
            raise RuntimeError("Database not initialized. Call db.initialize() first.")
        session = self._sessions()
        try:
            yield session
        finally:
            # No-op when the store already committed or rolled back
            session.rollback()
            session.close()

    def ping(self) -> str | None:
        """Run SELECT 1. Returns None when reachable, else the reason it is not."""
        if self.engine is None:
            return "database not initialized"
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except Exception as e:
            return str(e)
        return None

    def dispose(self) -> None:
        """Close pooled connections and return to the uninitialized state."""
        if self.engine is not None:
            self.engine.dispose()
        self.engine = None
        self._sessions = None


db = DatabaseManager()


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency: a session scoped to one request."""
    with db.session() as session:
        yield session


__all__ = ["Base", "DatabaseManager", "build_engine", "db", "get_db"]
