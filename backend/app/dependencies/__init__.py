"""
FastAPI dependency injection module.

Provides centralized dependencies for:
- The configured ProfileStore (SQL session or process-wide memory store)
- The ProfileOrchestrator built on top of it
"""

from collections.abc import Generator
from contextlib import contextmanager
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from profile_service.config import Settings, get_settings
from profile_service.db import get_db
from profile_service.repositories import InMemoryProfileStore, ProfileStore, SqlProfileStore
from profile_service.services import ProfileOrchestrator

# =============================================================================
# Store Dependencies
# =============================================================================


@lru_cache(maxsize=1)
def get_memory_store() -> InMemoryProfileStore:
    """Process-wide in-memory store used when STORE_BACKEND=memory."""
    return InMemoryProfileStore()


def get_sql_profile_store(session: Session = Depends(get_db)) -> SqlProfileStore:
    """SqlProfileStore over the request's database session."""
    return SqlProfileStore(session)


def get_profile_store(
    settings: Settings = Depends(get_settings),
) -> Generator[ProfileStore, None, None]:
    """
    Get the ProfileStore selected by STORE_BACKEND.

    The SQL branch opens its session through get_db only when selected, so
    the memory backend never needs an initialized database.
    """
    if settings.store_backend == "memory":
        yield get_memory_store()
        return

    with contextmanager(get_db)() as session:
        yield get_sql_profile_store(session)


# =============================================================================
# Service Dependencies
# =============================================================================


def get_profile_orchestrator(
    store: ProfileStore = Depends(get_profile_store),
) -> ProfileOrchestrator:
    """Get ProfileOrchestrator instance with injected store."""
    return ProfileOrchestrator(store)


__all__ = [
    "get_memory_store",
    "get_sql_profile_store",
    "get_profile_store",
    "get_profile_orchestrator",
]
