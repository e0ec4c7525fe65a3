"""
ProfileStore implementations.

Stores provide lookup and upsert keyed by username; the orchestrator
decides what those results mean.

Usage:
    from profile_service.repositories import SqlProfileStore
    from profile_service.db import db

    with db.session() as session:
        store = SqlProfileStore(session)
        profile = store.get("foobar")
"""

from .base import ProfileStore
from .memory_store import InMemoryProfileStore
from .sql_store import SqlProfileStore

__all__ = [
    "ProfileStore",
    "InMemoryProfileStore",
    "SqlProfileStore",
]
