"""
Pytest fixtures for the profile directory tests.

Uses an in-memory SQLite database per test for the SQL store.
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from profile_service.db import Base, db
from profile_service.entities import Profile, PutProfileRequest
from profile_service.models import ProfileRecord  # noqa: F401  registers the table
from profile_service.repositories import InMemoryProfileStore


@pytest.fixture(scope="function")
def test_db():
    """Create a fresh in-memory database for each test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(
        bind=engine, autoflush=False, autocommit=False, expire_on_commit=False
    )

    yield TestingSessionLocal, engine

    engine.dispose()


@pytest.fixture
def test_session(test_db):
    """Get a test session from the test database."""
    TestingSessionLocal, _ = test_db
    session = TestingSessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@pytest.fixture
def reset_db_manager():
    """Leave the global DatabaseManager uninitialized before and after a test."""
    db.dispose()
    yield db
    db.dispose()


@pytest.fixture
def memory_store():
    return InMemoryProfileStore()


@pytest.fixture
def sample_profile():
    """The profile used throughout the controller scenarios."""
    return Profile(username="foobar", first_name="Foo", last_name="Bar")


@pytest.fixture
def sample_put_request():
    return PutProfileRequest(first_name="Foo1", last_name="Bar1")
