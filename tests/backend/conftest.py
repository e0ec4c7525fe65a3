"""Fixtures for exercising the FastAPI app with substitute stores."""

from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from backend.app.dependencies import get_profile_store
from backend.app.main import create_app
from profile_service.config import Settings
from profile_service.repositories import ProfileStore, SqlProfileStore


@pytest.fixture
def memory_settings() -> Settings:
    return Settings(_env_file=None, STORE_BACKEND="memory")


@pytest.fixture
def test_app(memory_settings):
    return create_app(memory_settings)


@pytest.fixture
def mock_store():
    """Store double; every lookup misses by default."""
    store = MagicMock(spec=ProfileStore)
    store.supports_atomic_insert = False
    store.get.return_value = None
    return store


@pytest.fixture
def mock_client(test_app, mock_store) -> Iterator[TestClient]:
    test_app.dependency_overrides[get_profile_store] = lambda: mock_store
    with TestClient(test_app) as client:
        yield client


@pytest.fixture
def memory_client(test_app, memory_store) -> Iterator[tuple[TestClient, ProfileStore]]:
    test_app.dependency_overrides[get_profile_store] = lambda: memory_store
    with TestClient(test_app) as client:
        yield client, memory_store


@pytest.fixture
def sql_client(test_app, test_db) -> Iterator[TestClient]:
    TestingSessionLocal, _ = test_db

    def override_get_profile_store() -> Iterator[ProfileStore]:
        session = TestingSessionLocal()
        try:
            yield SqlProfileStore(session)
        finally:
            session.close()

    test_app.dependency_overrides[get_profile_store] = override_get_profile_store
    with TestClient(test_app) as client:
        yield client
