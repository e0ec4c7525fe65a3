"""Tests for the database manager behind the SQL profile store."""

import pytest
from sqlalchemy import inspect

from profile_service.entities import Profile
from profile_service.models import ProfileRecord
from profile_service.repositories import SqlProfileStore


def test_initialize_creates_profiles_table(reset_db_manager):
    reset_db_manager.initialize("sqlite://")

    assert "profiles" in inspect(reset_db_manager.engine).get_table_names()


def test_initialize_is_idempotent(reset_db_manager):
    reset_db_manager.initialize("sqlite://")
    engine = reset_db_manager.engine

    reset_db_manager.initialize("sqlite:///elsewhere.db")

    assert reset_db_manager.engine is engine


def test_session_requires_initialize(reset_db_manager):
    with pytest.raises(RuntimeError):
        with reset_db_manager.session():
            pass


def test_session_discards_uncommitted_changes(reset_db_manager):
    reset_db_manager.initialize("sqlite://")

    with reset_db_manager.session() as session:
        session.add(ProfileRecord(username="foobar", first_name="Foo", last_name="Bar"))

    with reset_db_manager.session() as session:
        assert session.get(ProfileRecord, "foobar") is None


def test_store_commits_survive_session_exit(reset_db_manager):
    reset_db_manager.initialize("sqlite://")

    with reset_db_manager.session() as session:
        SqlProfileStore(session).upsert(Profile("foobar", "Foo", "Bar"))

    with reset_db_manager.session() as session:
        assert SqlProfileStore(session).get("foobar") == Profile("foobar", "Foo", "Bar")


def test_ping(reset_db_manager):
    assert reset_db_manager.ping() == "database not initialized"

    reset_db_manager.initialize("sqlite://")

    assert reset_db_manager.ping() is None


def test_dispose_returns_to_uninitialized(reset_db_manager):
    reset_db_manager.initialize("sqlite://")

    reset_db_manager.dispose()

    assert reset_db_manager.engine is None
    assert reset_db_manager.ping() == "database not initialized"
