"""Tests for the profile-service CLI against a temporary SQLite database."""

import json

import pytest

from profile_service.cli import EXIT_OK, EXIT_REJECTED, EXIT_STORAGE_FAILURE, _report, main
from profile_service.errors import StorageError
from profile_service.outcomes import StorageFailure


@pytest.fixture
def db_args(tmp_path, reset_db_manager):
    return ["--database-url", f"sqlite:///{tmp_path / 'profiles.db'}"]


def test_create_then_get(db_args, capsys):
    assert main(db_args + ["create", "foobar", "Foo", "Bar"]) == EXIT_OK
    capsys.readouterr()

    assert main(db_args + ["get", "foobar"]) == EXIT_OK

    output = json.loads(capsys.readouterr().out)
    assert output == {"username": "foobar", "firstName": "Foo", "lastName": "Bar"}


def test_create_existing_is_rejected(db_args, capsys):
    main(db_args + ["create", "foobar", "Foo", "Bar"])

    assert main(db_args + ["create", "foobar", "X", "Y"]) == EXIT_REJECTED
    assert "already exists" in capsys.readouterr().err


def test_update(db_args, capsys):
    main(db_args + ["create", "foobar", "Foo", "Bar"])
    capsys.readouterr()

    assert main(db_args + ["update", "foobar", "Foo1", "Bar1"]) == EXIT_OK

    output = json.loads(capsys.readouterr().out)
    assert output["firstName"] == "Foo1"
    assert output["lastName"] == "Bar1"


def test_missing_profile(db_args, capsys):
    assert main(db_args + ["get", "ghost"]) == EXIT_REJECTED
    assert main(db_args + ["update", "ghost", "X", "Y"]) == EXIT_REJECTED
    assert "ghost was not found" in capsys.readouterr().err


def test_init_db(db_args, capsys):
    assert main(db_args + ["init-db"]) == EXIT_OK
    assert "Database initialized" in capsys.readouterr().out


def test_empty_username_is_a_usage_error(db_args):
    with pytest.raises(SystemExit) as exc_info:
        main(db_args + ["get", ""])

    assert exc_info.value.code == 2


def test_storage_failure_exit_code(capsys):
    outcome = StorageFailure("foobar", "fetch", StorageError("connection refused"))

    assert _report(outcome) == EXIT_STORAGE_FAILURE
    assert "connection refused" in capsys.readouterr().err


def test_unreachable_database_exit_code(tmp_path, reset_db_manager, capsys):
    missing = tmp_path / "missing_dir" / "profiles.db"

    assert main(["--database-url", f"sqlite:///{missing}", "get", "foobar"]) == EXIT_STORAGE_FAILURE
    assert "database unavailable" in capsys.readouterr().err
    assert reset_db_manager.engine is None
