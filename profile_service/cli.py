"""
Profile Directory CLI.

Runs the profile orchestrator against the configured SQL database.
"""

import argparse
import json
import sys

from dotenv import load_dotenv
from sqlalchemy.exc import SQLAlchemyError

from profile_service.db import db
from profile_service.entities import Profile, PutProfileRequest
from profile_service.outcomes import (
    Conflict,
    Created,
    Found,
    NotFound,
    ProfileOutcome,
    StorageFailure,
    Updated,
)
from profile_service.repositories import SqlProfileStore
from profile_service.services import ProfileOrchestrator

load_dotenv()

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_STORAGE_FAILURE = 2


def _run(database_url: str | None, operation) -> int:
    """
    Connect, then run `operation` against a SqlProfileStore.

    Database faults outside the store (connecting, creating the table,
    closing the session) exit with EXIT_STORAGE_FAILURE like a
    StorageFailure outcome does.
    """
    try:
        db.initialize(database_url)
        with db.session() as session:
            return operation(SqlProfileStore(session))
    except SQLAlchemyError as e:
        print(f"Error: database unavailable: {e}", file=sys.stderr)
        return EXIT_STORAGE_FAILURE


def _profile_json(profile: Profile) -> str:
    return json.dumps(
        {
            "username": profile.username,
            "firstName": profile.first_name,
            "lastName": profile.last_name,
        },
        indent=2,
    )


def _report(outcome: ProfileOutcome) -> int:
    """Print an outcome and return the process exit code for it."""
    if isinstance(outcome, (Found, Created, Updated)):
        print(_profile_json(outcome.profile))
        return EXIT_OK
    if isinstance(outcome, NotFound):
        print(f"Error: A User with username {outcome.username} was not found", file=sys.stderr)
        return EXIT_REJECTED
    if isinstance(outcome, Conflict):
        print(f"Error: A user with username {outcome.username} already exists", file=sys.stderr)
        return EXIT_REJECTED
    if isinstance(outcome, StorageFailure):
        print(f"Error: storage failure during {outcome.operation}: {outcome.error}", file=sys.stderr)
        return EXIT_STORAGE_FAILURE
    raise TypeError(f"Unexpected outcome: {outcome!r}")


def cmd_init_db(args) -> int:
    """Create the profiles table."""

    def report_ready(store: SqlProfileStore) -> int:
        print("Database initialized.")
        return EXIT_OK

    return _run(args.database_url, report_ready)


def cmd_get(args) -> int:
    """Fetch a profile by username."""
    return _run(
        args.database_url,
        lambda store: _report(ProfileOrchestrator(store).fetch_profile(args.username)),
    )


def cmd_create(args) -> int:
    """Create a new profile."""
    profile = Profile(username=args.username, first_name=args.first_name, last_name=args.last_name)
    return _run(
        args.database_url,
        lambda store: _report(ProfileOrchestrator(store).create_profile(profile)),
    )


def cmd_update(args) -> int:
    """Replace the names of an existing profile."""
    put_request = PutProfileRequest(first_name=args.first_name, last_name=args.last_name)
    return _run(
        args.database_url,
        lambda store: _report(ProfileOrchestrator(store).update_profile(args.username, put_request)),
    )


def _non_empty(value: str) -> str:
    if not value:
        raise argparse.ArgumentTypeError("username must not be empty")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="profile-service",
        description="Profile Directory - create, fetch and update user profiles",
    )
    parser.add_argument("--database-url", help="Override DATABASE_URL")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("init-db", help="Create database tables")

    get_parser = subparsers.add_parser("get", help="Show a profile")
    get_parser.add_argument("username", type=_non_empty)

    create_parser = subparsers.add_parser("create", help="Create a profile")
    create_parser.add_argument("username", type=_non_empty)
    create_parser.add_argument("first_name")
    create_parser.add_argument("last_name")

    update_parser = subparsers.add_parser("update", help="Replace a profile's names")
    update_parser.add_argument("username", type=_non_empty)
    update_parser.add_argument("first_name")
    update_parser.add_argument("last_name")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point with CLI interface."""
    parser = build_parser()
    args = parser.parse_args(argv)

    commands = {
        "init-db": cmd_init_db,
        "get": cmd_get,
        "create": cmd_create,
        "update": cmd_update,
    }

    if args.command in commands:
        return commands[args.command](args)
    parser.print_help()
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
