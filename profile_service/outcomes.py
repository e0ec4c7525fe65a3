"""
Orchestrator outcomes.

Every orchestrator call returns exactly one of these values. They form a
closed union per operation, so callers dispatch on the type and handle
StorageFailure alongside the business cases:

    outcome = orchestrator.fetch_profile("foobar")
    if isinstance(outcome, Found):
        ...
    elif isinstance(outcome, NotFound):
        ...
    else:  # StorageFailure
        ...
"""

from dataclasses import dataclass
from typing import Union

from .entities import Profile
from .errors import StorageError


@dataclass(frozen=True)
class Found:
    profile: Profile


@dataclass(frozen=True)
class NotFound:
    username: str


@dataclass(frozen=True)
class Conflict:
    username: str


@dataclass(frozen=True)
class Created:
    profile: Profile


@dataclass(frozen=True)
class Updated:
    profile: Profile


@dataclass(frozen=True)
class StorageFailure:
    """A store fault surfaced unmodified to the caller."""

    username: str
    operation: str
    error: StorageError


FetchOutcome = Union[Found, NotFound, StorageFailure]
CreateOutcome = Union[Created, Conflict, StorageFailure]
UpdateOutcome = Union[Updated, NotFound, StorageFailure]
ProfileOutcome = Union[Found, NotFound, Conflict, Created, Updated, StorageFailure]

__all__ = [
    "Found",
    "NotFound",
    "Conflict",
    "Created",
    "Updated",
    "StorageFailure",
    "FetchOutcome",
    "CreateOutcome",
    "UpdateOutcome",
    "ProfileOutcome",
]
