"""
Profile Orchestrator.

Decision logic for fetching, creating and updating profiles on top of a
ProfileStore. Business results are returned as outcome values; only store
faults are special, and those come back as StorageFailure rather than
being raised.
"""

from profile_service.entities import Profile, PutProfileRequest
from profile_service.errors import StorageError
from profile_service.logging import get_logger, profile_context
from profile_service.outcomes import (
    Conflict,
    CreateOutcome,
    Created,
    FetchOutcome,
    Found,
    NotFound,
    StorageFailure,
    UpdateOutcome,
    Updated,
)
from profile_service.repositories import ProfileStore

logger = get_logger("profile.orchestrator")


def _require_username(username: str) -> None:
    if not username:
        raise ValueError("username must be a non-empty string")


class ProfileOrchestrator:
    """
    Stateless service implementing profile create/read/update semantics.

    Each call borrows the store for its duration and keeps nothing between
    calls, so one instance may serve concurrent requests.

    Create and update read before they write. Unless the store supports
    atomic insert, two concurrent creates of the same username can both
    observe it as absent and both write (last write wins). Update has the
    same lookup-then-write gap against a concurrent writer.
    """

    def __init__(self, store: ProfileStore):
        self.store = store

    def fetch_profile(self, username: str) -> FetchOutcome:
        """Look up a profile. No side effects."""
        _require_username(username)
        with profile_context(username, "fetch"):
            try:
                profile = self.store.get(username)
            except StorageError as e:
                return self._storage_failure(username, "fetch", e)

            if profile is None:
                logger.debug("profile_not_found")
                return NotFound(username)
            return Found(profile)

    def create_profile(self, profile: Profile) -> CreateOutcome:
        """
        Create a profile unless one already exists for its username.

        On Conflict the store is left untouched.
        """
        username = profile.username
        with profile_context(username, "create"):
            try:
                if self.store.supports_atomic_insert:
                    inserted = self.store.insert_if_absent(profile)
                else:
                    inserted = self._check_then_insert(profile)
            except StorageError as e:
                return self._storage_failure(username, "create", e)

            if not inserted:
                logger.info("profile_create_conflict")
                return Conflict(username)
            logger.info("profile_created")
            return Created(profile)

    def update_profile(self, username: str, put_request: PutProfileRequest) -> UpdateOutcome:
        """
        Replace both name fields of an existing profile.

        The identity comes from `username` only; previous names are discarded.
        """
        _require_username(username)
        with profile_context(username, "update"):
            try:
                if self.store.get(username) is None:
                    logger.debug("profile_not_found")
                    return NotFound(username)

                profile = put_request.to_profile(username)
                self.store.upsert(profile)
            except StorageError as e:
                return self._storage_failure(username, "update", e)

            logger.info("profile_updated")
            return Updated(profile)

    def _check_then_insert(self, profile: Profile) -> bool:
        if self.store.get(profile.username) is not None:
            return False
        logger.debug("profile_create_non_atomic", store=type(self.store).__name__)
        self.store.upsert(profile)
        return True

    @staticmethod
    def _storage_failure(username: str, operation: str, error: StorageError) -> StorageFailure:
        logger.error(
            "profile_storage_failure",
            error=str(error),
            error_type=type(error).__name__,
        )
        return StorageFailure(username=username, operation=operation, error=error)


__all__ = ["ProfileOrchestrator"]
