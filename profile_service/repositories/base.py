"""Storage contract the profile orchestrator depends on."""

from abc import ABC, abstractmethod

from profile_service.entities import Profile


class ProfileStore(ABC):
    """
    Capability interface for profile persistence keyed by username.

    Implementations only store and retrieve; existence and conflict policy
    belongs to the orchestrator. Infrastructure faults are raised as
    profile_service.errors.StorageError, never reported as a missing profile.

    Usage:
        class RedisProfileStore(ProfileStore):
            def get(self, username): ...
            def upsert(self, profile): ...

    Stores that can insert a profile only when its username is unused, as
    one atomic step, set supports_atomic_insert and override
    insert_if_absent. The orchestrator then creates profiles without the
    lookup-then-write race.
    """

    supports_atomic_insert: bool = False

    @abstractmethod
    def get(self, username: str) -> Profile | None:
        """Return the profile stored under username, or None if there is none."""

    @abstractmethod
    def upsert(self, profile: Profile) -> None:
        """Insert the profile, or replace the one stored under its username."""

    def insert_if_absent(self, profile: Profile) -> bool:
        """
        Insert the profile only if its username is unused.

        Returns:
            True if the profile was inserted, False if the username was taken
        """
        raise NotImplementedError(
            f"{type(self).__name__} does not provide an atomic insert-if-absent"
        )
