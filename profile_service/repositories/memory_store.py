"""In-memory profile store."""

import threading

from profile_service.entities import Profile

from .base import ProfileStore


class InMemoryProfileStore(ProfileStore):
    """
    Process-local ProfileStore backed by a dict.

    A single lock guards every access, which also makes insert_if_absent
    atomic. Contents are lost when the process exits.
    """

    supports_atomic_insert = True

    def __init__(self, profiles: list[Profile] | None = None):
        self._lock = threading.Lock()
        self._profiles: dict[str, Profile] = {}
        for profile in profiles or []:
            self._profiles[profile.username] = profile

    def get(self, username: str) -> Profile | None:
        with self._lock:
            return self._profiles.get(username)

    def upsert(self, profile: Profile) -> None:
        with self._lock:
            self._profiles[profile.username] = profile

    def insert_if_absent(self, profile: Profile) -> bool:
        with self._lock:
            if profile.username in self._profiles:
                return False
            self._profiles[profile.username] = profile
            return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._profiles)

    def clear(self) -> None:
        with self._lock:
            self._profiles.clear()
