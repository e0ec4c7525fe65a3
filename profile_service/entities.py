"""
Profile value objects.

Profile is the sole persisted entity; PutProfileRequest is the update
payload, which never carries an identity of its own.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Profile:
    """A profile record identified by username."""

    username: str
    first_name: str
    last_name: str

    def __post_init__(self) -> None:
        if not self.username:
            raise ValueError("Profile username must be a non-empty string")


@dataclass(frozen=True)
class PutProfileRequest:
    """Replacement name fields for an existing profile."""

    first_name: str
    last_name: str

    def to_profile(self, username: str) -> Profile:
        """
        Build the Profile to persist for `username`.

        The username always comes from the addressed resource, so a payload
        can never redirect an update to another record.
        """
        return Profile(username=username, first_name=self.first_name, last_name=self.last_name)


__all__ = ["Profile", "PutProfileRequest"]
