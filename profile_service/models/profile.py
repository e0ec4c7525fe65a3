"""
Profile SQLAlchemy model.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from profile_service.entities import Profile

from .base import Base


class ProfileRecord(Base):
    """
    Stored profile row keyed by username.

    Attributes:
        username: Identity key, one row per username
        first_name: Given name, replaced together with last_name on update
        last_name: Family name
        created_at / updated_at: Storage metadata, never part of the Profile entity
    """

    __tablename__ = "profiles"

    username: Mapped[str] = mapped_column(String(255), primary_key=True)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=lambda: datetime.now(timezone.utc)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    @classmethod
    def from_entity(cls, profile: Profile) -> "ProfileRecord":
        return cls(
            username=profile.username,
            first_name=profile.first_name,
            last_name=profile.last_name,
        )

    def to_entity(self) -> Profile:
        return Profile(
            username=self.username,
            first_name=self.first_name,
            last_name=self.last_name,
        )
