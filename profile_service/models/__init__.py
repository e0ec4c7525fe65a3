"""
SQLAlchemy models for the profile directory.

Usage:
    from profile_service.models import ProfileRecord
"""

from .base import Base
from .profile import ProfileRecord

__all__ = [
    "Base",
    "ProfileRecord",
]
