"""
Profile Directory Service Core Library.

This package provides the core functionality for the profile directory,
including the profile entities, the storage contract and its backends,
the orchestrator, configuration and logging.

Usage:
    # Orchestration
    from profile_service.entities import Profile, PutProfileRequest
    from profile_service.repositories import InMemoryProfileStore
    from profile_service.services import ProfileOrchestrator

    # Config
    from profile_service.config import get_settings, Settings

    # Logging
    from profile_service.logging import get_logger, configure_logging
"""

__version__ = "1.0.0"

# Users should import directly from submodules:
#   from profile_service.db import db
#   from profile_service.config import get_settings
#   from profile_service.logging import get_logger
