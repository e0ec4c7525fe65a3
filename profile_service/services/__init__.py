"""
Service layer for profile operations.

Usage:
    from profile_service.services import ProfileOrchestrator

    orchestrator = ProfileOrchestrator(store)
    outcome = orchestrator.fetch_profile("foobar")
"""

from .profile_orchestrator import ProfileOrchestrator

__all__ = ["ProfileOrchestrator"]
