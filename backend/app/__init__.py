"""FastAPI boundary layer for the profile directory service."""
