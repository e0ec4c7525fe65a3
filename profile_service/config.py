"""
Application configuration using Pydantic settings.

Usage:
    from profile_service.config import get_settings
    settings = get_settings()
"""

from functools import lru_cache
from typing import List, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

StoreBackend = Literal["sql", "memory"]


class Settings(BaseSettings):
    """
    Unified application settings loaded from environment variables and .env file.

    Storage:
        - STORE_BACKEND selects the ProfileStore implementation ("sql" or "memory")
        - DATABASE_URL is only used by the "sql" backend
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # App settings
    app_name: str = "Profile Directory Service"
    api_prefix: str = Field(default="", validation_alias="API_PREFIX")
    debug: bool = Field(default=False)

    # Storage
    store_backend: StoreBackend = Field(default="sql", validation_alias="STORE_BACKEND")

    # Database
    database_url: str = Field(default="sqlite:///profiles.db", validation_alias="DATABASE_URL")
    db_pool_pre_ping: bool = Field(default=True, validation_alias="DB_POOL_PRE_PING")

    # Logging
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_json: bool = Field(default=False, validation_alias="LOG_JSON")

    # CORS
    cors_allowed_origins: str = Field(default="http://localhost:5173", validation_alias="CORS_ALLOWED_ORIGINS")

    # Requests
    max_request_size_mb: int = Field(default=1, ge=1, validation_alias="MAX_REQUEST_SIZE_MB")

    @field_validator("store_backend", mode="before")
    @classmethod
    def normalize_store_backend(cls, v: str) -> str:
        """Accept backend names case-insensitively ("SQL", " memory ")."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"LOG_LEVEL must be a standard logging level (got {v!r})")
        return level

    @field_validator("api_prefix")
    @classmethod
    def validate_api_prefix(cls, v: str) -> str:
        """Prefix must be empty or start with '/' and carry no trailing slash."""
        v = v.strip()
        if not v:
            return ""
        if not v.startswith("/"):
            raise ValueError(f"API_PREFIX must start with '/' (got {v!r})")
        return v.rstrip("/")

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_allowed_origins.split(",") if origin.strip()]

    @property
    def uses_database(self) -> bool:
        return self.store_backend == "sql"


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()


__all__ = ["Settings", "StoreBackend", "get_settings"]
