"""
FastAPI application entry point.

Uses structured logging from profile_service.logging.
"""

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from profile_service.config import Settings, get_settings
from profile_service.db import db
from profile_service.logging import RequestLoggingMiddleware, configure_logging, get_logger

from .error_handlers import register_exception_handlers
from .middleware.request_id import RequestIDMiddleware
from .middleware.request_size import RequestSizeLimitMiddleware
from .routers import profile as profile_router

logger = get_logger("api")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Optional override. Also replaces get_settings for every
            dependency resolved by this app.
    """
    overridden = settings is not None
    settings = settings or get_settings()

    configure_logging("DEBUG" if settings.debug else settings.log_level, settings.log_json)

    app = FastAPI(title=settings.app_name, debug=settings.debug)
    if overridden:
        app.dependency_overrides[get_settings] = lambda: settings

    app.add_middleware(RequestSizeLimitMiddleware, max_size_mb=settings.max_request_size_mb)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        # Only allow methods actually used by the API
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Request-ID"],
        expose_headers=["Location", "X-Request-ID"],
    )

    # Added last so it runs first and request logging sees the id
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    @app.on_event("startup")
    async def startup_event():
        """Initialize the configured store backend."""
        logger.info("app_startup", app_name=settings.app_name, store_backend=settings.store_backend)

        if settings.uses_database:
            db.initialize(settings.database_url)
            logger.info("database_initialized")

    @app.on_event("shutdown")
    async def shutdown_event():
        if settings.uses_database:
            db.dispose()
        logger.info("app_shutdown")

    @app.get("/health", tags=["health"])
    def health_check():
        """Liveness probe."""
        return {"status": "ok"}

    @app.get("/health/ready", tags=["health"])
    def readiness_check():
        """
        Readiness probe.

        Returns 200 if the profile store is reachable, 503 if not.
        The in-memory backend is always ready.
        """
        if not settings.uses_database:
            return {"status": "ready", "checks": {"store": True}}

        error = db.ping()
        checks = {"store": error is None}
        if error is not None:
            logger.warning("readiness_check_failed", error=error)
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "not_ready", "checks": checks},
            )
        return {"status": "ready", "checks": checks}

    app.include_router(profile_router.router, prefix=settings.api_prefix)

    return app


app = create_app()
