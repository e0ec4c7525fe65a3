"""
Structured logging for the profile directory service.

Entries are event names plus key/value fields. Context bound during a
request (request_id from the HTTP layer, username and operation from the
orchestrator) is merged into every entry logged while it is bound.
LOG_JSON=true renders one JSON object per line instead of console output.
"""

import logging
import sys
import time
from collections.abc import Iterator
from contextlib import contextmanager
from functools import lru_cache
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from .config import get_settings

SERVICE_NAME = "profile-directory"


def _add_service_name(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def _processors(json_logs: bool) -> list[Processor]:
    chain: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _add_service_name,
    ]
    if json_logs:
        chain += [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    else:
        chain.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))
    return chain


@lru_cache(maxsize=1)
def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """Route structlog through stdlib logging at `level`. Repeat calls with the same arguments are no-ops."""
    logging.basicConfig(format="%(message)s", stream=sys.stdout)
    logging.getLogger().setLevel(level.upper())

    structlog.configure(
        processors=_processors(json_logs),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Logger for `name`, configuring from settings on first use."""
    if not structlog.is_configured():
        settings = get_settings()
        configure_logging(settings.log_level, settings.log_json)
    return structlog.get_logger(name)  # type: ignore[no-any-return]


def bind_request_id(request_id: str) -> None:
    structlog.contextvars.bind_contextvars(request_id=request_id)


@contextmanager
def profile_context(username: str, operation: str) -> Iterator[None]:
    """
    Attach username and operation to entries logged inside the block.

    Usage:
        with profile_context("foobar", "create"):
            logger.info("profile_created")
    """
    with structlog.contextvars.bound_contextvars(username=username, operation=operation):
        yield


def _log_method_for_status(status_code: int) -> str:
    if status_code >= 500:
        return "error"
    if status_code >= 400:
        return "warning"
    return "info"


class RequestLoggingMiddleware:
    """
    ASGI middleware logging request_started and request_complete.

    Expects RequestIDMiddleware to run first and leave the id in the scope
    state. The completion entry is logged at info below 400, warning for
    client errors and error for server errors, including requests that
    raised before a response started. Bound context is cleared afterwards
    so nothing leaks into the next request on the same worker.
    """

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = scope.get("state", {}).get("request_id", "-")
        log = get_logger("http").bind(
            request_id=request_id,
            method=scope.get("method", ""),
            path=scope.get("path", ""),
        )
        log.info("request_started")

        started = time.perf_counter()
        status_code = 500

        async def send_wrapper(message):
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            getattr(log, _log_method_for_status(status_code))(
                "request_complete",
                status_code=status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 1),
            )
            structlog.contextvars.clear_contextvars()


__all__ = [
    "RequestLoggingMiddleware",
    "bind_request_id",
    "configure_logging",
    "get_logger",
    "profile_context",
]
