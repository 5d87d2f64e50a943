"""Middleware setup for the FastAPI application."""

import logging
import time
import uuid
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

logger = logging.getLogger(__name__)

DEV_ENVIRONMENTS = {"development", "dev", "local", "test"}

DEV_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]


def get_allowed_origins(ui_url: str | None = None, environment: str = "development") -> list[str]:
    """Get list of allowed CORS origins.

    Args:
        ui_url: URL of the UI application
        environment: Environment name (development, production, etc.)

    Returns:
        Deduplicated list of allowed origin URLs
    """
    origins: list[str] = []

    if ui_url:
        origins.append(ui_url.rstrip("/"))

    if environment.lower() in DEV_ENVIRONMENTS:
        origins.extend(DEV_ORIGINS)

    return list(dict.fromkeys(origins))


def get_cors_headers(origin: str | None, ui_url: str | None = None, environment: str = "development") -> dict[str, str]:
    """Get CORS headers for a response to ``origin``.

    Used by the global exception handler, whose responses bypass CORSMiddleware.

    Returns:
        Dictionary of CORS headers, empty if origin is not allowed
    """
    if not origin or origin not in get_allowed_origins(ui_url, environment):
        return {}

    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Allow-Methods": "*",
        "Access-Control-Allow-Headers": "*",
    }


async def log_requests(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    """Tag each response with a request id and duration, and log it."""
    started = time.perf_counter()
    request_id = request.headers.get("X-Request-Id") or str(uuid.uuid4())

    response = await call_next(request)

    duration_ms = int((time.perf_counter() - started) * 1000)
    response.headers["X-Request-Id"] = request_id
    response.headers["X-Request-Duration-ms"] = str(duration_ms)
    logger.info(
        "%s %s -> %s (%d ms) [%s]",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
        request_id,
    )
    return response


def setup_middleware(app: FastAPI, ui_url: str | None = None, environment: str = "development") -> None:
    """Setup middleware for the FastAPI application.

    Args:
        app: FastAPI application instance
        ui_url: URL of the UI application for CORS
        environment: Environment name (development, production, etc.)
    """
    allowed_origins = get_allowed_origins(ui_url, environment)

    app.middleware("http")(log_requests)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-Id", "X-Request-Duration-ms"],
    )

    logger.info("CORS enabled for origins: %s (environment=%s)", allowed_origins, environment)
