"""Main FastAPI application."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from gitflow_api.config import get_settings
from gitflow_api.middleware import get_cors_headers, setup_middleware
from gitflow_api.models.envelope import error_content
from gitflow_api.routes import api_router, root_router
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Initialize settings
settings = get_settings()

ENDPOINTS = (
    "GET / - Welcome message",
    "GET /api/health - Health check",
    "GET /api/users - Get all users",
    "GET /api/users/:id - Get user by ID",
    "POST /api/users - Create user",
    "PATCH /api/users/:id - Update user",
    "DELETE /api/users/:id - Delete user",
    "GET /api/features - Get demo features",
    "GET /api/features/:id - Get demo feature by ID",
    "POST /api/features/:id/toggle - Toggle demo feature",
    "GET /api/test/ai-workflow - Test AI workflow functionality",
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Handle application lifespan events."""
    # Startup
    logger.info(f"{settings.app_name} v{settings.app_version} started")
    logger.info(f"Server running at http://{settings.api_host}:{settings.api_port}")
    logger.info(f"Environment: {settings.environment}")
    logger.info("Available endpoints:")
    for endpoint in ENDPOINTS:
        logger.info(f"  {endpoint}")

    yield

    # Shutdown
    logger.info(f"{settings.app_name} shutting down")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Git Flow Demo - FastAPI backend service",
    version=settings.app_version,
    lifespan=lifespan,
    redirect_slashes=False,
)

# Setup middleware (must be before exception handlers)
setup_middleware(app, ui_url=settings.ui_url, environment=settings.environment)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as failure envelopes."""
    return JSONResponse(
        status_code=exc.status_code,
        content=error_content(str(exc.detail), getattr(exc, "error", None)),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request parsing failures as failure envelopes."""
    errors = "; ".join(f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors())
    return JSONResponse(
        status_code=422,
        content=error_content("Invalid request", errors),
    )


# Exception handler to ensure CORS headers are present on all error responses
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler returning a server-error envelope with CORS headers."""
    logger.error("Unhandled exception: %s", exc, exc_info=True)

    # Get CORS headers using shared function
    origin = request.headers.get("origin")
    cors_headers = get_cors_headers(origin, ui_url=settings.ui_url, environment=settings.environment)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_content("Internal server error", str(exc)),
        headers=cors_headers,
    )


# Include routers
app.include_router(root_router)
app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "gitflow_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
        log_level=settings.log_level.lower(),
    )
