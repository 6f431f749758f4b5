"""
Application factory for FastAPI.

This module provides a factory function for creating FastAPI application instances.
The factory pattern allows for:
- Easy testing with custom settings
- Multiple app instances with different configurations
- Clear separation of app creation from route definitions

Every error leaves the API as a small JSON body, {"error": message}.
Service errors map to their own status code; unexpected failures are
logged (and sent to Sentry when configured) and surface as a bare 500.

Usage:
    from backend.main import create_app
    from backend.settings import Settings

    # Default app (uses get_settings())
    app = create_app()

    # Test app with custom settings
    test_settings = Settings(environment="test", _env_file=None)
    test_app = create_app(settings=test_settings)
"""

import logging
from typing import Any, Dict, List, Optional

import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from application.exceptions import AuthenticationError, ServiceError
from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.

    Returns:
        Configured FastAPI application instance.

    Raises:
        RuntimeError: If production is configured with the development JWT secret
    """
    if settings is None:
        settings = get_settings()

    _configure_logging(settings)

    if settings.is_production and settings.uses_default_jwt_secret:
        raise RuntimeError(
            "JWT_SECRET must be configured in production; "
            "refusing to sign tokens with the development default."
        )

    # Initialize Sentry for error tracking
    _init_sentry(settings)

    app = FastAPI(
        title="Program Tracker API",
        description="Fitness program tracking: users, exercises and training programs",
        version="1.0.0",
    )

    _configure_cors(app, settings)
    _register_exception_handlers(app)
    _include_routers(app)

    return app


def _configure_logging(settings: Settings) -> None:
    """Set the root log level and a timestamped format for the service."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger().setLevel(getattr(logging, settings.log_level))


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,
            profiles_sample_rate=0.1,
            enable_tracing=True,
        )
        logger.info("Sentry initialized for program-tracker")


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware for the application."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


# =============================================================================
# Error handling
# =============================================================================


def _error(status_code: int, message: Any, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def _format_validation_errors(errors: List[Dict[str, Any]]) -> str:
    """
    Flatten pydantic errors into one line, e.g. "userName: Field required".

    The leading "body"/"query"/"path" segment is dropped unless it is the
    whole location (a missing body).
    """
    parts = []
    for err in errors:
        loc = [str(segment) for segment in err.get("loc", ())]
        if len(loc) > 1 and loc[0] in ("body", "query", "path", "header"):
            loc = loc[1:]
        field = ".".join(loc)
        parts.append(f"{field}: {err.get('msg')}" if field else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


def _register_exception_handlers(app: FastAPI) -> None:
    """Translate every failure into {"error": message} with the right status."""

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
            sentry_sdk.capture_exception(exc)
            return _error(exc.status_code, INTERNAL_ERROR_MESSAGE)

        headers = None
        if isinstance(exc, AuthenticationError):
            headers = {"WWW-Authenticate": "Bearer"}
        return _error(exc.status_code, exc.message, headers)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        message = _format_validation_errors(exc.errors())
        logger.info(f"{request.method} {request.url.path} rejected: {message}")
        return _error(400, message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return _error(exc.status_code, exc.detail, getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return _error(500, INTERNAL_ERROR_MESSAGE)


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from api.routers import (
        auth_router,
        exercises_router,
        health_router,
        programs_router,
        users_router,
    )

    # Health router (no prefix - /health at root)
    app.include_router(health_router)

    # Domain routers
    app.include_router(users_router)
    app.include_router(auth_router)
    app.include_router(exercises_router)
    app.include_router(programs_router)


# Default app instance for uvicorn
# This allows: uvicorn backend.main:app --reload
app = create_app()
