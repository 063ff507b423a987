"""
Factory function for creating the FastAPI application.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .config import AppConfig, config, setup_logging
from .routes import router
from .storage import Storage, initialize_websites, storage as default_storage


def create_app(
    app_config: Optional[AppConfig] = None, storage: Optional[Storage] = None
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_config: Settings to configure logging with, defaults to the
                    environment-derived settings.
        storage: Store to seed with the known websites, defaults to the
                 process-wide in-memory store served by the routes.
    """
    app_config = app_config or config
    storage = storage if storage is not None else default_storage

    setup_logging(app_config)
    logger = logging.getLogger(__name__)

    app = FastAPI(
        title="PhishLens API",
        description="Heuristic phishing check of login page screenshots against known websites",
        version=__version__,
    )

    # Seed reference websites
    try:
        initialize_websites(storage)
        logger.info("Website storage initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize website storage: {e}")
        raise

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Render HTTP errors as {"error": message}."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        """Handle validation errors with detailed logging."""
        logger = logging.getLogger(__name__)

        content_type = request.headers.get("content-type", "unknown")
        logger.error(
            f"Validation error - URL: {request.url}, "
            f"Method: {request.method}, "
            f"Content-Type: {content_type}, "
            f"Errors: {exc.errors()}"
        )

        return JSONResponse(
            status_code=422,
            content={"error": "Invalid request", "detail": jsonable_errors(exc)},
        )

    app.include_router(router)
    return app


def jsonable_errors(exc: RequestValidationError) -> list:
    # Error contexts may hold exceptions or raw bytes
    return jsonable_encoder(exc.errors(), custom_encoder={bytes: repr, Exception: str})
