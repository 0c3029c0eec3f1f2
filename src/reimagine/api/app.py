"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse

from reimagine.api.models import ThemeListResponse
from reimagine.api.shares import router as shares_router
from reimagine.app_logging import configure_logging
from reimagine.catalog import themes_payload
from reimagine.containers import AppContainer
from reimagine.domain.errors import (
    InvalidInputError,
    PayloadTooLargeError,
    ShareNotFoundError,
    StorageError,
)

_CONTENT_TOO_LARGE = 413


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(shares_router)

    @app.exception_handler(InvalidInputError)
    async def invalid_input(_: Request, exc: InvalidInputError) -> JSONResponse:
        status_code = (
            _CONTENT_TOO_LARGE
            if isinstance(exc, PayloadTooLargeError)
            else status.HTTP_400_BAD_REQUEST
        )
        return JSONResponse({"error": str(exc)}, status_code=status_code)

    @app.exception_handler(ShareNotFoundError)
    async def share_not_found(_: Request, exc: ShareNotFoundError) -> PlainTextResponse:
        return PlainTextResponse(
            "Image not found", status_code=status.HTTP_404_NOT_FOUND
        )

    @app.exception_handler(StorageError)
    async def storage_failed(request: Request, exc: StorageError) -> JSONResponse:
        logger.error("Storage failure on %s: %s", request.url.path, exc)
        return JSONResponse(
            {"error": "Failed to store image"}
            if request.method == "POST"
            else {"error": "Failed to load image"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/api/themes", response_model=ThemeListResponse)
    async def list_themes() -> dict[str, object]:
        """Return the theme catalog in display order."""
        return {"themes": themes_payload()}

    return app
