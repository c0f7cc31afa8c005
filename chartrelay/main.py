"""FastAPI application entry point."""

import logging
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from chartrelay import __version__
from chartrelay.api.routes import health, images
from chartrelay.config import settings
from chartrelay.core.request_id import get_request_id
from chartrelay.core.static import PublicStaticFiles
from chartrelay.middleware.logging import RequestLoggingMiddleware
from chartrelay.middleware.security import setup_cors, setup_open_cors_headers
from chartrelay.utils.exceptions import RelayError, UpstreamError
from chartrelay.utils.logging_config import setup_logging

# Setup logging
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

UPSTREAM_ERROR_MESSAGE = "Failed to fetch and convert image"

app = FastAPI(
    title="Chart Image Relay",
    description="Fetches allow-listed chart snapshots server-side and returns them as data URIs",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


@app.exception_handler(RelayError)
async def relay_exception_handler(request: Request, exc: RelayError) -> JSONResponse:
    """Map relay failures to their HTTP status and JSON body."""
    if isinstance(exc, UpstreamError):
        content = {"error": UPSTREAM_ERROR_MESSAGE, "message": exc.message}
    else:
        content = {"error": exc.message}

    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.error(
        f"Unexpected exception: {str(exc)}",
        extra={"request_id": get_request_id(), "path": request.url.path},
        exc_info=True,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error", "message": "An unexpected error occurred"},
    )


# Add middleware (last added runs first)
setup_open_cors_headers(app)
app.add_middleware(RequestLoggingMiddleware)
setup_cors(app)

# Include routers
app.include_router(health.router)
app.include_router(images.router)


@app.on_event("startup")
async def startup_event():
    """Application startup event."""
    logger.info("Chart image relay starting up...")
    logger.info(f"Log level: {settings.log_level}")
    logger.info(f"Allow-list: {settings.allowed_url_substring} (strict={settings.strict_allowlist})")
    logger.info(f"Static files: {Path(settings.static_dir).resolve()}")


@app.on_event("shutdown")
async def shutdown_event():
    """Application shutdown event."""
    logger.info("Chart image relay shutting down...")


# Static fallback, mounted last so the API routes above win; dotfiles stay hidden
app.mount("/", PublicStaticFiles(directory=settings.static_dir, html=True), name="static")
