"""Cross-origin header handling."""

from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from chartrelay.config import settings


def setup_cors(app: ASGIApp) -> None:
    """Setup CORS middleware."""
    origins = settings.cors_origins_list

    # Wildcard origins cannot be combined with credentials
    if origins == ["*"]:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=False,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    else:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )


class OpenCORSHeadersMiddleware(BaseHTTPMiddleware):
    """
    Stamp ``Access-Control-Allow-Origin: *`` on every response.

    CORSMiddleware only answers requests that send an Origin header; with a
    wildcard configuration the relay advertises itself to every caller.
    """

    async def dispatch(self, request, call_next):
        """Add the wildcard origin header when none was set."""
        response = await call_next(request)
        response.headers.setdefault("Access-Control-Allow-Origin", "*")
        return response


def setup_open_cors_headers(app: ASGIApp) -> None:
    """Add the wildcard header middleware when all origins are allowed."""
    if settings.cors_origins_list == ["*"]:
        app.add_middleware(OpenCORSHeadersMiddleware)
