"""Custom exception classes."""

from typing import Optional


class ChartRelayException(Exception):
    """Base exception for the chart relay application."""

    pass


class RelayError(ChartRelayException):
    """Failure of the image relay operation.

    Carries the error kind reported in logs and the HTTP status the gateway
    answers with.
    """

    kind = "RelayError"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingParameterError(RelayError):
    """Raised when the request body lacks a usable imageUrl."""

    kind = "MissingParameter"
    status_code = 400


class ForbiddenURLError(RelayError):
    """Raised when a URL is outside the allow-list."""

    kind = "Forbidden"
    status_code = 403


class UpstreamError(RelayError):
    """Raised when the remote fetch fails or returns a non-success status."""

    kind = "UpstreamError"
    status_code = 500

    def __init__(self, message: str, upstream_status: Optional[int] = None):
        super().__init__(message)
        self.upstream_status = upstream_status
