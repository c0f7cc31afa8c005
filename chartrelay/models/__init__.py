"""Pydantic models."""

from chartrelay.models.relay import (
    ErrorResponse,
    HealthResponse,
    ImageFetchRequest,
    ImageFetchResponse,
    RelayResult,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "ImageFetchRequest",
    "ImageFetchResponse",
    "RelayResult",
]
