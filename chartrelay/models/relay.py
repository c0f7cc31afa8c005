"""Relay request/response Pydantic models."""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class ImageFetchRequest(BaseModel):
    """Body of ``POST /api/fetch-image``."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    imageUrl: StrictStr = Field(..., min_length=1, description="Remote image URL to relay")


class ImageFetchResponse(BaseModel):
    """Successful relay response."""

    success: bool = Field(True, description="Always true for a successful relay")
    dataUri: str = Field(..., description="Fetched bytes as a base64 PNG data URI")
    size: int = Field(..., description="Number of bytes fetched")


class HealthResponse(BaseModel):
    """Liveness payload."""

    status: str = Field("ok", description="Always 'ok'")
    message: str = Field(..., description="Human-readable status")


class ErrorResponse(BaseModel):
    """JSON body of every failed relay call."""

    error: str
    message: Optional[str] = None


@dataclass(frozen=True)
class RelayResult:
    """Outcome of a successful relay: the data URI and the raw byte count."""

    data_uri: str
    size: int
