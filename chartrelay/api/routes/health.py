"""Health check endpoint."""

from fastapi import APIRouter

from chartrelay.models.relay import HealthResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Health check endpoint.

    Returns:
        Health status
    """
    return HealthResponse(status="ok", message="CORS proxy server is running")
