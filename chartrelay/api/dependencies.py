"""Shared API dependencies."""

from fastapi import Depends

from chartrelay.config import Settings, settings
from chartrelay.services.image_relay import ImageRelay


def get_settings() -> Settings:
    """Get application settings."""
    return settings


def get_image_relay(app_settings: Settings = Depends(get_settings)) -> ImageRelay:
    """Get image relay service instance."""
    return ImageRelay(app_settings)
