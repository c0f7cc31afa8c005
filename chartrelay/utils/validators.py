"""Input validation utilities."""

from typing import Any, Optional
from urllib.parse import urlparse

from pydantic import ValidationError

from chartrelay.config import Settings
from chartrelay.models.relay import ImageFetchRequest
from chartrelay.utils.exceptions import ForbiddenURLError, MissingParameterError

MISSING_IMAGE_URL_MESSAGE = "Missing imageUrl parameter"


def parse_fetch_request(payload: Any) -> ImageFetchRequest:
    """
    Validate a decoded JSON body against the relay request schema.

    Args:
        payload: Decoded JSON body (anything ``json.loads`` may return)

    Returns:
        Validated request

    Raises:
        MissingParameterError: If the body has no usable ``imageUrl``
    """
    if not isinstance(payload, dict):
        raise MissingParameterError(MISSING_IMAGE_URL_MESSAGE)
    try:
        return ImageFetchRequest.model_validate(payload)
    except ValidationError as e:
        raise MissingParameterError(MISSING_IMAGE_URL_MESSAGE) from e


def _host_matches(hostname: Optional[str], allowed_host: str) -> bool:
    if not hostname:
        return False
    hostname = hostname.lower().rstrip(".")
    allowed_host = allowed_host.lower()
    return hostname == allowed_host or hostname.endswith("." + allowed_host)


def is_allowed_image_url(url: str, settings: Settings) -> bool:
    """
    Check a URL against the allow-list.

    In strict mode the URL is parsed and the scheme, host (or a subdomain of
    it) and path prefix are checked. Otherwise only the ``host + path prefix``
    substring has to appear somewhere in the URL.
    """
    if not settings.strict_allowlist:
        return settings.allowed_url_substring in url

    try:
        parsed = urlparse(url)
    except ValueError:
        return False

    if parsed.scheme not in ("http", "https"):
        return False

    if not _host_matches(parsed.hostname, settings.allowed_host):
        return False

    return parsed.path.startswith(settings.allowed_path_prefix)


def validate_image_url(url: str, settings: Settings) -> str:
    """
    Validate an image URL against the allow-list.

    Args:
        url: Candidate URL
        settings: Settings holding the allow-list

    Returns:
        The URL, stripped of surrounding whitespace

    Raises:
        MissingParameterError: If the URL is empty
        ForbiddenURLError: If the URL is outside the allow-list
    """
    if not url or not isinstance(url, str) or not url.strip():
        raise MissingParameterError(MISSING_IMAGE_URL_MESSAGE)

    url = url.strip()

    if not is_allowed_image_url(url, settings):
        raise ForbiddenURLError(f"Only {settings.allowed_source_name} URLs are allowed")

    return url
