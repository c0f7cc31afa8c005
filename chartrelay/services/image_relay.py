"""Image relay service: allow-list, fetch, base64-encode."""

import base64
import logging
from typing import Optional

import httpx

from chartrelay.config import Settings
from chartrelay.models.relay import RelayResult
from chartrelay.utils.exceptions import UpstreamError
from chartrelay.utils.validators import is_allowed_image_url, validate_image_url

logger = logging.getLogger(__name__)

# The payload is always labelled PNG; upstream content types are not sniffed.
DATA_URI_PREFIX = "data:image/png;base64,"


def to_data_uri(content: bytes) -> str:
    """Encode bytes as a PNG data URI."""
    return DATA_URI_PREFIX + base64.b64encode(content).decode("ascii")


class ImageRelay:
    """Fetches allow-listed images server-side and returns them as data URIs."""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Args:
            settings: Allow-list, timeout, size limit and User-Agent
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.settings = settings
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.settings.http_timeout,
            follow_redirects=True,
            transport=self._transport,
            event_hooks={"response": [self._check_redirect]},
        )

    async def _check_redirect(self, response: httpx.Response) -> None:
        """Refuse to follow a redirect that leaves the allow-list."""
        if not response.has_redirect_location:
            return
        target = response.url.join(response.headers["Location"])
        if not is_allowed_image_url(str(target), self.settings):
            raise UpstreamError(
                f"Failed to fetch image: redirected outside the allow-list to {target}",
                upstream_status=response.status_code,
            )

    async def fetch_as_data_uri(self, image_url: str) -> RelayResult:
        """
        Validate, fetch and encode one image.

        Args:
            image_url: Candidate image URL

        Returns:
            RelayResult with the data URI and byte count

        Raises:
            MissingParameterError: If the URL is empty
            ForbiddenURLError: If the URL is outside the allow-list (no request is made)
            UpstreamError: If the fetch fails, returns non-2xx or exceeds the size limit
        """
        url = validate_image_url(image_url, self.settings)

        logger.info(f"Fetching image: {url}", extra={"image_url": url})

        try:
            content = await self._fetch(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            # InvalidURL does not subclass HTTPError
            raise UpstreamError(f"Failed to fetch image: {type(e).__name__}: {e}") from e

        logger.info(
            f"Successfully converted image ({len(content)} bytes)",
            extra={"image_url": url, "size": len(content)},
        )
        return RelayResult(data_uri=to_data_uri(content), size=len(content))

    async def _fetch(self, url: str) -> bytes:
        headers = {"User-Agent": self.settings.user_agent}
        async with self._client() as client:
            async with client.stream("GET", url, headers=headers) as response:
                if not response.is_success:
                    raise UpstreamError(
                        f"Failed to fetch image: {response.status_code} {response.reason_phrase}",
                        upstream_status=response.status_code,
                    )
                return await self._read_body(response)

    async def _read_body(self, response: httpx.Response) -> bytes:
        """Read the body, enforcing ``max_image_bytes`` when it is set."""
        limit = self.settings.max_image_bytes
        if limit <= 0:
            return await response.aread()

        declared = response.headers.get("Content-Length")
        if declared and declared.isdigit() and int(declared) > limit:
            raise UpstreamError(
                f"Failed to fetch image: body of {declared} bytes exceeds limit of {limit} bytes"
            )

        buffer = bytearray()
        async for chunk in response.aiter_bytes():
            buffer.extend(chunk)
            if len(buffer) > limit:
                raise UpstreamError(
                    f"Failed to fetch image: body exceeds limit of {limit} bytes"
                )
        return bytes(buffer)
