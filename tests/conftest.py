"""Pytest configuration and fixtures."""

from typing import Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

from chartrelay.api.dependencies import get_image_relay
from chartrelay.config import Settings
from chartrelay.main import app
from chartrelay.services.image_relay import ImageRelay

SNAPSHOT_URL = "https://www.tradingview.com/snapshots/a/AbCdEf12/"
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + bytes(range(256)) * 4


class FakeUpstream:
    """MockTransport handler that records every outbound request."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, content=PNG_BYTES, headers={"Content-Type": "image/png"}
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def call_count(self) -> int:
        return len(self.requests)


@pytest.fixture
def relay_settings():
    """Settings isolated from the process environment."""
    return Settings(_env_file=None)


@pytest.fixture
def upstream():
    """Fake remote host; tests swap ``upstream.handler`` to change its answer."""
    return FakeUpstream()


@pytest.fixture
def relay(relay_settings, upstream):
    """Image relay wired to the fake upstream."""
    return ImageRelay(relay_settings, transport=httpx.MockTransport(upstream))


@pytest.fixture
def client(relay):
    """Create test client."""
    app.dependency_overrides[get_image_relay] = lambda: relay
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
