"""Shared test fixtures for the CoreKit test suite."""

from __future__ import annotations

import os
from typing import Any, Callable

import httpx
import pytest

from corekit.networking.configuration import ApiConfiguration
from corekit.networking.provider import ApiProvider


# ---------------------------------------------------------------------------
# Ensure required env vars are set for CoreKitSettings in tests
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _set_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set minimal env vars so CoreKitSettings can be instantiated in tests."""
    if "COREKIT_BASE_URL" not in os.environ:
        monkeypatch.setenv("COREKIT_BASE_URL", "https://mock.api.com")


# ---------------------------------------------------------------------------
# Mock network
# ---------------------------------------------------------------------------


class MockServer:
    """Answers every request through ``handler`` and records what was sent."""

    def __init__(self) -> None:
        self.handler: Callable[[httpx.Request], httpx.Response] | None = None
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.handler is None:
            raise AssertionError("MockServer.handler must be set before sending requests")
        return self.handler(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def respond_json(self, body: Any, status_code: int = 200) -> None:
        self.handler = lambda request: httpx.Response(status_code, json=body)

    def respond_text(self, text: str, status_code: int = 200) -> None:
        self.handler = lambda request: httpx.Response(status_code, text=text)


@pytest.fixture
def mock_server() -> MockServer:
    return MockServer()


# ---------------------------------------------------------------------------
# Configuration / provider fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def config() -> ApiConfiguration:
    """Test configuration mirroring a typical app setup."""
    return ApiConfiguration(
        base_url="https://mock.api.com",
        common_headers={"App-Version": "1.0"},
        common_parameters={"platform": "iOS"},
        timeout=5,
        debug_log_enabled=True,
    )


@pytest.fixture
def provider(config: ApiConfiguration, mock_server: MockServer) -> ApiProvider:
    return ApiProvider(config, transport=mock_server.transport)

