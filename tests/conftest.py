"""Shared fixtures: a fake TouchBistro API built on httpx.MockTransport."""

import httpx
import pytest

from touchbistro_mcp.client import TouchBistroClient

BASE_URL = "https://cloud.touchbistro.com/api/v1"


class FakeUpstream:
    """Records every request and answers with a configurable response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._status = 200
        self._json = {}
        self._text: str | None = None
        self._error: Exception | None = None

    def reply(self, status_code: int = 200, json=None, text: str | None = None) -> None:
        self._status = status_code
        self._json = json
        self._text = text

    def fail_with(self, error: Exception) -> None:
        self._error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        if self._text is not None:
            return httpx.Response(self._status, text=self._text)
        return httpx.Response(self._status, json=self._json)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent upstream"
        return self.requests[-1]


@pytest.fixture
def upstream():
    """Fake TouchBistro API."""
    return FakeUpstream()


@pytest.fixture
def client(upstream):
    """Uninitialized client wired to the fake API; use with `async with client:`."""
    return TouchBistroClient(
        api_key="test-api-key",
        venue_id="venue-123",
        base_url=BASE_URL,
        transport=upstream.transport,
    )
