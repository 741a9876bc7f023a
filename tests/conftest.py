"""
Pytest configuration and fixtures
"""

import json
from typing import Any, Callable, Optional

import httpx
import pytest

from gong_gateway.integrations.gong_client import GongClient, GongConfig


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served"""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return responder(request)

        super().__init__(handler)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Optional[dict[str, Any]]:
        content = self.last_request.content
        return json.loads(content) if content else None


@pytest.fixture
def gong_config():
    """Client config pointed at the default Gong host"""
    return GongConfig(access_key="test-access-key", access_key_secret="test-secret")


@pytest.fixture
def make_client(gong_config):
    """Factory: build a client whose transport answers with a fixed payload"""

    def _make(payload: Any = None, status_code: int = 200, text: Optional[str] = None):
        def responder(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, json=payload if payload is not None else {})

        transport = RecordingTransport(responder)
        return GongClient(gong_config, transport=transport), transport

    return _make


@pytest.fixture
def sample_call():
    """A call record as Gong returns it"""
    return {
        "id": "7782342274025937895",
        "title": "Renewal sync",
        "scheduled": "2024-01-10T15:00:00Z",
        "started": "2024-01-10T15:01:12Z",
        "duration": 1834,
        "primaryUserId": "234599484848423",
        "direction": "Conference",
        "scope": "External",
        "media": "Video",
        "language": "eng",
        "url": "https://app.gong.io/call?id=7782342274025937895",
        "parties": [
            {
                "id": "56825452554556",
                "emailAddress": "ae@example.com",
                "name": "Alex Account",
                "userId": "234599484848423",
                "speakerId": "6432345678555530067",
                "affiliation": "Internal",
            },
            {
                "id": "56825452554557",
                "emailAddress": "buyer@customer.com",
                "name": "Blair Buyer",
                "affiliation": "External",
            },
        ],
    }


@pytest.fixture
def sample_page_metadata():
    """The nested ``records`` object Gong attaches to paginated responses"""
    return {
        "totalRecords": 263,
        "currentPageSize": 100,
        "currentPageNumber": 0,
        "cursor": "eyJhbGciOiJIUzI1NiJ9.opaque-token",
    }
