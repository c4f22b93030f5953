"""
Test Configuration
------------------
Shared fixtures for all tests.

HTTP never leaves the process: clients are built on httpx.MockTransport
and every request is recorded so tests can assert on what was (or was
not) sent.
"""

import json
import sys
from pathlib import Path
from typing import Callable, List, Optional

import httpx
import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from eventbrite_v3.client import Eventbrite
from eventbrite_v3.infra.config import ClientConfig

TEST_BASE_URL = "http://test.local"
TEST_TOKEN = "abc123"


class RecordingTransport:
    """
    Stub transport that records requests and answers from a handler.

    The default handler answers 200 with an empty JSON object.
    """

    def __init__(self, handler: Optional[Callable[[httpx.Request], httpx.Response]] = None):
        self.requests: List[httpx.Request] = []
        self._handler = handler or (lambda request: httpx.Response(200, json={}))
        self.transport = httpx.MockTransport(self._record)

    def _record(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    @property
    def called(self) -> bool:
        return bool(self.requests)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)

    def respond_with(self, status_code: int = 200, json_body=None, content: bytes = None) -> None:
        if content is not None:
            self._handler = lambda request: httpx.Response(status_code, content=content)
        else:
            body = {} if json_body is None else json_body
            self._handler = lambda request: httpx.Response(status_code, json=body)

    def raise_error(self, exc: Exception) -> None:
        def _raise(request):
            raise exc
        self._handler = _raise


@pytest.fixture
def recorder():
    """A fresh recording transport answering 200 {}."""
    return RecordingTransport()


@pytest.fixture
def make_client(recorder):
    """
    Factory for an Eventbrite client wired to the recorder.

    Rate limiting is disabled unless requests_per_second is given.
    """
    def _make(
        token: str = TEST_TOKEN,
        requests_per_second: int = 0,
        base_url: str = TEST_BASE_URL,
    ) -> Eventbrite:
        config = ClientConfig(
            base_url=base_url,
            token=token,
            requests_per_second=requests_per_second,
        )
        http_client = httpx.AsyncClient(transport=recorder.transport)
        return Eventbrite(config, http_client=http_client)

    return _make


@pytest.fixture
def client(make_client):
    """Client with token abc123 against http://test.local, no rate limit."""
    return make_client()
