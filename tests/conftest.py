"""
Shared fixtures: a fake JSONPlaceholder server behind httpx.MockTransport.
"""

import json
import sys
from collections.abc import AsyncIterator
from pathlib import Path
from typing import Any, Optional

import httpx
import pytest
import pytest_asyncio

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from post_pager.api.client import APIClient


TEST_BASE_URL = "https://jsonplaceholder.test"


def make_posts(count: int) -> list:
    """Build a JSONPlaceholder-style payload with `count` posts."""
    return [
        {"userId": 1 + i // 10, "id": i + 1, "title": f"title {i + 1}", "body": f"body {i + 1}"}
        for i in range(count)
    ]


class FakeServer:
    """
    Answers every request with whatever it is currently set up to return.

    Set `payload` for a JSON body, `text` for a raw body, `status_code`
    for the status, or `error` to raise a transport exception instead.
    """

    def __init__(self):
        self.status_code = 200
        self.payload: Any = make_posts(100)
        self.text: Optional[str] = None
        self.error: Optional[Exception] = None
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(
            self.status_code,
            content=json.dumps(self.payload).encode("utf-8"),
            headers={"Content-Type": "application/json"},
        )


@pytest.fixture
def server():
    """Create a fake server serving 100 posts."""
    return FakeServer()


@pytest.fixture
def base_url() -> str:
    """Root URL of the fake server."""
    return TEST_BASE_URL


@pytest_asyncio.fixture
async def api(server, base_url) -> AsyncIterator[APIClient]:
    """Create an APIClient wired to the fake server, closed after the test."""
    http = httpx.AsyncClient(transport=httpx.MockTransport(server.handler))
    async with APIClient(base_url=base_url, http_client=http) as client:
        yield client
