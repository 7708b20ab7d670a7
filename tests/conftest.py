"""Shared fixtures: a fake upstream provider behind httpx.MockTransport and an in-process app client."""

from collections import Counter

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from app import create_app
from config import Settings
from services.cache import TTLCache
from services.upstream import UpstreamClient

UPSTREAM_URL = "http://upstream.test"
TOKEN = "test-token"


class FakeUpstream:
    """Serves canned users/posts/comments and counts calls per path."""

    def __init__(self):
        self.users: dict = {}
        self.posts: list = []
        self.comments: list = []
        self.status_code = 200
        self.calls: Counter = Counter()
        self.auth_headers: list[str | None] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.calls[path] += 1
        self.auth_headers.append(request.headers.get("Authorization"))
        if self.status_code != 200:
            return httpx.Response(self.status_code, json={"message": "nope"})
        payloads = {
            "/users": {"users": self.users},
            "/posts": {"posts": self.posts},
            "/comments": {"comments": self.comments},
        }
        if path not in payloads:
            return httpx.Response(404)
        return httpx.Response(200, json=payloads[path])

    @property
    def total_calls(self) -> int:
        return sum(self.calls.values())


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def upstream_client(upstream: FakeUpstream) -> UpstreamClient:
    return UpstreamClient(UPSTREAM_URL, TOKEN, transport=httpx.MockTransport(upstream.handler))


@pytest.fixture
def app(upstream_client: UpstreamClient, clock: FakeClock):
    return create_app(
        config=Settings(),
        client=upstream_client,
        cache=TTLCache(ttl_seconds=60, clock=clock),
    )


@pytest.fixture
async def client(app):
    """Create test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
