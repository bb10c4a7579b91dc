"""
Shared pytest fixtures: a fresh application per test with an isolated
store, a controllable clock and a temporary public directory.
"""
import pytest
from fastapi.testclient import TestClient

from contact_inbox.config import Settings
from contact_inbox.database import InMemoryMessageStore
from contact_inbox.guard import SlidingWindowRateLimiter
from main import create_app


class FakeClock:
    """Monotonic clock moved by hand."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def public_dir(tmp_path):
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_text("<h1>Contact us</h1>")
    (public / "style.css").write_text("body { margin: 0; }")
    return public


@pytest.fixture
def make_client(public_dir, clock):
    """Build a TestClient for an app with the given settings overrides."""
    clients = []

    def factory(**overrides):
        values = {"PUBLIC_DIR": str(public_dir), "RATE_LIMIT_MAX_SUBMISSIONS": 100}
        values.update(overrides)
        settings = Settings(**values)
        store = InMemoryMessageStore()
        limiter = SlidingWindowRateLimiter(
            max_attempts=settings.RATE_LIMIT_MAX_SUBMISSIONS,
            window_seconds=settings.RATE_LIMIT_WINDOW_SECONDS,
            clock=clock
        )
        client = TestClient(create_app(settings, store=store, rate_limiter=limiter))
        client.__enter__()
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client):
    return make_client()


@pytest.fixture
def valid_payload():
    return {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "message": "Hello, I would like to know more."
    }
