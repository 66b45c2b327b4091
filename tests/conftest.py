"""
Shared test fixtures.

These give every test its own isolated, deterministic setup:
- FakeClock → timestamps advance one second per call, so created_at /
  processed_at are predictable and strictly increasing
- JobScheduler → fresh per test, wired to the fake clock
- HTTP server → httpx.AsyncClient with ASGI transport (no network)

This means tests:
- Run in milliseconds (no network, no sleeping)
- Are fully isolated (each test gets a fresh scheduler)
"""

from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from api.main import create_app
from scheduler.job_scheduler import JobScheduler

START_TIME = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class FakeClock:
    """Returns START_TIME, then one second later on every call."""

    def __init__(self, start: datetime = START_TIME, step: timedelta = timedelta(seconds=1)):
        self.start = start
        self.now = start
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now += self.step
        return current


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    return JobScheduler(clock=clock)


@pytest.fixture
def app(scheduler):
    return create_app(scheduler)


@pytest_asyncio.fixture
async def client(app):
    """
    Create a test HTTP client that talks directly to the FastAPI app.

    The app owns the `scheduler` fixture, so a test can arrange state through
    the scheduler and assert through HTTP (or the other way around).

    ASGITransport means requests go directly to the app in-process,
    no HTTP server or network involved.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
