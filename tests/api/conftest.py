"""API test fixtures — per-test app, store and async HTTP client.

Invariants:
    - Every test gets a fresh TodoStore wired into a fresh app via create_app()
    - The store fixture is the same object the routes see (assert on it directly)

Design Decisions:
    - httpx ASGITransport: exercises the real routing/error stack without a socket
"""

import pytest
from httpx import ASGITransport, AsyncClient

from todo_service.core.todo_store import TodoStore
from todo_service.main import create_app


@pytest.fixture
def store():
    return TodoStore()


@pytest.fixture
def test_app(store):
    return create_app(store)


@pytest.fixture
async def client(test_app):
    """FastAPI test client bound to the per-test app."""
    async with AsyncClient(
        transport=ASGITransport(app=test_app), base_url="http://test",
    ) as c:
        yield c
