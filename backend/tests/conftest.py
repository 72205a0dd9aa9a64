"""Shared test fixtures.

Forces the in-memory repository and a fixed session secret before the
app is imported, and resets the dependency singletons around each test
so no users leak between tests.
"""

from __future__ import annotations

import os
from typing import Any, AsyncIterator, Generator, cast

import pytest
import pytest_asyncio

os.environ["USER_REPOSITORY"] = "inmemory"
os.environ.setdefault("SESSION_SECRET", "test-session-secret")
os.environ.pop("ENVIRONMENT", None)

from httpx import ASGITransport, AsyncClient  # noqa: E402

from api.dependencies import reset_dependencies  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_dependencies() -> Generator[None, None, None]:
    """Fresh repository, services and event bus for every test."""
    reset_dependencies()
    try:
        yield
    finally:
        reset_dependencies()


@pytest_asyncio.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client bound to the ASGI app.

    The client keeps cookies between requests, so a signup followed by
    whoami runs inside one session.
    """
    from app import app

    transport = ASGITransport(app=cast(Any, app))
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac
