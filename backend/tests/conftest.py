"""Pytest fixtures for testing."""
from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from services.bookmark_store import BookmarkStore
from services.id_generator import MonotonicIdGenerator
from services.storage import MemoryStorage


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, now_ms: int = 1_700_000_000_000) -> None:
        self.now_ms = now_ms

    def __call__(self) -> int:
        return self.now_ms

    def advance(self, ms: int) -> None:
        self.now_ms += ms


@pytest.fixture
def clock() -> FakeClock:
    """A frozen clock for deterministic ids."""
    return FakeClock()


@pytest.fixture
def memory_storage() -> MemoryStorage:
    """Empty in-memory storage."""
    return MemoryStorage()


@pytest.fixture
def store(memory_storage: MemoryStorage, clock: FakeClock) -> BookmarkStore:
    """A store seeded with the default bookmarks (storage starts empty)."""
    return BookmarkStore(memory_storage, id_generator=MonotonicIdGenerator(clock))


@pytest.fixture
async def client(store: BookmarkStore) -> AsyncGenerator[AsyncClient]:
    """Create a test client with the bookmark store overridden."""
    from api.dependencies import get_bookmark_store
    from api.main import app

    app.dependency_overrides[get_bookmark_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as test_client:
        yield test_client

    app.dependency_overrides.clear()
