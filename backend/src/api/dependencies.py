"""FastAPI dependencies for injection."""
from fastapi import Request

from services.bookmark_store import BookmarkStore


def get_bookmark_store(request: Request) -> BookmarkStore:
    """Return the store created for this application during startup."""
    return request.app.state.bookmark_store


__all__ = [
    "get_bookmark_store",
]
