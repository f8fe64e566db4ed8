"""Bookmark CRUD endpoints."""
import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_bookmark_store
from schemas.bookmark import (
    Bookmark,
    BookmarkCreate,
    BookmarkListResponse,
    BookmarkUpdate,
    CategoriesResponse,
)
from schemas.errors import ValidationErrorResponse
from schemas.validators import CategoryFilter
from services.bookmark_store import BookmarkStore

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/bookmarks",
    tags=["bookmarks"],
    responses={422: {"model": ValidationErrorResponse}},
)


@router.post("/", response_model=Bookmark, status_code=201)
async def create_bookmark(
    data: BookmarkCreate,
    store: BookmarkStore = Depends(get_bookmark_store),
) -> Bookmark:
    """Create a new bookmark at the end of the list."""
    bookmark = store.add(data)
    logger.info("Bookmark added: %s", bookmark.id)
    return bookmark


@router.get("/", response_model=BookmarkListResponse)
async def list_bookmarks(
    q: str = Query(default="", description="Search text (matches title and url, case-insensitive)"),  # noqa: E501
    category: CategoryFilter = Query(default="All", description="Category filter; 'All' matches every bookmark"),  # noqa: E501
    store: BookmarkStore = Depends(get_bookmark_store),
) -> BookmarkListResponse:
    """
    List bookmarks in insertion order, optionally filtered.

    - **q**: Substring search across title and url
    - **category**: Exact category, or 'All' (default)
    """
    items = store.filter(q, category)
    return BookmarkListResponse(items=items, total=len(items))


@router.get("/categories", response_model=CategoriesResponse)
async def list_categories() -> CategoriesResponse:
    """Get filter selector values and the categories accepted by the bookmark form."""
    return CategoriesResponse()


@router.get("/{bookmark_id}", response_model=Bookmark)
async def get_bookmark(
    bookmark_id: int,
    store: BookmarkStore = Depends(get_bookmark_store),
) -> Bookmark:
    """Get a single bookmark by ID."""
    bookmark = store.get(bookmark_id)
    if bookmark is None:
        raise HTTPException(status_code=404, detail="Bookmark not found")
    return bookmark


@router.patch("/{bookmark_id}", response_model=Bookmark)
async def update_bookmark(
    bookmark_id: int,
    data: BookmarkUpdate,
    store: BookmarkStore = Depends(get_bookmark_store),
) -> Bookmark:
    """Update a bookmark. Omitted fields keep their current values."""
    bookmark = store.update(bookmark_id, data)
    if bookmark is None:
        raise HTTPException(status_code=404, detail="Bookmark not found")
    logger.info("Bookmark updated: %s", bookmark_id)
    return bookmark


@router.delete("/{bookmark_id}", status_code=204)
async def delete_bookmark(
    bookmark_id: int,
    store: BookmarkStore = Depends(get_bookmark_store),
) -> None:
    """Delete a bookmark."""
    deleted = store.remove(bookmark_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Bookmark not found")
    logger.info("Bookmark deleted: %s", bookmark_id)
