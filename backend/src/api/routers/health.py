"""Health check endpoints."""
import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.dependencies import get_bookmark_store
from services.bookmark_store import BookmarkStore
from services.exceptions import StorageError


logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    storage: str


@router.get("/health", response_model=HealthResponse)
async def health_check(
    store: BookmarkStore = Depends(get_bookmark_store),
) -> HealthResponse:
    """Check application and storage health."""
    storage_status = "healthy"
    try:
        store.storage.get_item(store.key)
    except StorageError:
        logger.exception("Storage health check failed")
        storage_status = "unhealthy"

    return HealthResponse(
        status="healthy" if storage_status == "healthy" else "degraded",
        storage=storage_status,
    )
