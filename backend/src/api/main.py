"""FastAPI application entry point."""
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routers import bookmarks, health
from core.config import get_settings
from schemas.errors import ValidationErrorResponse, field_errors
from services.bookmark_store import BookmarkStore
from services.storage import create_storage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan - startup and shutdown."""
    app_settings = get_settings()

    # Startup: load the bookmark list once for this session
    storage = create_storage(app_settings.storage_file)
    app.state.bookmark_store = BookmarkStore(storage, key=app_settings.storage_key)
    logger.info(
        "Loaded %d bookmarks from '%s'",
        len(app.state.bookmark_store.bookmarks),
        app_settings.storage_key,
    )

    yield

    # Shutdown: every mutation is already persisted, just drop the store
    app.state.bookmark_store = None


app_settings = get_settings()

app = FastAPI(
    title="Smart Bookmarks API",
    description="A bookmark manager with category filtering and search.",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    _request: Request, exc: RequestValidationError,
) -> JSONResponse:
    """Report validation failures as one message per field."""
    body = ValidationErrorResponse(errors=field_errors(exc.errors()))
    return JSONResponse(status_code=422, content=body.model_dump())


app.add_middleware(
    CORSMiddleware,
    allow_origins=app_settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(bookmarks.router)
