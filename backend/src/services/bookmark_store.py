"""In-memory bookmark list mirrored to a persisted key-value slot."""
import json
import logging

from pydantic import TypeAdapter, ValidationError

from schemas.bookmark import Bookmark, BookmarkCreate, BookmarkUpdate
from schemas.validators import CATEGORY_ALL
from services.exceptions import StorageError
from services.id_generator import MonotonicIdGenerator
from services.storage import KeyValueStorage

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "smart-bookmarks"

SEED_BOOKMARKS: tuple[Bookmark, ...] = (
    Bookmark(id=1, title="GitHub", url="https://github.com", category="Dev"),
    Bookmark(id=2, title="ChatGPT", url="https://chat.openai.com", category="AI"),
    Bookmark(id=3, title="MDN Web Docs", url="https://developer.mozilla.org", category="Learning"),
    Bookmark(id=4, title="Vercel", url="https://vercel.com", category="Tools"),
    Bookmark(id=5, title="Stack Overflow", url="https://stackoverflow.com", category="Dev"),
    Bookmark(id=6, title="Figma", url="https://figma.com", category="Tools"),
)

_bookmark_list_adapter = TypeAdapter(list[Bookmark])


def filter_bookmarks(
    records: list[Bookmark],
    search_text: str,
    category: str,
) -> list[Bookmark]:
    """
    Filter bookmarks by text and category.

    A record matches when its title or url contains `search_text`
    (case-insensitive) and its category equals `category`, unless `category`
    is "All". Input order is preserved.

    Args:
        records: Bookmarks to filter.
        search_text: Substring to look for. Empty matches everything.
        category: Category to keep, or "All".

    Returns:
        Matching bookmarks in input order.
    """
    needle = search_text.lower()
    return [
        record
        for record in records
        if (needle in record.title.lower() or needle in record.url.lower())
        and (category == CATEGORY_ALL or record.category == category)
    ]


class BookmarkStore:
    """
    Ordered bookmark list owned by a single session.

    The list loaded at construction is authoritative. Every mutation swaps in a
    new list and then rewrites the whole list to storage. Storage failures are
    logged and never raised, so the store is always usable.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        key: str = DEFAULT_STORAGE_KEY,
        id_generator: MonotonicIdGenerator | None = None,
    ) -> None:
        self.storage = storage
        self.key = key
        self._ids = id_generator or MonotonicIdGenerator()
        self._bookmarks: list[Bookmark] = self.load()
        for bookmark in self._bookmarks:
            self._ids.observe(bookmark.id)

    @property
    def bookmarks(self) -> list[Bookmark]:
        """Snapshot of the current list."""
        return list(self._bookmarks)

    def load(self) -> list[Bookmark]:
        """
        Read the persisted list, falling back to the seed list.

        An absent or empty slot, unreadable storage, malformed JSON, or JSON
        that is not a list of bookmark objects all return a copy of
        SEED_BOOKMARKS. Category values are not checked here.
        """
        try:
            raw = self.storage.get_item(self.key)
        except StorageError:
            logger.exception("Error loading bookmarks from storage")
            return list(SEED_BOOKMARKS)

        if not raw:
            return list(SEED_BOOKMARKS)

        try:
            return _bookmark_list_adapter.validate_json(raw)
        except ValidationError as e:
            logger.warning(
                "Stored bookmarks under '%s' could not be parsed (%d errors); using defaults",
                self.key,
                e.error_count(),
            )
            return list(SEED_BOOKMARKS)

    def save(self, bookmarks: list[Bookmark]) -> None:
        """Overwrite the persisted slot with `bookmarks`. Failures are logged, not raised."""
        payload = json.dumps([bookmark.model_dump() for bookmark in bookmarks])
        try:
            self.storage.set_item(self.key, payload)
        except StorageError:
            logger.exception("Error saving bookmarks to storage")

    def get(self, bookmark_id: int) -> Bookmark | None:
        """Get a bookmark by ID. Returns None if not found."""
        for bookmark in self._bookmarks:
            if bookmark.id == bookmark_id:
                return bookmark
        return None

    def add(self, data: BookmarkCreate) -> Bookmark:
        """Append a new bookmark with a fresh id and persist the list."""
        bookmark = Bookmark(id=self._ids.next_id(), **data.model_dump())
        self._commit([*self._bookmarks, bookmark])
        return bookmark

    def update(self, bookmark_id: int, data: BookmarkUpdate) -> Bookmark | None:
        """
        Replace the supplied fields of a bookmark, keeping its position.

        Returns None without touching storage if no bookmark has that id.
        """
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        updated: Bookmark | None = None
        bookmarks = []
        for bookmark in self._bookmarks:
            if bookmark.id == bookmark_id:
                updated = bookmark.model_copy(update=changes)
                bookmarks.append(updated)
            else:
                bookmarks.append(bookmark)

        if updated is None:
            return None
        self._commit(bookmarks)
        return updated

    def remove(self, bookmark_id: int) -> bool:
        """Delete a bookmark. Returns True if deleted, False if not found."""
        bookmarks = [b for b in self._bookmarks if b.id != bookmark_id]
        if len(bookmarks) == len(self._bookmarks):
            return False
        self._commit(bookmarks)
        return True

    def filter(self, search_text: str = "", category: str = CATEGORY_ALL) -> list[Bookmark]:
        """Filter the current list. See `filter_bookmarks`."""
        return filter_bookmarks(self._bookmarks, search_text, category)

    def _commit(self, bookmarks: list[Bookmark]) -> None:
        self._bookmarks = bookmarks
        self.save(bookmarks)
