"""
Key-value storage for the persisted bookmark slot.

Mirrors the browser local-storage model: string values under string keys.
`JsonFileStorage` keeps every key in one JSON object on disk and rewrites it
atomically (temp file + fsync + replace), so a crash never leaves a partially
written file behind.
"""
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

from services.exceptions import StorageError

logger = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    """Protocol for persisted slot backends."""

    def get_item(self, key: str) -> str | None:
        """Return the stored value, or None if the key is absent."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""
        ...

    def remove_item(self, key: str) -> None:
        """Remove a key. Removing an absent key is a no-op."""
        ...


class MemoryStorage:
    """Dict-backed storage. Nothing survives the process."""

    def __init__(self, items: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileStorage:
    """Storage backed by a single JSON object file."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def get_item(self, key: str) -> str | None:
        value = self._read().get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise StorageError(f"Value for key '{key}' in {self.path} is not a string")
        return value

    def set_item(self, key: str, value: str) -> None:
        items = self._read(discard_corrupt=True)
        items[key] = value
        self._write(items)

    def remove_item(self, key: str) -> None:
        items = self._read(discard_corrupt=True)
        if key not in items:
            return
        del items[key]
        self._write(items)

    def _read(self, *, discard_corrupt: bool = False) -> dict[str, object]:
        """
        Load the key-value object from disk.

        With `discard_corrupt`, content that cannot be decoded is treated as an
        empty store so the next write replaces it. I/O errors always raise.
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as e:
            raise StorageError(f"Could not read {self.path}: {e}") from e
        except UnicodeDecodeError as e:
            message = f"Storage file {self.path} is not valid UTF-8: {e}"
            return self._corrupt(message, discard_corrupt)
        if not text.strip():
            return {}
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            message = f"Storage file {self.path} is not valid JSON: {e}"
            return self._corrupt(message, discard_corrupt)
        if not isinstance(data, dict):
            return self._corrupt(
                f"Storage file {self.path} does not contain a JSON object", discard_corrupt,
            )
        return data

    def _corrupt(self, message: str, discard: bool) -> dict[str, object]:
        if not discard:
            raise StorageError(message)
        logger.warning("%s; replacing it", message)
        return {}

    def _write(self, items: dict[str, object]) -> None:
        tmp_path: Path | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=str(self.path.parent),
            )
            tmp_path = Path(tmp_name)
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(items, handle, indent=2)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_path, self.path)
            tmp_path = None
        except OSError as e:
            raise StorageError(f"Could not write {self.path}: {e}") from e
        finally:
            if tmp_path is not None and tmp_path.exists():
                try:
                    tmp_path.unlink()
                except OSError:
                    logger.warning("Could not remove temporary file %s", tmp_path)


def create_storage(path: Path | None) -> KeyValueStorage:
    """Build file storage for a path, or in-memory storage when no path is configured."""
    if path is None:
        logger.info("No storage path configured; bookmarks will not persist")
        return MemoryStorage()
    return JsonFileStorage(path)
