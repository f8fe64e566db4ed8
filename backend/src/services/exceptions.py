"""Shared exceptions for service layer operations."""


class StorageError(Exception):
    """
    Raised when the persisted key-value slot cannot be read or written.

    Storage adapters raise this for any underlying I/O or decoding failure so
    callers only need to handle one exception type. The bookmark store catches
    it at its boundary and falls back instead of propagating.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
