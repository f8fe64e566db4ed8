"""Monotonic, clock-derived bookmark ids."""
import time
from collections.abc import Callable


def current_time_ms() -> int:
    """Wall-clock time in milliseconds."""
    return time.time_ns() // 1_000_000


class MonotonicIdGenerator:
    """
    Issue integer ids from a millisecond clock without ever repeating one.

    Each id is the current clock reading, bumped to one past the previous id
    when the clock has not advanced (same tick) or has gone backwards.
    """

    def __init__(self, clock_ms: Callable[[], int] = current_time_ms) -> None:
        self._clock_ms = clock_ms
        self._last = 0

    def observe(self, existing_id: int) -> None:
        """Advance past an id that is already in use."""
        self._last = max(self._last, existing_id)

    def next_id(self) -> int:
        """Return a fresh id greater than every id issued or observed so far."""
        self._last = max(self._clock_ms(), self._last + 1)
        return self._last
