from __future__ import annotations
import itertools
import threading


class SequenceCounter:
    """Monotonic record id source, safe to share between threads.

    Ids start at 1. Every id handed out is used by exactly one Record.
    """

    def __init__(self, start: int = 1):
        self._lock = threading.Lock()
        self._ids = itertools.count(start)
        self._last = start - 1

    def allocate_next_id(self) -> int:
        with self._lock:
            self._last = next(self._ids)
            return self._last

    @property
    def last(self) -> int:
        """Most recently allocated id (0 before the first allocation)."""
        return self._last


# shared by the default logging context and loggers created without one
DEFAULT_COUNTER = SequenceCounter()
