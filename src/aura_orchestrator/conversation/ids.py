"""Time-derived identifiers that never repeat within a process."""

from __future__ import annotations

import threading
import time


class IdSequence:
    """Strictly increasing nanosecond stamps.

    Two ids drawn within the same clock tick are bumped apart, so ids stay unique and
    sort in creation order.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._last = 0

    def next(self) -> int:
        with self._lock:
            stamp = max(time.time_ns(), self._last + 1)
            self._last = stamp
            return stamp


_turn_ids = IdSequence()


def next_turn_id() -> str:
    """Return a zero-padded id so lexical and numeric order agree."""

    return f"{_turn_ids.next():020d}"
