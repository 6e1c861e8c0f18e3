"""Thread-safe conversion of timestamps to local broken-down time."""

from __future__ import annotations

import threading
import time

__all__ = ["localtime"]

_lock = threading.Lock()


def localtime(timestamp: float | None = None) -> time.struct_time:
    """Return the local time for ``timestamp`` (now if None), serialised by a lock."""
    with _lock:
        return time.localtime(timestamp)