"""Unique timestamp issuing for notes created without a timestamp."""

import logging
import threading
import time
from datetime import datetime
from typing import Callable, Optional

from backend.app.core.time import from_epoch_millis

logger = logging.getLogger(__name__)


def _wall_clock_millis() -> int:
    return time.time_ns() // 1_000_000


class TimestampClock:
    """Issues millisecond timestamps that strictly increase across calls.

    When the time source has not advanced past the last issued value (two calls
    within the same millisecond, or the wall clock stepping back) the last
    value is bumped by one millisecond instead.
    """

    def __init__(self, time_source: Optional[Callable[[], int]] = None):
        self._time_source = time_source or _wall_clock_millis
        self._last_issued = 0
        self._lock = threading.Lock()

    @property
    def last_issued(self) -> int:
        """Epoch milliseconds of the most recently issued timestamp, 0 if none."""
        return self._last_issued

    def next_unique_millis(self) -> int:
        with self._lock:
            now = self._time_source()
            if now <= self._last_issued:
                self._last_issued += 1
                logger.debug("Clock at %d not past last issued; bumped to %d", now, self._last_issued)
            else:
                self._last_issued = now
            return self._last_issued

    def next_unique_timestamp(self) -> datetime:
        """Return the next unique timestamp as a naive UTC datetime."""
        return from_epoch_millis(self.next_unique_millis())

    def reset(self) -> None:
        with self._lock:
            self._last_issued = 0


_clock_instance = None
_clock_lock = threading.Lock()


def get_clock() -> TimestampClock:
    """Return the process-wide TimestampClock."""
    global _clock_instance
    if _clock_instance is None:
        with _clock_lock:
            if _clock_instance is None:
                _clock_instance = TimestampClock()
    return _clock_instance
