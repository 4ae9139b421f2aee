"""A high-resolution stopwatch measuring in nanoseconds."""

from __future__ import annotations

import time
from typing import Callable


class Clock:
    """Records start and stop times and reports intervals in nanoseconds."""

    def __init__(self, timer: Callable[[], int] | None = None) -> None:
        self._timer = timer if timer is not None else time.perf_counter_ns
        self._start = 0
        self._stop = 0
        self.start()
        self.stop()

    def start(self) -> None:
        """Record the current time as the start time."""
        self._start = self._timer()

    def stop(self) -> None:
        """Record the current time as the stop time."""
        self._stop = self._timer()

    def elapsed(self) -> int:
        """Nanoseconds since the last call to :meth:`start`."""
        return self._timer() - self._start

    def difference(self) -> int:
        """Nanoseconds between the last :meth:`start` and :meth:`stop`."""
        return self._stop - self._start

    def current(self) -> int:
        """The current clock count in nanoseconds."""
        return self._timer()