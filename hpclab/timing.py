"""Wall-clock timing helpers."""

from __future__ import annotations

import time


def wall_time() -> float:
    """Return the current wall-clock time in seconds since the epoch."""
    return time.time()


class Timer:
    """Context manager that measures the wall-clock time spent inside it.

    ``start`` and ``stop`` hold the wall-clock readings taken on entry and
    exit. While the block is still running, ``elapsed`` reports the time so far.
    """

    def __init__(self) -> None:
        self.start: float | None = None
        self.stop: float | None = None

    def __enter__(self) -> "Timer":
        self.start = wall_time()
        self.stop = None
        return self

    def __exit__(self, *args) -> None:
        self.stop = wall_time()

    @property
    def elapsed(self) -> float:
        """Seconds between entry and exit, or between entry and now."""
        if self.start is None:
            raise RuntimeError("timer has not been started")
        end = self.stop if self.stop is not None else wall_time()
        return end - self.start