"""Deadline tracking for operations bounded by a timeout."""

from __future__ import annotations

import time
from typing import Callable, Optional, Tuple

__all__ = ["Timeout"]


class Timeout:
    """A timeout of ``timeout`` seconds measured from ``start``.

    ``clock`` returns the current time in seconds and defaults to a
    monotonic clock; ``start`` defaults to the clock's current time.
    """

    def __init__(
        self,
        timeout: float,
        start: Optional[float] = None,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if not timeout > 0:
            raise ValueError("timeout must be positive and non-zero")
        self._clock = clock
        self.timeout = timeout
        self.start = clock() if start is None else start

    def elapsed(self) -> float:
        """Return the seconds elapsed since the start time."""
        return self._clock() - self.start

    def remaining(self) -> float:
        """Return the seconds left until expiry, never below zero."""
        return max(0.0, self.timeout - self.elapsed())

    def remaining_timeval(self) -> Tuple[int, int]:
        """Return the remaining time as ``(seconds, microseconds)``."""
        micros = int(self.remaining() * 1_000_000)
        seconds, usec = divmod(micros, 1_000_000)
        return seconds, usec

    def is_expired(self) -> bool:
        """Return True once the timeout has been reached."""
        return self.elapsed() >= self.timeout

    def __repr__(self) -> str:
        return f"Timeout(timeout={self.timeout!r}, start={self.start!r})"