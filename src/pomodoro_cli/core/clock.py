"""Monotonic clock abstraction used by the countdown loop.

The session controller never calls ``time`` directly. It reads instants and
waits through a ``Clock``, so tests can swap in ``VirtualClock`` and run a
full 20 minute countdown without sleeping.

Instants are integer nanoseconds from an arbitrary epoch. Only the
difference between two readings is meaningful.
"""

from __future__ import annotations

import time
from typing import Protocol, runtime_checkable

NANOS_PER_SECOND = 1_000_000_000


def seconds_to_nanos(seconds: float) -> int:
    """Convert a span in seconds to whole nanoseconds."""
    return int(round(seconds * NANOS_PER_SECOND))


@runtime_checkable
class Clock(Protocol):
    """Monotonic time source with a blocking delay."""

    def now(self) -> int:
        """Return monotonic nanoseconds."""
        ...

    def delay(self, seconds: float) -> None:
        """Suspend the caller for ``seconds``."""
        ...


class RealClock:
    """Production clock backed by time.monotonic_ns() and time.sleep()."""

    def now(self) -> int:
        return time.monotonic_ns()

    def delay(self, seconds: float) -> None:
        time.sleep(seconds)


class VirtualClock:
    """Deterministic clock for tests.

    ``delay`` moves the internal instant forward by exactly the requested
    span and returns immediately.
    """

    def __init__(self, start: int | None = None):
        self._now = time.monotonic_ns() if start is None else int(start)
        self.delays: list[float] = []

    def now(self) -> int:
        return self._now

    def delay(self, seconds: float) -> None:
        if seconds < 0:
            raise ValueError("seconds must be >= 0")
        self.delays.append(seconds)
        self._now += seconds_to_nanos(seconds)

    def advance(self, seconds: float) -> None:
        """Alias for delay()."""
        self.delay(seconds)
