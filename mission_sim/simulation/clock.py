"""Time sources for the simulation loop."""

import time
from typing import Protocol


class Clock(Protocol):
    """Anything that reports elapsed seconds from an arbitrary epoch."""

    def now(self) -> float: ...


class MonotonicClock:
    """Wall clock backed by ``time.monotonic``."""

    def now(self) -> float:
        return time.monotonic()


class ManualClock:
    """Clock advanced explicitly, for deterministic runs and tests."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = start

    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> None:
        """Move the clock forward by ``seconds``."""
        if seconds < 0:
            raise ValueError(f"Cannot move a clock backwards by {seconds} seconds")
        self._now += seconds
