"""Time sources for the control loop.

The controller never sleeps directly. Every delay goes through a clock so the
state lock is released while the car is "travelling", and so tests can swap
in :class:`ManualClock` to run whole simulations without wall-clock delay.
"""

from __future__ import annotations

import threading
import time
from typing import Callable, List, Protocol


class Clock(Protocol):
    def now(self) -> float:
        ...

    def wait(
        self,
        condition: threading.Condition,
        timeout: float,
        predicate: Callable[[], bool],
    ) -> bool:
        """Block for up to ``timeout`` seconds or until ``predicate`` holds.

        ``condition`` must be held by the caller. Returns the final value of
        ``predicate``.
        """
        ...


class SystemClock:
    """Wall-clock time; waits release the condition's lock."""

    def now(self) -> float:
        return time.monotonic()

    def wait(
        self,
        condition: threading.Condition,
        timeout: float,
        predicate: Callable[[], bool],
    ) -> bool:
        return condition.wait_for(predicate, timeout)


class ManualClock:
    """Virtual time that jumps forward instead of blocking.

    Waits never release the condition, so this clock is meant for loops
    driven on the calling thread with ``run()`` or ``step()``. A worker
    thread started with ``start()`` on this clock spins while the car idles.
    """

    def __init__(self, start: float = 0.0) -> None:
        self._now = start
        self.waits: List[float] = []

    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> None:
        self._now += seconds

    def wait(
        self,
        condition: threading.Condition,
        timeout: float,
        predicate: Callable[[], bool],
    ) -> bool:
        if predicate():
            return True
        self.waits.append(timeout)
        self._now += timeout
        return predicate()
