"""
Cooperative repeating timer.

The timer never runs on its own thread: the host loop calls ``poll()`` and
the callback fires there once the period has elapsed. This keeps every game
mutation on the host loop's single thread.
"""

import time
from typing import Callable, Optional


class IntervalTimer:
    """Fire a callback every ``interval`` seconds while active."""

    def __init__(self, interval: float, clock: Callable[[], float] = time.monotonic):
        if interval < 0:
            raise ValueError(f"Timer interval must not be negative, got {interval}")
        self.interval = interval
        self.clock = clock
        self._callback: Optional[Callable[[], None]] = None
        self._next_due: Optional[float] = None

    @property
    def active(self) -> bool:
        return self._callback is not None

    def start(self, callback: Callable[[], None]):
        self._callback = callback
        self._next_due = self.clock() + self.interval

    def cancel(self):
        self._callback = None
        self._next_due = None

    def seconds_until_due(self, now: Optional[float] = None) -> float:
        if not self.active:
            return 0.0
        if now is None:
            now = self.clock()
        return max(0.0, self._next_due - now)

    def poll(self, now: Optional[float] = None) -> bool:
        """
        Run the callback if it is due.

        A late poll fires once and reschedules from ``now`` instead of
        replaying every missed period.

        Returns:
            True if the callback ran.
        """
        if not self.active:
            return False
        if now is None:
            now = self.clock()
        if now < self._next_due:
            return False

        self._callback()

        # The callback may have cancelled the timer
        if self.active:
            self._next_due += self.interval
            if self._next_due <= now:
                self._next_due = now + self.interval
        return True
