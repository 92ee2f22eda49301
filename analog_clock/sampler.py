from __future__ import annotations

from datetime import timedelta
from typing import Protocol

from .clock import WallClock
from .clock_time import ClockTime, next_wake_delay, round_to_second
from .log import get_logger

logger = get_logger(__name__)


class TimerService(Protocol):
    """One-shot timer primitive supplied by the event loop."""

    def request_timer(self, delay: timedelta) -> int:
        """Schedule a single wake after ``delay``; return its token."""
        ...


class TimeSampler:
    """Keeps one ClockTime fresh with a single wake per second.

    - The schedule is one-shot and re-armed from the actual clock reading on
      every wake, never a fixed-period interval.
    - At most one token is outstanding; wakes carrying any other token are
      stale and ignored.
    """

    def __init__(self, *, clock: WallClock, timer: TimerService) -> None:
        self._clock = clock
        self._timer = timer
        self._token: int | None = None
        # Unrounded is fine for the first paint; the first wake settles the cadence.
        self._current = ClockTime.from_datetime(clock.now())

    @property
    def current(self) -> ClockTime:
        return self._current

    @property
    def token(self) -> int | None:
        return self._token

    def start(self) -> None:
        """Arm the first wake (the window is connected)."""

        self._arm(self._clock.now().microsecond * 1000)

    def on_wake(self, token: int) -> bool:
        """Handle a wake event. Returns True if the displayed second changed."""

        if self._token is None or token != self._token:
            logger.debug("Ignoring stale wake token %s (current %s)", token, self._token)
            return False

        moment = self._clock.now()
        self._arm(moment.microsecond * 1000)

        sampled = round_to_second(moment)
        changed = sampled != self._current
        self._current = sampled
        return changed

    def _arm(self, nanosecond: int) -> None:
        delay = next_wake_delay(nanosecond)
        self._token = self._timer.request_timer(delay)
        logger.debug("Armed wake token %s in %.6fs", self._token, delay.total_seconds())
