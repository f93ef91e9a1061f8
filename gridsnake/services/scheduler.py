"""
Tick sources that drive the game loop.

All tickers call the step callback synchronously on the caller's thread, so a
step never overlaps with input handling or painting.

 - ScheduleTicker: fixed-rate ticker for interactive play, backed by `schedule`
 - ManualTicker: ticks only when told to, for headless replays and tests
"""

import logging
import time
from typing import Callable, Optional

import schedule

from gridsnake.domain.constants import DEFAULT_TICK_HZ

logger = logging.getLogger(__name__)

IDLE_SLEEP_SECONDS = 0.01


class Ticker:
    """
    Base class/interface for tick sources.

    A ticker holds at most one callback at a time; `active` reports whether a
    loop is currently ticking.
    """

    def __init__(self):
        self._callback: Optional[Callable[[], object]] = None

    @property
    def active(self) -> bool:
        return self._callback is not None

    def start(self, callback: Callable[[], object]) -> None:
        if self.active:
            logger.debug("Ticker already active; ignoring start()")
            return
        self._callback = callback

    def stop(self) -> None:
        self._callback = None


class ManualTicker(Ticker):
    """A ticker advanced explicitly with tick()."""

    def tick(self, count: int = 1) -> int:
        """
        Invoke the callback up to `count` times, stopping early if it stops the ticker.

        Returns:
            Number of ticks actually delivered.
        """
        delivered = 0
        for _ in range(count):
            if not self.active:
                break
            self._callback()
            delivered += 1
        return delivered


class ScheduleTicker(Ticker):
    """
    Fixed-rate ticker built on a private schedule.Scheduler.

    The owner pumps it with run_pending() (or run_until()) from its own loop.
    """

    def __init__(self, hz: float = DEFAULT_TICK_HZ):
        super().__init__()
        if hz <= 0:
            raise ValueError(f"Tick rate must be positive, got {hz}.")
        self.hz = hz
        self._scheduler = schedule.Scheduler()
        self._job: Optional[schedule.Job] = None

    @property
    def interval(self) -> float:
        return 1.0 / self.hz

    def start(self, callback: Callable[[], object]) -> None:
        if self.active:
            logger.debug("Ticker already active; ignoring start()")
            return
        super().start(callback)
        self._job = self._scheduler.every(self.interval).seconds.do(self._fire)
        logger.debug("Ticking every %.3fs", self.interval)

    def stop(self) -> None:
        if self._job is not None:
            self._scheduler.cancel_job(self._job)
            self._job = None
        super().stop()

    def _fire(self) -> None:
        # Returning schedule.CancelJob would cancel the job, so never pass
        # the callback's result through.
        if self._callback is not None:
            self._callback()

    def run_pending(self) -> None:
        self._scheduler.run_pending()

    def run_until(self, done: Callable[[], bool], poll: Optional[Callable[[], None]] = None) -> None:
        """
        Block, pumping ticks until `done()` is true.

        Args:
            done: predicate checked once per loop iteration
            poll: optional hook run every iteration (e.g. to read input)
        """
        while not done():
            if poll is not None:
                poll()
            self.run_pending()
            time.sleep(IDLE_SLEEP_SECONDS)
