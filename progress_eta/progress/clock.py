"""Elapsed-time clock with start/stop/reset and pause semantics."""

import logging
import math
import time
from typing import Callable, Optional

from ..core.exceptions import ClockNotStartedError


logger = logging.getLogger(__name__)

TimeSource = Callable[[], float]


class Clock:
    """Wall-clock style elapsed time tracker.

    Elapsed time is read from ``time_source`` on demand; nothing ticks in the
    background.
    """

    def __init__(self, time_source: Optional[TimeSource] = None):
        """Initialize an unstarted clock.

        Args:
            time_source: Callable returning the current time in seconds
                (defaults to ``time.monotonic``)
        """
        self.time_source = time_source or time.monotonic
        self.started_at: Optional[float] = None
        self.stopped_at: Optional[float] = None

    @property
    def started(self) -> bool:
        return self.started_at is not None

    @property
    def stopped(self) -> bool:
        return self.stopped_at is not None

    @property
    def running(self) -> bool:
        return self.started and not self.stopped

    @property
    def is_reset(self) -> bool:
        return self.started_at is None

    def start(self) -> None:
        """Start (or re-stamp) the clock, clearing any stop time."""
        self.started_at = self.time_source()
        self.stopped_at = None
        logger.debug("Clock started at %s", self.started_at)

    def stop(self) -> None:
        """Freeze elapsed time. Does nothing if the clock never started."""
        if not self.started:
            return
        self.stopped_at = self.time_source()
        logger.debug("Clock stopped at %s", self.stopped_at)

    def pause(self) -> None:
        self.stop()

    def resume(self) -> None:
        """Continue counting from the frozen elapsed time.

        Paused time is excluded. Resuming a clock that is not stopped is the
        same as ``start()``.
        """
        if not self.stopped:
            self.start()
            return
        frozen = self.stopped_at - self.started_at
        self.started_at = self.time_source() - frozen
        self.stopped_at = None
        logger.debug("Clock resumed with %.3fs already elapsed", frozen)

    def reset(self) -> None:
        self.started_at = None
        self.stopped_at = None
        logger.debug("Clock reset")

    def restart(self) -> None:
        self.reset()
        self.start()

    def elapsed(self) -> float:
        """Seconds since start, frozen at the stop time when stopped.

        Raises:
            ClockNotStartedError: If the clock has not been started
        """
        if not self.started:
            raise ClockNotStartedError()
        end = self.stopped_at if self.stopped else self.time_source()
        return end - self.started_at

    def elapsed_whole_seconds(self) -> int:
        return math.floor(self.elapsed())
