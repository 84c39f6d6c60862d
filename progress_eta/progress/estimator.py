"""Estimated time remaining, derived from a clock and a progress counter."""

import logging
from typing import Optional, Union

from .clock import Clock
from .counter import ProgressCounter
from .formatting import UNKNOWN_TIME, format_friendly_days, format_hms, round_half_up
from .models import OutOfBoundsFormat, ProgressOptions
from ..core.exceptions import ClockNotStartedError, InvalidOutOfBoundsFormatError


logger = logging.getLogger(__name__)

ETA_LABEL = ' ETA: '
ELAPSED_LABEL = ' Time: '
MAX_DISPLAY_HOURS = 99


class EstimatedTimeEstimator:
    """Projects the time remaining until the counter reaches its total.

    Holds references to the clock and counter, never copies, so every query
    sees their current state. The only rate state is the counter's running
    average of absolute progress; with it the projection is::

        elapsed * ((total - starting_at) / running_average - 1)

    rounded half up to whole seconds. The estimate is unknown until the clock
    has started and the counter has recorded net progress.
    """

    def __init__(self, clock: Clock, counter: ProgressCounter,
                 out_of_bounds_time_format: Union[OutOfBoundsFormat, str, None] = None):
        """Initialize estimator.

        Args:
            clock: Clock measuring elapsed time (may be started later)
            counter: Progress counter being tracked (may be started later)
            out_of_bounds_time_format: Display for estimates of 100 hours or more
        """
        self.clock = clock
        self.counter = counter
        self._out_of_bounds_time_format = OutOfBoundsFormat.RAW
        self.out_of_bounds_time_format = out_of_bounds_time_format

    @classmethod
    def from_options(cls, clock: Clock, counter: ProgressCounter,
                     options: ProgressOptions) -> 'EstimatedTimeEstimator':
        return cls(clock, counter, options.out_of_bounds_format)

    @property
    def out_of_bounds_time_format(self) -> OutOfBoundsFormat:
        return self._out_of_bounds_time_format

    @out_of_bounds_time_format.setter
    def out_of_bounds_time_format(self, value: Union[OutOfBoundsFormat, str, None]) -> None:
        try:
            new_format = OutOfBoundsFormat.parse(value)
        except InvalidOutOfBoundsFormatError:
            logger.warning("Rejected out of bounds time format %r", value)
            raise
        self._out_of_bounds_time_format = new_format
        logger.debug("Out of bounds time format set to %s", new_format.value)

    def _elapsed(self) -> Optional[float]:
        try:
            return self.clock.elapsed()
        except ClockNotStartedError:
            return None

    def _has_rate(self) -> bool:
        counter = self.counter
        return counter.started and not counter.none and counter.running_average > 0

    def seconds_per_unit(self) -> Optional[float]:
        """Current smoothed seconds per unit of progress, or None when unknown."""
        elapsed = self._elapsed()
        if elapsed is None or not self._has_rate():
            return None
        return elapsed / self.counter.running_average

    def estimated_seconds_remaining(self) -> Optional[int]:
        """Whole seconds left, never negative; None while the estimate is unknown."""
        counter = self.counter
        if counter.unknown:
            return None

        elapsed = self._elapsed()
        if elapsed is None:
            return None

        if counter.finished:
            return 0
        if not self._has_rate():
            return None

        # Running average can exceed the span after decrements and a lowered total
        span = counter.total - counter.starting_at
        if counter.running_average >= span:
            return 0
        return round_half_up(elapsed * ((span / counter.running_average) - 1))

    def estimated_time(self) -> str:
        """The time part of the label: ``HH:MM:SS``, ``??:??:??`` or ``> N Days``."""
        seconds = self.estimated_seconds_remaining()
        if seconds is None:
            return UNKNOWN_TIME

        if seconds // 3600 > MAX_DISPLAY_HOURS:
            if self._out_of_bounds_time_format is OutOfBoundsFormat.UNKNOWN:
                return UNKNOWN_TIME
            if self._out_of_bounds_time_format is OutOfBoundsFormat.FRIENDLY:
                return format_friendly_days(seconds)

        return format_hms(seconds)

    def label_with_elapsed_fallback(self) -> str:
        """Elapsed ``Time:`` label once the counter is finished, the ETA label before."""
        elapsed = self._elapsed()
        if self.counter.finished and elapsed is not None:
            return f"{ELAPSED_LABEL}{format_hms(int(elapsed))}"
        return str(self)

    def __str__(self) -> str:
        return f"{ETA_LABEL}{self.estimated_time()}"

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(counter={self.counter!r}, "
                f"out_of_bounds_time_format={self._out_of_bounds_time_format.value!r})")
