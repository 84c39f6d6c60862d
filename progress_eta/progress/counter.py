"""Bounded progress counter with mutation history and running average."""

import logging
import time
from typing import Optional

from .clock import TimeSource
from .models import (
    DEFAULT_SMOOTHING, DEFAULT_STARTING_AT, DEFAULT_TOTAL,
    ProgressOptions, ProgressSample
)
from ..core.exceptions import InvalidProgressError
from ..core.exceptions.progress_exceptions import INVALID_TOTAL_MESSAGE


logger = logging.getLogger(__name__)


class ProgressCounter:
    """Numeric progress counter bounded above by an optional total.

    Every mutation records a :class:`ProgressSample` and folds the new
    absolute progress into ``running_average``::

        running_average = absolute * (1 - smoothing) + running_average * smoothing

    With ``smoothing == 0`` the running average is the absolute progress
    itself, so estimates use the plain overall rate. The estimator reads this
    value by reference on every query.
    """

    def __init__(self, total: Optional[float] = DEFAULT_TOTAL,
                 smoothing: float = DEFAULT_SMOOTHING,
                 starting_at: float = DEFAULT_STARTING_AT,
                 time_source: Optional[TimeSource] = None):
        """Initialize an unstarted counter.

        Args:
            total: Upper bound for progress, or None for unbounded
            smoothing: Weight in [0, 1] kept from the previous running average
            starting_at: Progress value the counter starts from
            time_source: Callable returning the current time in seconds

        Raises:
            ConfigValidationError: If the options are invalid
        """
        ProgressOptions(total=total, smoothing=smoothing, starting_at=starting_at)

        self.time_source = time_source or time.monotonic
        self._total = total
        self.smoothing = smoothing
        self.starting_at = starting_at

        self._progress: Optional[float] = None
        self.started_at: Optional[float] = None
        self.stopped_at: Optional[float] = None
        self.last_sample: Optional[ProgressSample] = None
        self.sample_count = 0
        self.running_average = 0.0
        self._last_mutation_at: Optional[float] = None

    @classmethod
    def from_options(cls, options: ProgressOptions,
                     time_source: Optional[TimeSource] = None) -> 'ProgressCounter':
        return cls(
            total=options.total,
            smoothing=options.smoothing,
            starting_at=options.starting_at,
            time_source=time_source
        )

    # Lifecycle

    def start(self, at: Optional[float] = None) -> None:
        """Start tracking from ``starting_at``, discarding any history.

        Args:
            at: Optional new starting point

        Raises:
            InvalidProgressError: If the starting point exceeds the total
        """
        starting_at = self.starting_at if at is None else at
        self._check_within_total(starting_at)

        now = self.time_source()
        self.starting_at = starting_at
        self._progress = starting_at
        self.started_at = now
        self.stopped_at = None
        self._last_mutation_at = now
        self.last_sample = None
        self.sample_count = 0
        self.running_average = 0.0

        logger.debug("Progress started at %s (total=%s)", starting_at, self._total)

    def stop(self) -> None:
        if self.started and self.stopped_at is None:
            self.stopped_at = self.time_source()

    def reset(self) -> None:
        """Return to the unstarted state. Total, smoothing and starting point are kept."""
        self._progress = None
        self.started_at = None
        self.stopped_at = None
        self._last_mutation_at = None
        self.last_sample = None
        self.sample_count = 0
        self.running_average = 0.0

        logger.debug("Progress reset")

    def finish(self) -> None:
        """Jump straight to the total without recording a sample.

        An unbounded counter adopts its current progress as the total.
        """
        if not self.started:
            self.start()
        if self._total is None:
            self._total = self._progress
        self._progress = self._total

        logger.debug("Progress finished at %s", self._total)

    # Mutation

    @property
    def progress(self) -> Optional[float]:
        return self._progress

    @progress.setter
    def progress(self, value: float) -> None:
        self._check_within_total(value)
        if not self.started:
            self.start()

        now = self.time_source()
        self.last_sample = ProgressSample(
            elapsed=now - self._last_mutation_at,
            amount=value - self._progress
        )
        self._last_mutation_at = now
        self._progress = value
        self.sample_count += 1
        self.running_average = (
            self.absolute * (1.0 - self.smoothing) + self.running_average * self.smoothing
        )

        logger.debug("Progress %s (sample %d, %s seconds per unit)",
                     value, self.sample_count, self.last_sample.seconds_per_unit)

    def increment(self, amount: float = 1) -> None:
        if not self.started:
            self.start()
        self.progress = self._progress + amount

    def decrement(self, amount: float = 1) -> None:
        if not self.started:
            self.start()
        self.progress = self._progress - amount

    @property
    def total(self) -> Optional[float]:
        return self._total

    @total.setter
    def total(self, new_total: Optional[float]) -> None:
        if self._progress is not None and new_total is not None and new_total < self._progress:
            logger.warning("Rejected total %s below current progress %s", new_total, self._progress)
            raise InvalidProgressError(
                INVALID_TOTAL_MESSAGE, progress=self._progress, total=new_total
            )
        self._total = new_total

    def _check_within_total(self, value: float) -> None:
        if self._total is not None and value > self._total:
            logger.warning("Rejected progress %s above total %s", value, self._total)
            raise InvalidProgressError(progress=value, total=self._total)

    # Queries

    @property
    def started(self) -> bool:
        return self.started_at is not None

    @property
    def absolute(self) -> Optional[float]:
        """Net progress made since the starting point."""
        if self._progress is None:
            return None
        return self._progress - self.starting_at

    @property
    def finished(self) -> bool:
        return self._progress is not None and self._progress == self._total

    @property
    def unknown(self) -> bool:
        return self._progress is None or self._total is None

    @property
    def none(self) -> bool:
        """True while no net progress has been recorded."""
        return self.running_average == 0 or not self.absolute

    def elapsed(self) -> Optional[float]:
        """Seconds since ``start()``, frozen by ``stop()``; None before start."""
        if not self.started:
            return None
        end = self.stopped_at if self.stopped_at is not None else self.time_source()
        return end - self.started_at

    def percentage(self) -> Optional[float]:
        """Share of the span between starting point and total that is done."""
        if self._total is None or self._progress is None:
            return None
        span = self._total - self.starting_at
        if span == 0:
            return 100.0
        return self.absolute / span * 100

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(progress={self._progress!r}, "
                f"total={self._total!r}, starting_at={self.starting_at!r}, "
                f"smoothing={self.smoothing!r})")
