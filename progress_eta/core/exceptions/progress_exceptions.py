"""Exceptions raised by the progress/clock/estimator triad."""

from typing import Any, Optional

from .base_exceptions import ProgressEtaError


INVALID_PROGRESS_MESSAGE = "You can't set the item's current value to be greater than the total."
INVALID_TOTAL_MESSAGE = "You can't set the item's total value to be less than the current progress."
INVALID_OUT_OF_BOUNDS_FORMAT_MESSAGE = (
    "Invalid Out Of Bounds time format.  Valid formats are [:unknown, :friendly, nil]"
)


class InvalidProgressError(ProgressEtaError):
    """Raised when progress would exceed the total (or total drop below progress)."""

    def __init__(self, message: str = INVALID_PROGRESS_MESSAGE,
                 progress: Optional[float] = None,
                 total: Optional[float] = None, **kwargs):
        """Initialize invalid progress error.

        Args:
            message: Error message
            progress: Rejected (or current) progress value
            total: Total the value was checked against
            **kwargs: Additional arguments for base class
        """
        details = kwargs.get('details', {})
        details['progress'] = progress
        details['total'] = total

        kwargs['details'] = details
        kwargs['error_code'] = kwargs.get('error_code', 'INVALID_PROGRESS')

        super().__init__(message, **kwargs)

        self.progress = progress
        self.total = total


class InvalidOutOfBoundsFormatError(ProgressEtaError):
    """Raised when an unknown out-of-bounds time format is requested."""

    def __init__(self, requested_format: Any = None, **kwargs):
        details = kwargs.get('details', {})
        details['requested_format'] = repr(requested_format)

        kwargs['details'] = details
        kwargs['error_code'] = 'INVALID_OUT_OF_BOUNDS_FORMAT'

        super().__init__(INVALID_OUT_OF_BOUNDS_FORMAT_MESSAGE, **kwargs)

        self.requested_format = requested_format


class ClockNotStartedError(ProgressEtaError):
    """Raised when elapsed time is requested from a clock that was never started."""

    def __init__(self, message: str = "Clock has not been started", **kwargs):
        kwargs['error_code'] = 'CLOCK_NOT_STARTED'
        super().__init__(message, **kwargs)
