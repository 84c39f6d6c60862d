"""progress-eta - progress tracking and estimated time remaining

Tracks the advancement of a long-running task and produces the ETA label
shown next to a terminal progress bar.

This package provides:
- An elapsed-time clock with pause semantics
- A bounded progress counter with smoothed running average
- An estimator formatting the remaining time as ``" ETA: HH:MM:SS"``
"""

from .progress import (
    Clock,
    EstimatedTimeEstimator,
    OutOfBoundsFormat,
    ProgressCounter,
    ProgressOptions,
)

__version__ = "1.0.0"
__description__ = "Progress tracking with estimated time remaining"
__license__ = "MIT"

__all__ = [
    'Clock',
    'EstimatedTimeEstimator',
    'OutOfBoundsFormat',
    'ProgressCounter',
    'ProgressOptions',
]
