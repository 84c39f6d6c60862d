"""Progress tracking: clock, bounded counter and ETA estimation."""

from .models import OutOfBoundsFormat, ProgressOptions, ProgressSample
from .clock import Clock
from .counter import ProgressCounter
from .estimator import EstimatedTimeEstimator
from .formatting import divide_seconds, format_hms, format_friendly_days

__all__ = [
    # Models
    'OutOfBoundsFormat',
    'ProgressOptions',
    'ProgressSample',

    # Core components
    'Clock',
    'ProgressCounter',
    'EstimatedTimeEstimator',

    # Formatting
    'divide_seconds',
    'format_hms',
    'format_friendly_days',
]
