"""Exception classes for progress-eta."""

from .base_exceptions import ProgressEtaException, ProgressEtaError
from .config_exceptions import (
    ConfigurationError, ConfigValidationError, ConfigFileNotFoundError,
    ConfigFileFormatError
)
from .progress_exceptions import (
    InvalidProgressError, InvalidOutOfBoundsFormatError, ClockNotStartedError
)

__all__ = [
    'ProgressEtaException', 'ProgressEtaError',
    'ConfigurationError', 'ConfigValidationError', 'ConfigFileNotFoundError',
    'ConfigFileFormatError',
    'InvalidProgressError', 'InvalidOutOfBoundsFormatError', 'ClockNotStartedError'
]
