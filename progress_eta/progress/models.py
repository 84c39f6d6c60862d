"""Core data models for progress tracking and estimation."""

from dataclasses import dataclass, asdict
from enum import Enum
from numbers import Real
from typing import Dict, List, Any, Optional, Union

from ..core.exceptions import ConfigValidationError, InvalidOutOfBoundsFormatError


DEFAULT_TOTAL = 100
DEFAULT_STARTING_AT = 0
DEFAULT_SMOOTHING = 0.1


class OutOfBoundsFormat(Enum):
    """How to display an estimate of 100 hours or more."""
    RAW = "raw"
    UNKNOWN = "unknown"
    FRIENDLY = "friendly"

    @classmethod
    def parse(cls, value: Union['OutOfBoundsFormat', str, None]) -> 'OutOfBoundsFormat':
        """Resolve a format token.

        ``None`` and ``"raw"`` select the default raw display.

        Raises:
            InvalidOutOfBoundsFormatError: If the token is not recognised
        """
        if value is None:
            return cls.RAW
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise InvalidOutOfBoundsFormatError(value)


@dataclass(frozen=True)
class ProgressSample:
    """A single progress mutation: time since the previous one and amount changed."""
    elapsed: float
    amount: float

    @property
    def seconds_per_unit(self) -> Optional[float]:
        """Instantaneous rate, sign-preserving; None for a zero-amount sample."""
        if self.amount == 0:
            return None
        return self.elapsed / self.amount

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


@dataclass
class ProgressOptions:
    """Recognised options for a counter/estimator pair."""
    total: Optional[float] = DEFAULT_TOTAL
    smoothing: float = DEFAULT_SMOOTHING
    starting_at: float = DEFAULT_STARTING_AT
    out_of_bounds_format: OutOfBoundsFormat = OutOfBoundsFormat.RAW

    def __post_init__(self):
        errors = self.validate()
        if errors:
            raise ConfigValidationError(errors)

    def validate(self) -> List[str]:
        """Return the list of problems with these options (empty when valid)."""
        errors = []

        if self.total is not None and not _is_number(self.total):
            errors.append("total must be a number or None")
        if not _is_number(self.starting_at):
            errors.append("starting_at must be a number")
        if not _is_number(self.smoothing) or not 0 <= self.smoothing <= 1:
            errors.append("smoothing must be a number between 0 and 1")

        if (not errors and self.total is not None
                and self.starting_at > self.total):
            errors.append("starting_at must not be greater than total")

        try:
            self.out_of_bounds_format = OutOfBoundsFormat.parse(self.out_of_bounds_format)
        except InvalidOutOfBoundsFormatError as e:
            errors.append(e.message)

        return errors

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'ProgressOptions':
        """Create from a mapping, rejecting keys that are not options.

        Raises:
            ConfigValidationError: On unknown keys or invalid values
        """
        data = dict(data or {})
        unknown = sorted(set(data) - set(cls.__dataclass_fields__))
        if unknown:
            raise ConfigValidationError(
                [f"Unknown progress option: {key}" for key in unknown]
            )
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'total': self.total,
            'smoothing': self.smoothing,
            'starting_at': self.starting_at,
            'out_of_bounds_format': self.out_of_bounds_format.value,
        }


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)
