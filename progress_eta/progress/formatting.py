"""Time formatting helpers for progress labels."""

import math
from typing import Tuple


SECONDS_PER_DAY = 86400
UNKNOWN_TIME = '??:??:??'


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def divide_seconds(seconds: int) -> Tuple[int, int, int]:
    """Split a number of seconds into (hours, minutes, seconds)."""
    hours, seconds = divmod(int(seconds), 3600)
    minutes, seconds = divmod(seconds, 60)
    return hours, minutes, seconds


def format_hms(seconds: int) -> str:
    """Format as ``HH:MM:SS``; hours grow past two digits when needed."""
    hours, minutes, seconds = divide_seconds(seconds)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def format_friendly_days(seconds: int) -> str:
    return f"> {int(seconds) // SECONDS_PER_DAY} Days"
