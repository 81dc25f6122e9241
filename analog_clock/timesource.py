"""
Time sampling for the clock face.
"""

from datetime import datetime
from typing import Callable, NamedTuple


class TimeSample(NamedTuple):
    """Wall-clock time captured at the moment a frame is rendered."""

    hour: int
    minute: int
    second: int
    fraction: float = 0.0

    @classmethod
    def create(cls, hour: int, minute: int, second: int, fraction: float = 0.0) -> "TimeSample":
        """Build a sample, rejecting out-of-range fields."""
        if not 0 <= hour <= 23:
            raise ValueError(f"hour out of range: {hour}")
        if not 0 <= minute <= 59:
            raise ValueError(f"minute out of range: {minute}")
        if not 0 <= second <= 59:
            raise ValueError(f"second out of range: {second}")
        if not 0.0 <= fraction < 1.0:
            raise ValueError(f"fraction out of range: {fraction}")
        return cls(hour, minute, second, fraction)

    @classmethod
    def from_datetime(cls, moment: datetime) -> "TimeSample":
        """Build a sample from a datetime, keeping microseconds as the fraction."""
        return cls(moment.hour, moment.minute, moment.second,
                   moment.microsecond / 1_000_000)


def system_time(now: Callable[[], datetime] = datetime.now) -> TimeSample:
    """Sample the local system clock."""
    return TimeSample.from_datetime(now())
