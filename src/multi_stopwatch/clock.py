"""Module of monotonic clock sources and the tick conversion factor."""
import datetime
import time
from fractions import Fraction
from typing import Protocol

from multi_stopwatch.parameters import (DATETIME_TICKS_PER_MICROSECOND, DATETIME_TICKS_PER_SECOND,
                                        HIGH_RESOLUTION_THRESHOLD, NANOSECONDS_PER_DATETIME_TICK,
                                        PERF_COUNTER_FREQUENCY)


class ClockSource(Protocol):
    """Class of a monotonic tick counter used to measure elapsed durations.

    Attributes:
        frequency: Number of ticks per second.
        is_high_resolution: Whether the clock resolves at least one calendar tick (100 ns).

    """
    frequency: int
    is_high_resolution: bool

    def get_timestamp(self) -> int:
        """Return the current tick count. Never decreases."""
        ...


class PerfCounterClock:
    """Monotonic clock backed by time.perf_counter_ns().

    On a platform whose counter is coarser than a calendar tick, the clock counts calendar ticks instead.
    """
    frequency: int
    is_high_resolution: bool

    def __init__(self) -> None:
        self.is_high_resolution = time.get_clock_info("perf_counter").resolution <= HIGH_RESOLUTION_THRESHOLD
        self.frequency = PERF_COUNTER_FREQUENCY if self.is_high_resolution else DATETIME_TICKS_PER_SECOND

    def get_timestamp(self) -> int:
        if self.is_high_resolution:
            return time.perf_counter_ns()
        return time.perf_counter_ns() // NANOSECONDS_PER_DATETIME_TICK

    def __repr__(self) -> str:
        return f"PerfCounterClock(frequency={self.frequency}, is_high_resolution={self.is_high_resolution})"


def datetime_ticks_per_clock_tick(clock: ClockSource) -> Fraction:
    """
    Return the number of calendar ticks (100 ns) per tick of the given clock.

    A low resolution clock is assumed to count calendar ticks already, so its factor is 1.

    Args:
        clock: the clock whose ticks are converted.

    Returns:
        the exact conversion factor.

    """
    if clock.frequency <= 0:
        raise ValueError(f"Invalid clock frequency: {clock.frequency}")
    if clock.is_high_resolution:
        return Fraction(DATETIME_TICKS_PER_SECOND, clock.frequency)
    return Fraction(1)


def rescale_ticks(ticks: int, source: ClockSource, target: ClockSource) -> int:
    """Convert a tick count of the source clock into ticks of the target clock."""
    if source.frequency == target.frequency:
        return ticks
    return ticks * target.frequency // source.frequency


def to_datetime_ticks(ticks: int, factor: Fraction) -> int:
    """Convert clock ticks into calendar ticks, truncating toward zero."""
    return int(ticks * factor)


def datetime_ticks_to_timedelta(datetime_ticks: int) -> datetime.timedelta:
    # timedelta resolves microseconds, the sub-microsecond rest is truncated.
    return datetime.timedelta(microseconds=datetime_ticks // DATETIME_TICKS_PER_MICROSECOND)


def timedelta_to_datetime_ticks(duration: datetime.timedelta) -> int:
    return (duration // datetime.timedelta(microseconds=1)) * DATETIME_TICKS_PER_MICROSECOND


DEFAULT_CLOCK = PerfCounterClock()

# Derived once for the process-wide default clock.
DATETIME_TICKS_PER_CLOCK_TICK = datetime_ticks_per_clock_tick(DEFAULT_CLOCK)
