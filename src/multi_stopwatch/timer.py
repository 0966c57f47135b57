"""A module of timer."""

import datetime
from typing import Optional

from multi_stopwatch.clock import (DATETIME_TICKS_PER_CLOCK_TICK, DEFAULT_CLOCK, ClockSource,
                                   datetime_ticks_per_clock_tick, datetime_ticks_to_timedelta,
                                   rescale_ticks, timedelta_to_datetime_ticks, to_datetime_ticks)
from multi_stopwatch.output import TimingSummary
from multi_stopwatch.parameters import DATETIME_TICKS_PER_MILLISECOND
from multi_stopwatch.stopwatch import Stopwatch


class MultiStopwatch:
    """A class to accumulate the time duration of a process over multiple start/stop runs.

    The accumulator reports both the total and the average elapsed time. Statistics are
    recomputed on every read; while a run is open they include it.

    Attributes:
        clock: The clock source the timer reads.

    """
    clock: ClockSource

    def __init__(self, clock: Optional[ClockSource] = None) -> None:
        if clock is None:
            self.clock = DEFAULT_CLOCK
            self._factor = DATETIME_TICKS_PER_CLOCK_TICK
        else:
            self.clock = clock
            self._factor = datetime_ticks_per_clock_tick(clock)
        self.reset()

    def reset(self) -> None:
        """Clear all elapsed time and the running run, if any."""
        self._count = 0
        self._elapsed = 0
        self._is_running = False
        self._start_timestamp = 0

    def reset_and_start(self) -> None:
        """Clear all elapsed time and start a new run."""
        self.reset()
        self.start()

    def start(self) -> None:
        """Start a new run. Does nothing if a run is already open."""
        if self._is_running:
            return
        self._start_timestamp = self.clock.get_timestamp()
        self._is_running = True
        self._count += 1

    def stop(self) -> None:
        """Stop the open run and accumulate its duration. Does nothing if no run is open."""
        if not self._is_running:
            return
        self._elapsed += self.clock.get_timestamp() - self._start_timestamp
        self._is_running = False

    def add_ticks(self, ticks: int) -> None:
        """
        Add a duration measured elsewhere as one run.

        Args:
            ticks: the duration in ticks of this timer's clock.

        """
        if ticks < 0:
            raise ValueError(f"Cannot add a negative duration: {ticks} ticks.")
        self._elapsed += ticks
        self._count += 1

    def add_from(self, other: "MultiStopwatch") -> None:
        """Add the whole elapsed time of another MultiStopwatch, running or not, as one run."""
        self.add_ticks(rescale_ticks(other.elapsed_ticks, other.clock, self.clock))

    def add_external(self, stopwatch: Stopwatch) -> None:
        """Add the elapsed time of a running or stopped Stopwatch as one run."""
        self.add_ticks(rescale_ticks(stopwatch.elapsed_ticks, stopwatch.clock, self.clock))

    def add_duration(self, duration: datetime.timedelta) -> None:
        """Add a timedelta as one run."""
        if duration < datetime.timedelta(0):
            raise ValueError(f"Cannot add a negative duration: {duration}.")
        self.add_ticks(int(timedelta_to_datetime_ticks(duration) / self._factor))

    @property
    def count(self) -> int:
        """Number of timing runs."""
        return self._count

    @property
    def is_running(self) -> bool:
        return self._is_running

    @property
    def elapsed_ticks(self) -> int:
        """Total elapsed time in clock ticks."""
        if self._is_running:
            return self._elapsed + (self.clock.get_timestamp() - self._start_timestamp)
        return self._elapsed

    @property
    def elapsed(self) -> datetime.timedelta:
        """Total elapsed time."""
        return datetime_ticks_to_timedelta(self._elapsed_datetime_ticks())

    @property
    def elapsed_milliseconds(self) -> int:
        return self._elapsed_datetime_ticks() // DATETIME_TICKS_PER_MILLISECOND

    @property
    def average(self) -> datetime.timedelta:
        """Average elapsed time. Raises ZeroDivisionError without runs."""
        return datetime_ticks_to_timedelta(self._elapsed_datetime_ticks() // self._count)

    @property
    def average_milliseconds(self) -> int:
        """Average elapsed time in milliseconds, 0 without runs."""
        if self._count == 0:
            return 0
        return self.elapsed_milliseconds // self._count

    @property
    def average_ticks(self) -> int:
        """Average elapsed time in clock ticks. Raises ZeroDivisionError without runs."""
        return self.elapsed_ticks // self._count

    def summary(self) -> TimingSummary:
        """Return the statistics of the timer from a single clock reading."""
        ticks = self.elapsed_ticks
        datetime_ticks = to_datetime_ticks(ticks, self._factor)
        if self._count == 0:
            return TimingSummary(count=0,
                                 elapsed=datetime_ticks_to_timedelta(datetime_ticks),
                                 elapsed_milliseconds=datetime_ticks // DATETIME_TICKS_PER_MILLISECOND,
                                 elapsed_ticks=ticks,
                                 is_running=self._is_running)
        return TimingSummary(count=self._count,
                             elapsed=datetime_ticks_to_timedelta(datetime_ticks),
                             elapsed_milliseconds=datetime_ticks // DATETIME_TICKS_PER_MILLISECOND,
                             elapsed_ticks=ticks,
                             average=datetime_ticks_to_timedelta(datetime_ticks // self._count),
                             average_milliseconds=datetime_ticks // DATETIME_TICKS_PER_MILLISECOND // self._count,
                             average_ticks=ticks // self._count,
                             is_running=self._is_running)

    def _elapsed_datetime_ticks(self) -> int:
        return to_datetime_ticks(self.elapsed_ticks, self._factor)

    def __enter__(self) -> "MultiStopwatch":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    def __repr__(self) -> str:
        return f"MultiStopwatch(count={self._count}, elapsed={self.elapsed}, is_running={self._is_running})"
