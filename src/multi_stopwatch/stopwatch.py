"""A module of a single-run stopwatch."""
import datetime
from typing import Optional

from multi_stopwatch.clock import (DEFAULT_CLOCK, ClockSource, datetime_ticks_per_clock_tick,
                                   datetime_ticks_to_timedelta, to_datetime_ticks)
from multi_stopwatch.parameters import DATETIME_TICKS_PER_MILLISECOND


class Stopwatch:
    """A class to measure the elapsed time of one interval on a monotonic clock.

    Stopping and starting again continues the same interval; use restart() to begin a new one.

    Attributes:
        clock: The clock source the stopwatch reads.

    """
    clock: ClockSource

    def __init__(self, clock: Optional[ClockSource] = None) -> None:
        self.clock = clock if clock is not None else DEFAULT_CLOCK
        self._factor = datetime_ticks_per_clock_tick(self.clock)
        self._elapsed = 0
        self._start_timestamp = 0
        self._is_running = False

    @classmethod
    def start_new(cls, clock: Optional[ClockSource] = None) -> "Stopwatch":
        """Create a stopwatch and start it."""
        stopwatch = cls(clock)
        stopwatch.start()
        return stopwatch

    def start(self) -> None:
        if self._is_running:
            return
        self._start_timestamp = self.clock.get_timestamp()
        self._is_running = True

    def stop(self) -> None:
        if not self._is_running:
            return
        self._elapsed += self.clock.get_timestamp() - self._start_timestamp
        self._is_running = False

    def reset(self) -> None:
        """Stop the stopwatch and clear the elapsed time."""
        self._elapsed = 0
        self._start_timestamp = 0
        self._is_running = False

    def restart(self) -> None:
        self.reset()
        self.start()

    @property
    def is_running(self) -> bool:
        return self._is_running

    @property
    def elapsed_ticks(self) -> int:
        """Elapsed time in clock ticks, including the running interval."""
        if self._is_running:
            return self._elapsed + (self.clock.get_timestamp() - self._start_timestamp)
        return self._elapsed

    @property
    def elapsed(self) -> datetime.timedelta:
        return datetime_ticks_to_timedelta(to_datetime_ticks(self.elapsed_ticks, self._factor))

    @property
    def elapsed_milliseconds(self) -> int:
        return to_datetime_ticks(self.elapsed_ticks, self._factor) // DATETIME_TICKS_PER_MILLISECOND

    def __repr__(self) -> str:
        return f"Stopwatch(elapsed={self.elapsed}, is_running={self._is_running})"
