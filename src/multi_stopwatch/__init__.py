from multi_stopwatch.clock import DEFAULT_CLOCK, ClockSource, PerfCounterClock
from multi_stopwatch.output import TimingSummary
from multi_stopwatch.stopwatch import Stopwatch
from multi_stopwatch.timer import MultiStopwatch

__all__ = ["ClockSource", "DEFAULT_CLOCK", "MultiStopwatch", "PerfCounterClock", "Stopwatch", "TimingSummary"]
