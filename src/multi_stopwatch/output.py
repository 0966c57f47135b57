import datetime
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TimingSummary:
    """Statistics of a MultiStopwatch at one instant.

    Attributes:
        count: Number of timing runs.
        elapsed: Total elapsed time.
        elapsed_milliseconds: Total elapsed time in milliseconds.
        elapsed_ticks: Total elapsed time in clock ticks.
        average: Average elapsed time, None without runs.
        average_milliseconds: Average elapsed time in milliseconds, 0 without runs.
        average_ticks: Average elapsed time in clock ticks, None without runs.
        is_running: Whether a run was open when the summary was taken.

    """

    count: int
    elapsed: datetime.timedelta
    elapsed_milliseconds: int
    elapsed_ticks: int
    average: Optional[datetime.timedelta] = None
    average_milliseconds: int = 0
    average_ticks: Optional[int] = None
    is_running: bool = False

    def __str__(self) -> str:
        return (f"TimingSummary(count={self.count}, "
                f"elapsed={self.elapsed}, "
                f"average={self.average}, "
                f"is_running={self.is_running})")
