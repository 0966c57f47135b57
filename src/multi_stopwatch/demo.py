"""Module of a demonstration: time the processing part of a loop, excluding its preparation."""
import argparse
import logging
import sys
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

import numpy as np

from multi_stopwatch.clock import ClockSource
from multi_stopwatch.timer import MultiStopwatch


@dataclass
class DemoSettings:
    """Class to store the settings of the demo run.

    Attributes:
        iterations: Number of prepare/process iterations.
        prepare_ms: Range [low, high) of the untimed preparation, in milliseconds.
        process_ms: Range [low, high) of the timed processing, in milliseconds.
        report_every: Log a progress line every this many iterations.
        seed: Seed of the random generator.
        log_file: Path to an additional log file.

    """
    iterations: int = 100
    prepare_ms: Tuple[int, int] = (10, 50)
    process_ms: Tuple[int, int] = (20, 30)
    report_every: int = 10
    seed: Optional[int] = None
    log_file: str = ""

    def __post_init__(self) -> None:
        if self.iterations < 0:
            raise ValueError(f"Invalid number of iterations: {self.iterations}")
        if self.report_every < 1:
            raise ValueError(f"Invalid report interval: {self.report_every}")
        for name, (low, high) in (("prepare_ms", self.prepare_ms), ("process_ms", self.process_ms)):
            if low < 0 or high <= low:
                raise ValueError(f"Invalid range for {name}: [{low}, {high})")


def set_logger_head(log_file: str = "", name: str = "multi_stopwatch.demo") -> logging.Logger:
    """Configure the logger for the run. Handlers of a previous run are closed."""
    logger = logging.getLogger(name)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    formatter = logging.Formatter("%(asctime)s.%(msecs)03d - %(message)s", datefmt="%H:%M:%S")
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(filename=log_file, mode='w', encoding='utf-8'))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    return logger


def _sleep_random_ms(rng: np.random.Generator, ms_range: Tuple[int, int], sleep: Callable[[float], None]) -> None:
    low, high = ms_range
    sleep(int(rng.integers(low, high)) / 1000)


def prepare_data(rng: np.random.Generator,
                 settings: DemoSettings,
                 sleep: Callable[[float], None] = time.sleep) -> None:
    """Simulate a lengthy preparation we don't want to time."""
    _sleep_random_ms(rng, settings.prepare_ms, sleep)


def process_data(rng: np.random.Generator,
                 settings: DemoSettings,
                 sleep: Callable[[float], None] = time.sleep) -> None:
    """Simulate a consistent operation we want to time."""
    _sleep_random_ms(rng, settings.process_ms, sleep)


def run_demo(settings: Optional[DemoSettings] = None,
             logger: Optional[logging.Logger] = None,
             clock: Optional[ClockSource] = None,
             sleep: Callable[[float], None] = time.sleep) -> MultiStopwatch:
    """
    Run the prepare/process loop, timing only the processing.

    Args:
        settings: the settings of the run.
        logger: the logger for progress and results.
        clock: the clock source of the timer.
        sleep: the function that simulates the workload.

    Returns:
        the timer holding the processing runs.

    """
    settings = settings if settings is not None else DemoSettings()
    logger = logger if logger is not None else logging.getLogger(__name__)
    rng = np.random.default_rng(settings.seed)
    multi_stopwatch = MultiStopwatch(clock)

    logger.info("Starting tests...")
    for i in range(settings.iterations):
        prepare_data(rng, settings, sleep)

        multi_stopwatch.start()
        process_data(rng, settings, sleep)
        multi_stopwatch.stop()

        if (i + 1) % settings.report_every == 0:
            logger.info("Finished iteration %d.", i + 1)

    logger.info("Completed timing operations")
    logger.info("Average time: %d ms", multi_stopwatch.average_milliseconds)
    if multi_stopwatch.count:
        logger.info("Average time: %d ticks", multi_stopwatch.average_ticks)
    logger.info("Total time  : %d ms", multi_stopwatch.elapsed_milliseconds)
    logger.info("Total time  : %d ticks", multi_stopwatch.elapsed_ticks)
    return multi_stopwatch


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Time the processing part of a simulated workload.")
    parser.add_argument("--iterations", type=int, default=DemoSettings.iterations)
    parser.add_argument("--report-every", type=int, default=DemoSettings.report_every)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-file", default="")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    settings = DemoSettings(iterations=args.iterations,
                            report_every=args.report_every,
                            seed=args.seed,
                            log_file=args.log_file)
    logger = set_logger_head(settings.log_file)
    run_demo(settings, logger)
    return 0


if __name__ == "__main__":
    sys.exit(main())
