import datetime

from multi_stopwatch.stopwatch import Stopwatch

MS = 1_000_000


def test_start_new_is_running(clock):
    stopwatch = Stopwatch.start_new(clock)
    clock.advance(2 * MS)
    assert stopwatch.is_running
    assert stopwatch.elapsed_ticks == 2 * MS
    assert stopwatch.elapsed_milliseconds == 2
    assert stopwatch.elapsed == datetime.timedelta(milliseconds=2)


def test_stop_freezes_elapsed(clock):
    stopwatch = Stopwatch(clock)
    stopwatch.start()
    clock.advance(MS)
    stopwatch.stop()
    clock.advance(MS)
    assert not stopwatch.is_running
    assert stopwatch.elapsed_ticks == MS


def test_start_continues_interval(clock):
    stopwatch = Stopwatch(clock)
    stopwatch.start()
    clock.advance(MS)
    stopwatch.stop()
    stopwatch.start()
    stopwatch.start()
    clock.advance(MS)
    stopwatch.stop()
    assert stopwatch.elapsed_ticks == 2 * MS


def test_reset_and_restart(clock):
    stopwatch = Stopwatch(clock)
    stopwatch.start()
    clock.advance(MS)
    stopwatch.reset()
    assert not stopwatch.is_running
    assert stopwatch.elapsed_ticks == 0
    stopwatch.start()
    clock.advance(MS)
    stopwatch.restart()
    clock.advance(3)
    assert stopwatch.is_running
    assert stopwatch.elapsed_ticks == 3
