import pytest

from tests.shared_fixtures_and_utils import FakeClock


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def low_resolution_clock() -> FakeClock:
    return FakeClock(frequency=10_000_000, is_high_resolution=False)
