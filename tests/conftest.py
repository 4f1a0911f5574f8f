from datetime import datetime, timedelta, timezone

import pytest

from urdle.services.catalog import WordCatalog
from urdle.services.game_service import DailyPuzzleService
from urdle.services.storage_service import MemoryStateStore


class FakeClock:
    """Callable clock the tests can move forward."""

    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def catalog():
    return WordCatalog.from_json()


@pytest.fixture
def latin_catalog():
    return WordCatalog(["ABAC", "AAAD", "ABBC", "BBBB", "ABCD", "BBXX", "WORD", "LOST"])


@pytest.fixture
def clock():
    # Noon in New York on 2000-01-01; epoch day 10957, index 17 of 20
    return FakeClock(datetime(2000, 1, 1, 17, 0, tzinfo=timezone.utc))


@pytest.fixture
def store():
    return MemoryStateStore()


@pytest.fixture
def service(catalog, store, clock):
    return DailyPuzzleService(catalog, store, clock=clock)
