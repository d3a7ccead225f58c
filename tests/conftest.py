"""Root test configuration: deterministic clock and store fixtures"""

from datetime import datetime, timedelta, timezone

import pytest

from docstore.store.memory_repo import DocumentStore


class TickClock:
    """Returns start, start+step, start+2*step, ... on successive calls."""

    def __init__(self, start: datetime, step: timedelta = timedelta(seconds=1)):
        self.now = start - step
        self.step = step

    def __call__(self) -> datetime:
        self.now += self.step
        return self.now


@pytest.fixture(name="clock")
def clock_fixture():
    """Clock starting at 2024-01-01 12:00 UTC, one second per call."""
    return TickClock(datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture(name="store")
def store_fixture(clock):
    """Empty store stamping inserts from the tick clock."""
    return DocumentStore(clock=clock)
