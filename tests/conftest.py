import pytest

from chatter_broadcaster.bus import LocalBusContext
from chatter_broadcaster.diagnostics import RecordingSink
from chatter_broadcaster.rate import RateGovernor


class FakeClock:
    """Manual clock; sleeping advances time instantly."""

    def __init__(self, start=100.0):
        self.t = start
        self.sleeps = []

    def __call__(self):
        return self.t

    def advance(self, dt):
        self.t += dt

    def sleep(self, dt):
        self.sleeps.append(dt)
        self.t += dt


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def context(sink, clock):
    return LocalBusContext(sink, clock=clock)


@pytest.fixture
def make_rate(clock):
    def _make(frequency_hz):
        return RateGovernor(frequency_hz, clock=clock, sleep=clock.sleep)
    return _make
