import pytest

from chatter_broadcaster.broadcast_loop import BroadcastLoop, RUNNING, STOPPED
from chatter_broadcaster.config import Config
from chatter_broadcaster.context import BusContext
from chatter_broadcaster.diagnostics import RecordingSink
from chatter_broadcaster.messages import Time


class SpyContext(BusContext):
    """Records every middleware interaction in order."""

    def __init__(self):
        super().__init__(RecordingSink())
        self.events = []
        self.on_poll = None

    def create_publisher(self, topic, depth):
        events = self.events

        class _Publisher:
            def publish(self, msg):
                events.append(('publish', msg.data))
        self.events.append(('advertise', topic, depth))
        return _Publisher()

    def create_transform_broadcaster(self):
        events = self.events

        class _Broadcaster:
            def send_transform(self, transform):
                events.append(('transform', transform.child_frame_id))
        return _Broadcaster()

    def now(self):
        return Time()

    def poll_pending_events(self):
        self.events.append(('poll',))
        if self.on_poll:
            self.on_poll()


class SpyRate:
    def __init__(self, events):
        self.events = events

    def reset(self):
        pass

    def wait_for_next_tick(self):
        self.events.append(('wait',))
        return True


def test_tick_order():
    context = SpyContext()
    loop = BroadcastLoop(context, Config(name='Bob'), rate=SpyRate(context.events))

    assert loop.run(max_ticks=2) == 0

    assert context.events == [
        ('advertise', 'chatter', 1000),
        ('publish', 'Hello...This is Bob 0'),
        ('poll',),
        ('wait',),
        ('transform', 'talk'),
        ('publish', 'Hello...This is Bob 1'),
        ('poll',),
        ('wait',),
        ('transform', 'talk'),
    ]


def test_counter_after_n_ticks(context, make_rate):
    loop = BroadcastLoop(context, Config(name='Bob', frequency_hz=10), rate=make_rate(10))

    loop.run(max_ticks=7)

    assert loop.count == 7
    assert loop.state == STOPPED


def test_payloads_and_stamps(context, make_rate):
    chatter, transforms = [], []
    context.bus.subscribe('chatter', chatter.append)
    context.bus.subscribe('tf', transforms.append)

    BroadcastLoop(context, Config(name='Bob', frequency_hz=5), rate=make_rate(5)).run(max_ticks=5)
    context.close()

    assert [m.data for m in chatter] == [f'Hello...This is Bob {i}' for i in range(5)]
    assert len(transforms) == 5
    stamps = [t.header.stamp.to_float() for t in transforms]
    assert stamps == sorted(stamps)
    assert stamps[-1] > stamps[0]


def test_loop_runs_at_configured_rate(context, clock, make_rate):
    start = clock()
    BroadcastLoop(context, Config(frequency_hz=4), rate=make_rate(4)).run(max_ticks=8)

    assert clock() - start == pytest.approx(2.0)


def test_shutdown_is_observed_between_ticks():
    context = SpyContext()
    loop = BroadcastLoop(context, Config(), rate=SpyRate(context.events))

    def stop_on_third_poll():
        if context.events.count(('poll',)) == 3:
            context.request_shutdown()
    context.on_poll = stop_on_third_poll

    loop.run()

    # The third tick still completes
    assert loop.count == 3
    assert context.events.count(('transform', 'talk')) == 3
    assert context.events[-1] == ('transform', 'talk')
    assert loop.state == STOPPED


def test_invalid_config_never_ticks():
    context = SpyContext()
    context.request_shutdown()
    loop = BroadcastLoop(context, Config(name='Bob', valid=False))

    assert loop.state == STOPPED
    assert loop.run() == 0
    assert loop.count == 0
    assert context.events == []


def test_valid_config_starts_running(context):
    loop = BroadcastLoop(context, Config())
    assert loop.state == RUNNING
    assert loop.rate.period == 0.1
