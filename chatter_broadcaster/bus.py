"""
Simple Pub/Sub Message Bus (Local stand-in for ROS 2)

This module provides a lightweight, synchronous publish/subscribe mechanism
so the broadcast logic can run and be validated without a ROS graph.

Publishers buffer into a bounded queue (drop-oldest, like a KEEP_LAST QoS
history). Queued messages reach subscribers when the context is polled.
"""

from collections import defaultdict, deque
import logging
import threading
import time

from .context import BusContext
from .messages import Time

TF_TOPIC = 'tf'
TF_QUEUE_DEPTH = 100

logger = logging.getLogger(__name__)


class MessageBus:
    def __init__(self):
        self._subscribers = defaultdict(list)
        self._lock = threading.Lock()

    def subscribe(self, topic, callback):
        """Subscribe to a topic."""
        with self._lock:
            self._subscribers[topic].append(callback)

    def publish(self, topic, message):
        """Deliver a message to every subscriber of a topic (synchronous)."""
        with self._lock:
            # Copy list to avoid modification during iteration
            callbacks = list(self._subscribers[topic])

        for callback in callbacks:
            try:
                callback(message)
            except Exception:
                logger.exception('Exception in subscriber callback for %s', topic)


class BoundedPublisher:
    """Outbound queue for one topic. When full, the oldest message is dropped."""

    def __init__(self, bus: MessageBus, topic: str, depth: int):
        if depth <= 0:
            raise ValueError(f'Queue depth must be positive, got {depth}')
        self.bus = bus
        self.topic = topic
        self.depth = depth
        self._pending = deque(maxlen=depth)

    def publish(self, message):
        self._pending.append(message)

    @property
    def pending(self):
        return list(self._pending)

    def flush(self):
        """Hand every pending message to the bus. Returns how many were sent."""
        sent = 0
        while self._pending:
            self.bus.publish(self.topic, self._pending.popleft())
            sent += 1
        return sent


class LocalTransformBroadcaster:
    def __init__(self, publisher: BoundedPublisher):
        self.publisher = publisher

    def send_transform(self, transform):
        self.publisher.publish(transform)


class LocalBusContext(BusContext):
    """Context backed by an in-process MessageBus."""

    def __init__(self, diagnostics=None, bus: MessageBus = None, clock=time.time):
        super().__init__(diagnostics)
        self.bus = bus if bus is not None else MessageBus()
        self.clock = clock
        self.publishers = []
        self._last_stamp = 0.0

    def create_publisher(self, topic, depth):
        publisher = BoundedPublisher(self.bus, topic, depth)
        self.publishers.append(publisher)
        return publisher

    def create_transform_broadcaster(self):
        return LocalTransformBroadcaster(self.create_publisher(TF_TOPIC, TF_QUEUE_DEPTH))

    def now(self):
        # Stamps never go backwards, even if the wall clock does
        self._last_stamp = max(self._last_stamp, self.clock())
        return Time.from_float(self._last_stamp)

    def poll_pending_events(self):
        for publisher in self.publishers:
            publisher.flush()

    def close(self):
        self.poll_pending_events()
        self.publishers = []
