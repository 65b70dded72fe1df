"""
Local Talker (Logic Mirror)

Mirrors talker_node.py but runs on the in-process MessageBus instead of
ROS 2. An echo listener subscribes to 'chatter' and 'tf' and logs what
arrives, so the whole tick sequence can be watched without a ROS graph.

Usage:
    talker_local [name] [frequency_hz]
"""

import logging
import sys

from .broadcast_loop import BroadcastLoop
from .bus import LocalBusContext, TF_TOPIC
from .config import configure
from .context import install_shutdown_handlers
from .diagnostics import LoggerSink
from .emitters import CHATTER_TOPIC


class EchoListener:
    """Logs every greeting and transform delivered by the bus."""

    def __init__(self, bus, logger=None):
        self.logger = logger or logging.getLogger('listener')
        self.messages = []
        self.transforms = []
        bus.subscribe(CHATTER_TOPIC, self.on_chatter)
        bus.subscribe(TF_TOPIC, self.on_transform)

    def on_chatter(self, msg):
        self.messages.append(msg)
        self.logger.info(f'I heard: [{msg.data}]')

    def on_transform(self, msg):
        self.transforms.append(msg)
        self.logger.debug(
            f'{msg.header.frame_id} -> {msg.child_frame_id} @ {msg.header.stamp.to_float():.3f}'
        )


def run(argv, context, max_ticks=None, rate=None):
    """Configure and run the loop on an already constructed local context."""
    config = configure(argv, context)
    return BroadcastLoop(context, config, rate=rate).run(max_ticks=max_ticks)


def main(argv=None):
    logging.basicConfig(
        level=logging.INFO,
        format='[%(levelname)s] [%(asctime)s] [%(name)s]: %(message)s'
    )
    if argv is None:
        argv = sys.argv[1:]

    context = LocalBusContext(LoggerSink(logging.getLogger('talker')))
    install_shutdown_handlers(context)
    EchoListener(context.bus)

    with context:
        return run(argv, context)


if __name__ == '__main__':
    sys.exit(main())
