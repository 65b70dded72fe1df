"""
Broadcast Loop

Two states: RUNNING and STOPPED.

Per tick, in this order:
1. publish the greeting
2. poll pending bus events (non-blocking)
3. wait for the next tick
4. increment the counter
5. broadcast the transform

Shutdown is only observed between ticks. An invalid config stops the
loop before the first tick.
"""

from .emitters import MessageEmitter, TransformEmitter
from .rate import RateGovernor

RUNNING = 'RUNNING'
STOPPED = 'STOPPED'


class BroadcastLoop:
    def __init__(self, context, config, rate=None):
        self.context = context
        self.config = config
        self.log = context.diagnostics
        self.count = 0
        self.state = RUNNING if config.valid else STOPPED

        self.message_emitter = None
        self.transform_emitter = None
        self.rate = rate
        if self.state == RUNNING:
            self.message_emitter = MessageEmitter(context, config.name)
            self.transform_emitter = TransformEmitter(context)
            if self.rate is None:
                self.rate = RateGovernor(config.frequency_hz)

    def tick(self):
        self.message_emitter.emit(self.count)
        self.context.poll_pending_events()
        self.rate.wait_for_next_tick()
        self.count += 1
        self.transform_emitter.emit()

    def run(self, max_ticks=None) -> int:
        """Run until shutdown (or max_ticks). Returns the exit code."""
        if self.state == STOPPED:
            self.log.debug('Configuration invalid, not starting broadcast loop')
            return 0

        self.rate.reset()
        ticks = 0
        while self.context.ok():
            if max_ticks is not None and ticks >= max_ticks:
                break
            self.tick()
            ticks += 1

        self.state = STOPPED
        return 0
