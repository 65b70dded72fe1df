"""
Bus Context

Everything the broadcaster needs from the middleware, in one object that
is created at process start and closed at process end:
- publisher / transform broadcaster factories
- a clock for stamping
- a non-blocking poll for pending bus events
- the cooperative shutdown flag
- the diagnostic sink
"""

import signal

from .diagnostics import DiagnosticSink, LoggerSink
from .messages import Time


class BusContext:
    """Base context. Backends override the middleware hooks."""

    def __init__(self, diagnostics: DiagnosticSink = None):
        self.diagnostics = diagnostics if diagnostics is not None else LoggerSink()
        self._shutdown_requested = False

    def request_shutdown(self):
        """Ask the loop to stop at its next iteration boundary."""
        self._shutdown_requested = True

    @property
    def shutdown_requested(self) -> bool:
        return self._shutdown_requested

    def ok(self) -> bool:
        return not self._shutdown_requested

    def create_publisher(self, topic: str, depth: int):
        raise NotImplementedError

    def create_transform_broadcaster(self):
        raise NotImplementedError

    def now(self) -> Time:
        raise NotImplementedError

    def poll_pending_events(self):
        raise NotImplementedError

    def close(self):
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


def install_shutdown_handlers(context):
    """Route SIGINT/SIGTERM to a cooperative shutdown request."""
    def _handler(signum, frame):
        context.request_shutdown()

    for sig in (signal.SIGINT, signal.SIGTERM):
        signal.signal(sig, _handler)
