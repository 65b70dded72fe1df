"""
Diagnostic Sinks

Components never talk to a logging backend directly. They receive a sink
with debug/info/warn/fatal, so the same code logs through an rclpy node
logger, a stdlib logger, or an in-memory recorder in tests.
"""

import logging
from typing import List, Tuple


class DiagnosticSink:
    """Interface for diagnostic output."""

    def debug(self, message: str):
        raise NotImplementedError

    def info(self, message: str):
        raise NotImplementedError

    def warn(self, message: str):
        raise NotImplementedError

    def fatal(self, message: str):
        raise NotImplementedError


class LoggerSink(DiagnosticSink):
    """
    Adapts a logger object to the sink interface.

    Works with rclpy's RcutilsLogger (warning/fatal) and with
    logging.Logger (warning/critical).
    """

    def __init__(self, logger=None):
        self.logger = logger if logger is not None else logging.getLogger('chatter_broadcaster')

    def debug(self, message):
        self.logger.debug(message)

    def info(self, message):
        self.logger.info(message)

    def warn(self, message):
        self.logger.warning(message)

    def fatal(self, message):
        if hasattr(self.logger, 'fatal') and not isinstance(self.logger, logging.Logger):
            self.logger.fatal(message)
        else:
            self.logger.critical(message)


class RecordingSink(DiagnosticSink):
    """Keeps (level, message) pairs in memory."""

    def __init__(self):
        self.records: List[Tuple[str, str]] = []

    def debug(self, message):
        self.records.append(('DEBUG', message))

    def info(self, message):
        self.records.append(('INFO', message))

    def warn(self, message):
        self.records.append(('WARN', message))

    def fatal(self, message):
        self.records.append(('FATAL', message))

    def messages(self, level=None):
        return [msg for lvl, msg in self.records if level is None or lvl == level]

    def levels(self):
        return [lvl for lvl, _ in self.records]
