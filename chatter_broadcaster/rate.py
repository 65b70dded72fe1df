"""
Rate Governor

Holds the loop to a fixed period. Work done inside a tick counts against
the period, so only the remainder is slept.
"""

import time


class RateGovernor:
    def __init__(self, frequency_hz, clock=time.monotonic, sleep=time.sleep):
        if frequency_hz <= 0:
            raise ValueError(f'Frequency must be positive, got {frequency_hz}')
        self.frequency_hz = frequency_hz
        self.period = 1.0 / frequency_hz
        self.clock = clock
        self.sleep = sleep
        self.start = clock()
        self.last_cycle_time = 0.0

    def reset(self):
        """Anchor the schedule at the current time."""
        self.start = self.clock()

    def wait_for_next_tick(self) -> bool:
        """
        Sleep until the current period ends.

        Returns False if the tick overran its period. When the loop falls
        more than one full period behind, the schedule restarts from now
        instead of firing a burst of catch-up ticks.
        """
        expected_end = self.start + self.period
        now = self.clock()

        # Clock went backwards
        if now < self.start:
            expected_end = now + self.period

        remaining = expected_end - now
        self.last_cycle_time = now - self.start
        self.start = expected_end

        if remaining <= 0:
            if now > expected_end + self.period:
                self.start = now
            return False

        self.sleep(remaining)
        return True
