"""Tick source — a periodic clock shared by several consumers.

Every consumer waiting on :attr:`Ticker.tick` is woken by the same firing,
so the arrival generator and the progress reporter each see every tick.
Consumers should wait on ``ticker.tick | shutdown`` so that a stopped clock
never leaves them blocked.
"""

from __future__ import annotations

import simpy


class Ticker:
    def __init__(self, env: simpy.Environment, interval: float) -> None:
        if interval <= 0:
            raise ValueError(f"tick interval must be > 0, got {interval}")
        self._env = env
        self.interval = interval
        self.count = 0
        self.tick = env.event()
        """Event for the next tick; replaced each time it fires."""

        self._stopped = False

    @property
    def stopped(self) -> bool:
        return self._stopped

    def stop(self) -> None:
        """Stop emitting ticks. Pending waiters are not woken."""
        self._stopped = True

    def run(self):
        """Process generator driving the clock."""
        while not self._stopped:
            yield self._env.timeout(self.interval)
            if self._stopped:
                break
            self.count += 1
            fired, self.tick = self.tick, self._env.event()
            fired.succeed(self.count)
