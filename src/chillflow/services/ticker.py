"""Caller-owned loop that drives a CycleEngine at a fixed cadence."""

from __future__ import annotations

import time
from collections.abc import Callable
from datetime import datetime

from chillflow.models.focus.cycling import CycleEngine


class Ticker:
    """Calls ``engine.tick(clock())`` every ``interval`` seconds.

    The loop runs on the caller's thread and ends once the engine is idle
    after a tick, or as soon as ``should_stop`` returns True. ``clock`` and
    ``sleep`` are injectable so the loop can run without real waits.
    """

    def __init__(
        self,
        engine: CycleEngine,
        interval: float = 1.0,
        clock: Callable[[], datetime] = datetime.now,
        sleep: Callable[[float], None] = time.sleep,
        should_stop: Callable[[], bool] | None = None,
        on_tick: Callable[[datetime], None] | None = None,
    ):
        if interval <= 0:
            raise ValueError("interval must be greater than zero")
        self.engine = engine
        self.interval = interval
        self.clock = clock
        self.sleep = sleep
        self.should_stop = should_stop
        self.on_tick = on_tick

    def run(self) -> int:
        """Run until the cycle returns to idle. Returns the number of ticks."""
        ticks = 0
        while not (self.should_stop and self.should_stop()):
            now = self.clock()
            self.engine.tick(now)
            ticks += 1
            if self.on_tick is not None:
                self.on_tick(now)
            if self.engine.phase.is_idle:
                break
            self.sleep(self.interval)
        return ticks
