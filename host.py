"""Time sources and session control supplied by the automation host."""
from __future__ import annotations
from abc import ABC, abstractmethod
import time


class BaseHost(ABC):
    """
    Boundary to the game client running a script.\n
    Supplies the tick counter and the process clock, and owns the
    `running` flag that keeps the script loop alive.
    """
    def __init__(self):
        self.running = True
        self.start_time = time.perf_counter()

    @abstractmethod
    def get_tick(self) -> int:
        """Current game tick, never decreasing."""

    def clock_ms(self) -> float:
        """Elapsed process time in milliseconds."""
        return (time.perf_counter() - self.start_time) * 1000

    def stop(self):
        """Request termination of the session."""
        self.running = False

    def sleep(self, seconds: float):
        """Wait between two iterations of the script loop."""
        time.sleep(seconds)


class WallClockHost(BaseHost):
    """Host whose ticks advance with real time at a fixed tick length."""
    def __init__(self, tick_length_ms: float = 600):
        super().__init__()
        if tick_length_ms <= 0:
            raise ValueError("Tick length must be positive")
        self.tick_length_ms = tick_length_ms

    def get_tick(self) -> int:
        return int(self.clock_ms() // self.tick_length_ms)


class SimulatedHost(BaseHost):
    """
    Host with a manually driven tick counter and clock.\n
    Sleeping advances simulated time instead of blocking, so a
    script loop can be dry-run instantly.
    """
    def __init__(self, tick: int = 0, ms: float = 0.0, tick_length_ms: float = 600):
        super().__init__()
        self.tick = tick
        self.ms = ms
        self.tick_length_ms = tick_length_ms
        self._tick_remainder = 0.0

    def get_tick(self) -> int:
        return self.tick

    def clock_ms(self) -> float:
        return self.ms

    def advance(self, ticks: int = 1):
        """Move forward a number of ticks, along with the equivalent time."""
        if ticks < 0:
            raise ValueError("Ticks cannot go backwards")
        self.tick += ticks
        self.ms += ticks * self.tick_length_ms

    def advance_ms(self, ms: float):
        """Move the clock forward, ticking over whenever a full tick has passed."""
        if ms < 0:
            raise ValueError("Time cannot go backwards")
        self.ms += ms
        ticks, self._tick_remainder = divmod(self._tick_remainder + ms, self.tick_length_ms)
        self.tick += int(ticks)

    def sleep(self, seconds: float):
        self.advance_ms(seconds * 1000)
