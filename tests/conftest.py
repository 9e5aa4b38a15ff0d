"""Shared pytest fixtures."""
from __future__ import annotations

import pytest

from host import SimulatedHost
from timer_ import Timer, TimerConfig


class Counter:
    """Callable that records its calls and returns a fixed result."""

    def __init__(self, result=True):
        self.result = result
        self.calls: list[tuple] = []

    def __call__(self, *args, **kwargs):
        self.calls.append((args, kwargs))
        return self.result

    @property
    def count(self) -> int:
        return len(self.calls)


def always(*_args, **_kwargs) -> bool:
    return True


@pytest.fixture
def host() -> SimulatedHost:
    """A host frozen at tick 0 and 0 ms until advanced."""
    return SimulatedHost()


@pytest.fixture
def action() -> Counter:
    return Counter(True)


@pytest.fixture
def make_timer(host: SimulatedHost):
    """Build a timer on the shared simulated host."""
    def factory(cooldown=2, action=None, condition=always, use_ticks=True,
                name="test", debug=False) -> Timer:
        config = TimerConfig(name, cooldown, action or Counter(True), use_ticks, condition)
        return Timer(config, host, debug)
    return factory


@pytest.fixture
def make_counter():
    """Build extra call-recording actions or conditions."""
    return Counter
