"""Tests for the script loop."""
from __future__ import annotations

import pytest

from host import SimulatedHost
from script import BaseScript, read_time
from settings import Settings
from timer_ import Timer


class CountingScript(BaseScript):
    """Runs one timer and records the tick of every successful run."""

    def __init__(self, host, settings):
        super().__init__(host, settings)
        self.fired: list[int] = []
        self.timer = self.make_timer(name="count", cooldown=3, action=self.record,
                                     condition=lambda: True)

    def record(self) -> bool:
        self.fired.append(self.host.get_tick())
        return True

    def loop(self):
        self.timer.execute()


class BrokenScript(BaseScript):
    def loop(self):
        raise RuntimeError("broken loop")


@pytest.fixture
def settings() -> Settings:
    return Settings(debug=False, loop_interval=0.6, max_runtime=6.0)


def test_make_timer_uses_host_and_debug(host):
    script = CountingScript(host, Settings(debug=True))
    assert isinstance(script.timer, Timer)
    assert script.timer.host is host
    assert script.timer.debug is True


def test_step(settings):
    host = SimulatedHost(tick=10)
    script = CountingScript(host, settings)
    script.step()
    host.advance()
    script.step()
    assert script.fired == [10]
    assert script.iterations == 2


def test_start_runs_until_max_runtime(settings, capsys):
    host = SimulatedHost(tick=10, tick_length_ms=600)
    script = CountingScript(host, settings)
    script.start()
    assert not host.running
    assert script.iterations == 11
    assert script.fired == [10, 13, 16, 19]
    out = capsys.readouterr().out
    assert "Maximum runtime of 6s reached." in out
    assert "after 11 iterations" in out


def test_start_stops_on_error(host, settings, capsys):
    script = BrokenScript(host, settings)
    script.start()
    assert not host.running
    assert script.iterations == 0
    assert "RuntimeError: broken loop" in capsys.readouterr().out


def test_start_respects_stopped_host(settings):
    host = SimulatedHost()
    host.stop()
    script = CountingScript(host, settings)
    script.start()
    assert script.iterations == 0


@pytest.mark.parametrize("seconds, stamp, word", [
    (0, "00:00:00.000", "0s"),
    (6, "00:00:06.000", "6s"),
    (3725.5, "01:02:05.500", "1h 2m 5s"),
])
def test_read_time(seconds, stamp, word):
    assert read_time(seconds, "stamp") == stamp
    assert read_time(seconds, "word") == word
