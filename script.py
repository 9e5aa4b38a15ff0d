"""Main script loop driving timers once per iteration."""
# pylint: disable=broad-exception-caught
from __future__ import annotations
from abc import ABC, abstractmethod
import traceback
from typing import Any, Literal

from colors import SGR, RGB, printc, color
from host import BaseHost
from settings import Settings
from timer_ import Timer, TimerConfig


def divmods(value: int | float, **divisors) -> dict[str, int | float]:
    """Chain divmod calculations together with multiple divisors."""
    divisors = dict(sorted(divisors.items(), key=lambda item: item[1], reverse=True))
    quotients, remainder = {}, value
    for name, divisor in divisors.items():
        quotient, remainder = divmod(remainder, divisor)
        quotients[name] = int(quotient)
    quotients["remainder"] = remainder
    return quotients

def read_time(seconds: int | float, time_type: Literal["stamp", "word"]) -> str:
    """
    Convert time in seconds to a readable format.\n
    `stamp` - timestamp, typical stopwatch counter\n
    `word` - letter indicators for each unit, more reader-friendly
    """
    quotients = divmods(float(seconds), hour=3600, minute=60, second=1)
    hms_time = (str(quotients["hour"]), str(quotients["minute"]), str(quotients["second"]))
    milli = str(round(quotients["remainder"]*1000))
    if time_type == "stamp":
        return f"{':'.join(part.zfill(2) for part in hms_time)}.{milli.zfill(3)}"
    word_time = [f"{value}{unit}" for value, unit in zip(hms_time, "hms")
                 if value != '0']
    return ' '.join(word_time) if word_time else "0s"


class BaseScript(ABC):
    """
    Polling loop for an automation script.\n
    Subclasses implement `loop`, which runs once per iteration and
    calls `execute` on whichever timers it owns.
    """

    def __init__(self, host: BaseHost, settings: Settings | None = None):
        self.host = host
        self.settings = settings if settings is not None else Settings.load()
        self.iterations = 0

    @abstractmethod
    def loop(self):
        """A single iteration of the script."""

    def make_timer(self, **config_fields: Any) -> Timer:
        """Create a timer bound to this script's host and debug setting."""
        return Timer(TimerConfig(**config_fields), self.host, self.settings.debug)

    @property
    def uptime(self) -> float:
        """Seconds since the host started, measured on the host's clock."""
        return self.host.clock_ms() / 1000

    def step(self):
        """Run one iteration, stopping the host once the maximum runtime has passed."""
        self.loop()
        self.iterations += 1
        if self.settings.max_runtime and self.uptime >= self.settings.max_runtime:
            printc(f"Maximum runtime of {read_time(self.settings.max_runtime, 'word')} " \
                   f"reached.", RGB.YELLOW)
            self.host.stop()

    def start(self):
        """Run the script until the host stops it."""
        printc(f"Starting {type(self).__name__}...", RGB.GREEN)
        try:
            while self.host.running:
                self.step()
                if self.host.running:
                    self.host.sleep(self.settings.loop_interval)
        except KeyboardInterrupt:
            self.host.stop()
        except Exception:
            print(traceback.format_exc())
            self.host.stop()
        print(f"Stopped {type(self).__name__} after {self.iterations} iterations " \
              f"[{color(read_time(self.uptime, 'stamp'), SGR.CYAN)}]")
