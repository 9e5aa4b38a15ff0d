"""Example automation script and actual script execution."""
# pylint: disable=unused-argument,missing-function-docstring
from __future__ import annotations
from dataclasses import dataclass, field

from colors import RGB, SGR, printc
from host import BaseHost, WallClockHost
from script import BaseScript
from settings import Settings
from timer_ import ActionResult, Timer, TimerConfig


# STATE - what the timers act on

@dataclass
class PlayerState:
    """Minimal player state passed to every condition and action."""
    inventory: int = 0
    capacity: int = 28
    run_energy: int = 100
    bank_steps: int = 0
    bank_trips: int = 0
    log: list[str] = field(default_factory=list)

    @property
    def inventory_full(self) -> bool:
        """Whether the inventory has no free slots left."""
        return self.inventory >= self.capacity


# FUNCTIONS - conditions and actions

def has_space(player: PlayerState) -> bool:
    return not player.inventory_full

def is_full(player: PlayerState) -> bool:
    return player.inventory_full

def gather(player: PlayerState) -> bool:
    player.inventory += 1
    return True

def bank(player: PlayerState) -> ActionResult:
    """Walk to the bank over several cycles, then deposit everything."""
    if player.bank_steps < 3:
        player.bank_steps += 1
        return ActionResult.PENDING
    player.inventory, player.bank_steps = 0, 0
    player.bank_trips += 1
    player.log.append("banked")
    return ActionResult.COMPLETED

def low_energy(player: PlayerState) -> bool:
    return player.run_energy < 30

def rest(player: PlayerState) -> bool:
    player.run_energy = 100
    player.log.append("rested")
    return True


# TIMERS - owned by the script, passed where needed

@dataclass
class Timers:
    """Every timer the example script uses."""
    gather: Timer
    bank: Timer
    rest: Timer


def build_timers(host: BaseHost, debug: bool = False) -> Timers:
    """Create the example script's timers against a host."""
    return Timers(
        gather=Timer(TimerConfig("gather", 2, gather, condition=has_space), host, debug),
        bank=Timer(TimerConfig("bank", 1, bank, condition=is_full), host, debug),
        rest=Timer(TimerConfig("rest", 30_000, rest, use_ticks=False, condition=low_energy),
                   host, debug),
    )


# SCRIPT - main operation logic

class ExampleScript(BaseScript):
    """Gather until the inventory is full, bank, and rest when low on energy."""

    def __init__(self, host: BaseHost, settings: Settings | None = None):
        super().__init__(host, settings)
        self.player = PlayerState()
        self.timers = build_timers(host, self.settings.debug)

    def loop(self):
        self.player.run_energy = max(0, self.player.run_energy - 1)
        if self.timers.rest.execute(self.player):
            return
        if self.timers.bank.execute(self.player):
            printc(f"Bank trip {self.player.bank_trips} done.", RGB.PINK)
            return
        self.timers.gather.execute(self.player)

    def switch_to_fishing(self):
        """Reuse the gather timer for a slower activity, dropping its old cooldown."""
        self.timers.gather.reconfigure(
            TimerConfig("fish", 4, gather, condition=has_space))
        printc("Switched gather timer to fishing.", SGR.CYAN)


if __name__ == "__main__":
    script = ExampleScript(WallClockHost(), Settings.load())
    script.start()
