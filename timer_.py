"""Class for gating repeated script actions behind a cooldown and a condition."""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, Flag
from typing import Any, Callable, Mapping

from colors import SGR, RGB, color, colorize, printc
from host import BaseHost


def never(*_args, **_kwargs) -> bool:
    """Default condition, a timer without one never fires on its own."""
    return False


class ActionResult(Enum):
    """Outcome reported by a timer's action."""
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"

    @classmethod
    def from_value(cls, value: Any) -> ActionResult:
        """
        Interpret whatever an action returned.\n
        Plain values map by truthiness, so `True` completes and `False`/`None` stay pending.
        """
        if isinstance(value, ActionResult):
            return value
        return cls.COMPLETED if value else cls.PENDING


class Denial(Flag):
    """Reasons for a timer refusing to trigger."""
    NONE = 0
    COOLDOWN = 1 << 0
    CONDITION = 1 << 1


@dataclass(slots=True)
class TimerConfig:
    """Configuration record for a timer."""
    name: str
    cooldown: int | float
    action: Callable[..., Any] | None
    use_ticks: bool = True
    condition: Callable[..., Any] = never

    def validate(self):
        """Reject a record that would produce a timer unable to run."""
        if not self.name:
            raise ConfigurationError("Timer name must not be empty")
        if isinstance(self.cooldown, bool) or not isinstance(self.cooldown, (int, float)):
            raise ConfigurationError(f'Cooldown for "{self.name}" must be a number')
        if not callable(self.action):
            raise ConfigurationError(f'Action for "{self.name}" is missing or not callable')
        if not callable(self.condition):
            raise ConfigurationError(f'Condition for "{self.name}" is not callable')

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> TimerConfig:
        """Create a config from a plain dictionary of fields."""
        if not {"name", "cooldown", "action"}.issubset(mapping.keys()):
            raise ConfigurationError("One or more configuration fields are missing")
        condition = mapping.get("condition")
        use_ticks = mapping.get("use_ticks")
        return cls(name=mapping["name"],
                   cooldown=mapping["cooldown"],
                   action=mapping["action"],
                   use_ticks=use_ticks if use_ticks is not None else True,
                   condition=condition if condition is not None else never)


class Timer:
    """
    Run an action at most once per cooldown, and only while its condition holds.\n
    Cooldowns are counted in host ticks or in wall-clock milliseconds.
    An action that does not report completion is retried on the next call
    without starting the cooldown.
    """
    __slots__ = ["name", "cooldown", "condition", "action",
                 "last_triggered", "host", "debug", "_use_ticks"]

    def __init__(self, config: TimerConfig | None, host: BaseHost, debug: bool = False):
        if config is None:
            printc("[TIMER]: No config found when initializing.", RGB.RED)
            printc("[TIMER]: Terminating your session.", RGB.RED)
            host.stop()
            raise ConfigurationMissing("No config found when initializing timer")
        config.validate()
        self.host = host
        self.debug = debug
        self._use_ticks = config.use_ticks
        self._apply(config)
        self.last_triggered: int | float | None = None

    def __str__(self):
        unit = "ticks" if self.use_ticks else "ms"
        return f"[TIMER] {self.name} ({self.cooldown} {unit}) - " \
               f"off cooldown: {colorize(self.off_cooldown())}"

    def __repr__(self):
        return f"<Timer name={self.name!r} cooldown={self.cooldown!r} " \
               f"use_ticks={self.use_ticks!r} last_triggered={self.last_triggered!r}>"

    def __call__(self, *args, **kwargs) -> bool:
        return self.execute(*args, **kwargs)

    @property
    def use_ticks(self) -> bool:
        """Whether cooldowns are counted in host ticks rather than milliseconds."""
        return self._use_ticks

    @use_ticks.setter
    def use_ticks(self, value: bool):
        # the stored timestamp is meaningless in the other unit
        if value != self._use_ticks:
            self._use_ticks = value
            self.reset()
            self._debug_log(f"Switched to {'ticks' if value else 'milliseconds'}, reset.")

    def _apply(self, config: TimerConfig):
        self.name = config.name
        self.cooldown = config.cooldown
        self.condition = config.condition
        self.action = config.action
        self.use_ticks = config.use_ticks

    def _debug_log(self, message: str, fg_color: SGR | RGB = SGR.LIGHT_GRAY):
        if self.debug:
            print(f"[{color('TIMER', RGB.ORANGE)}]: {self.name} | {color(message, fg_color)}")

    def now(self) -> int | float:
        """Current time in the timer's unit."""
        return self.host.get_tick() if self.use_ticks else self.host.clock_ms()

    def condition_met(self, *args, **kwargs) -> bool:
        """Evaluate the condition with whatever arguments the caller passes."""
        return bool(self.condition(*args, **kwargs))

    @property
    def triggered(self) -> bool:
        """Whether the action has completed since creation or the last reset."""
        return self.last_triggered is not None

    def off_cooldown(self) -> bool:
        """Whether enough time has passed since the last successful trigger."""
        if self.last_triggered is None:
            return True
        return self.now() - self.last_triggered >= self.cooldown

    def remaining(self) -> int | float:
        """Time left until the timer comes off cooldown, in the timer's unit."""
        if self.last_triggered is None:
            return 0
        return max(0, self.cooldown - (self.now() - self.last_triggered))

    def check(self, *args, **kwargs) -> Denial:
        """
        Determine why the timer would refuse to trigger.\n
        The condition is only evaluated once the cooldown has elapsed.
        """
        if not self.off_cooldown():
            return Denial.COOLDOWN
        if not self.condition_met(*args, **kwargs):
            return Denial.CONDITION
        return Denial.NONE

    def can_trigger(self, *args, **kwargs) -> bool:
        """Whether the timer is off cooldown and its condition holds."""
        return not self.check(*args, **kwargs)

    def execute(self, *args, **kwargs) -> bool:
        """Run the action if the timer can trigger, returning whether it completed."""
        if not self.can_trigger(*args, **kwargs):
            return False
        return self._run(*args, **kwargs)

    def execute_ignoring_condition(self, *args, **kwargs) -> bool:
        """Run the action as soon as the cooldown allows, whatever the condition says."""
        if not self.off_cooldown():
            return False
        return self._run(*args, **kwargs)

    def execute_ignoring_cooldown(self, *args, **kwargs) -> bool:
        """Run the action whenever the condition holds, still restarting the cooldown."""
        if not self.condition_met(*args, **kwargs):
            return False
        return self._run(*args, **kwargs)

    def _run(self, *args, **kwargs) -> bool:
        result = ActionResult.from_value(self.action(*args, **kwargs))  # type: ignore
        match result:
            case ActionResult.COMPLETED:
                self.last_triggered = self.now()
                unit = "Game tick" if self.use_ticks else "Time"
                self._debug_log("Action successful.", RGB.GREEN)
                self._debug_log(f"{unit}: {self.last_triggered}")
                return True
            case ActionResult.FAILED:
                self._debug_log("Action failed.", RGB.RED)
            case ActionResult.PENDING:
                self._debug_log("Action not completed, retrying next cycle.", RGB.YELLOW)
        return False

    def reset(self):
        """Forget the last trigger so the timer is immediately off cooldown."""
        self.last_triggered = None

    def reconfigure(self, config: TimerConfig):
        """Repurpose the timer for a different action, starting from a clean cooldown."""
        config.validate()
        self._apply(config)
        self.reset()
        self._debug_log("Reconfigured.")

    @classmethod
    def timer(cls, name: str, cooldown: int | float, host: BaseHost,
              use_ticks: bool = True, condition: Callable[..., Any] | None = None,
              debug: bool = False):
        """Instantiate a timer around the decorated function."""
        def wrapper(func):
            config = TimerConfig(name, cooldown, func, use_ticks, condition or never)
            return cls(config, host, debug)
        return wrapper


class ConfigurationError(Exception):
    """Timer received a malformed or incomplete configuration."""


class ConfigurationMissing(ConfigurationError):
    """Timer was created without any configuration."""
