"""Console colorization via ANSI escape sequences, used for all script output."""
from __future__ import annotations
from abc import ABC, abstractmethod
from enum import Enum
import os
from typing import Any


if os.name == "nt":
    os.system("color")  # enables ANSI sequences in the Windows console


class ANSIColor(ABC):
    """A color implemented via ANSI escape sequence."""
    @abstractmethod
    def _as_sequence(self, is_background: bool = False) -> str:
        """ANSI escape sequence for a color."""

    def color(self, content: Any, is_background: bool = False) -> str:
        """Colorize a string using ANSI escape sequences."""
        return f"{self._as_sequence(is_background)}{str(content)}\33[0m"


class SGRColor(ANSIColor):
    """An ANSI color that uses a preset Select Graphic Rendition (SGR) parameter."""
    def __init__(self, value: int):
        self.value = value

    def _as_sequence(self, is_background: bool = False) -> str:
        return f"\33[{self.value + (10 if is_background else 0)}m"


class RGBColor(ANSIColor):
    """An ANSI color that supports RGB values directly."""
    def __init__(self, red: int, green: int, blue: int):
        self.red = red
        self.green = green
        self.blue = blue

    def _as_sequence(self, is_background: bool = False) -> str:
        method = 38 + (10 if is_background else 0)
        return f"\33[{method};2;{self.red};{self.green};{self.blue}m"


class Palette(Enum):
    """A collection of colors implementing ANSI escape sequences."""
    def color(self, content: Any, is_background: bool = False) -> str:
        """Colorize a string using ANSI escape sequences."""
        return self.value.color(content, is_background)


class SGR(Palette):
    """Default SGR colors for console colorization."""
    RED = SGRColor(91)
    GREEN = SGRColor(92)
    CYAN = SGRColor(96)
    YELLOW = SGRColor(93)
    LIGHT_GRAY = SGRColor(37)


class RGB(Palette):
    """Common RGB colors."""
    RED = RGBColor(255, 0, 0)
    ORANGE = RGBColor(255, 128, 0)
    YELLOW = RGBColor(255, 255, 0)
    GREEN = RGBColor(0, 255, 0)
    PINK = RGBColor(255, 0, 255)


def color(content: Any, fg_color: SGR | RGB) -> str:
    """Colorize text in the given palette color."""
    return fg_color.color(content)

def printc(content: str, fg_color: SGR | RGB):
    """Shorthand for printing a fully-colored string."""
    print(color(content, fg_color))

def colorize(value: None | bool) -> str:
    """Convert a flag to a green/red string, `None` stays uncolored."""
    if value is None:
        return "None"
    return color(value, RGB.GREEN) if value else color(value, RGB.RED)
