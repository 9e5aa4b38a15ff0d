"""Script settings loaded from a .env file."""
from __future__ import annotations
from dataclasses import dataclass, asdict, fields
import os
from typing import Any

from dotenv import dotenv_values, set_key

from colors import RGB, printc


@dataclass
class Settings:
    """Configuration data for an automation script."""
    debug: bool = False
    loop_interval: float = 0.6
    max_runtime: float = 0.0

    @classmethod
    def from_env(cls, path: str = ".env") -> Settings:
        """Create a settings instance from a .env file."""
        settings_fields = [field.name.upper() for field in fields(cls)]
        config: dict[str, Any] = dict(dotenv_values(path).items())
        if not set(settings_fields).issubset(set(config.keys())):
            raise RuntimeError("One or more settings fields are missing")
        for key, value in config.copy().items():
            if key in {"DEBUG"}:
                config[key] = value == "True"
            elif key in {"LOOP_INTERVAL", "MAX_RUNTIME"}:
                config[key] = float(value)
            elif key not in settings_fields:
                del config[key]
        return cls(**{key.lower(): value for key, value in config.items()})

    @classmethod
    def load(cls, path: str = ".env") -> Settings:
        """
        Load settings, falling back to defaults when the file is missing or broken.\n
        A missing file is created with the default values.
        """
        try:
            settings = cls.from_env(path)
        except (RuntimeError, ValueError, TypeError) as error:
            printc(f"Loading {path} failed ({error}), using defaults.", RGB.YELLOW)
            if not os.path.exists(path):
                cls.initialize_env(path)
                printc(f"Created a default {path}, edit it to change script settings.", RGB.PINK)
            return cls()
        if not settings.is_valid:
            raise RuntimeError(f"Invalid settings in {path}")
        return settings

    @staticmethod
    def initialize_env(path: str = ".env"):
        """Create a default .env file."""
        for key, value in asdict(Settings()).items():
            Settings.set_variable(key.upper(), value, path)

    @staticmethod
    def set_variable(key: str, value: Any, path: str = ".env"):
        """Set an environment variable."""
        set_key(path, key, str(value), quote_mode="never")

    @property
    def is_valid(self) -> bool:
        """Whether the settings hold usable values."""
        return self.loop_interval > 0 and self.max_runtime >= 0
