"""Tests for .env backed settings."""
from __future__ import annotations

from pathlib import Path

import pytest

from settings import Settings


@pytest.fixture
def env_file(tmp_path: Path) -> Path:
    path = tmp_path / ".env"
    path.write_text("DEBUG=True\nLOOP_INTERVAL=0.25\nMAX_RUNTIME=60\nUNRELATED=1\n",
                    encoding="UTF-8")
    return path


def test_from_env(env_file: Path):
    settings = Settings.from_env(str(env_file))
    assert settings == Settings(debug=True, loop_interval=0.25, max_runtime=60.0)


def test_from_env_missing_fields(tmp_path: Path):
    path = tmp_path / ".env"
    path.write_text("DEBUG=False\n", encoding="UTF-8")
    with pytest.raises(RuntimeError):
        Settings.from_env(str(path))


def test_load_creates_default_file(tmp_path: Path, capsys):
    path = tmp_path / ".env"
    settings = Settings.load(str(path))
    assert settings == Settings()
    assert path.exists()
    assert Settings.from_env(str(path)) == Settings()
    assert "using defaults" in capsys.readouterr().out


def test_load_broken_value_falls_back(tmp_path: Path):
    path = tmp_path / ".env"
    path.write_text("DEBUG=True\nLOOP_INTERVAL=fast\nMAX_RUNTIME=0\n", encoding="UTF-8")
    assert Settings.load(str(path)) == Settings()


def test_load_rejects_invalid_values(tmp_path: Path):
    path = tmp_path / ".env"
    path.write_text("DEBUG=False\nLOOP_INTERVAL=0\nMAX_RUNTIME=0\n", encoding="UTF-8")
    with pytest.raises(RuntimeError, match="Invalid"):
        Settings.load(str(path))


def test_set_variable(env_file: Path):
    Settings.set_variable("LOOP_INTERVAL", 1.5, str(env_file))
    assert Settings.from_env(str(env_file)).loop_interval == 1.5


@pytest.mark.parametrize("settings, valid", [
    (Settings(), True),
    (Settings(loop_interval=-1), False),
    (Settings(max_runtime=-5), False),
])
def test_is_valid(settings: Settings, valid: bool):
    assert settings.is_valid is valid
