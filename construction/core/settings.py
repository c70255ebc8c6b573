# -----------------------------------------------------------------------------
# SITE SETTINGS
# -----------------------------------------------------------------------------
# Responsibility: Load the runtime settings for the construction shells.
#
# Sources, lowest to highest precedence:
# 1. Built-in defaults
# 2. construction.yaml at the project root (optional)
# 3. CONSTRUCTION_* environment variables (a .env file is loaded by main)
# -----------------------------------------------------------------------------

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError
from rich.console import Console

console = Console()

SETTINGS_PATH = Path(__file__).parent.parent.parent / "construction.yaml"

ENV_OVERRIDES = {
    "CONSTRUCTION_BUILD_DELAY": "build_delay_seconds",
    "CONSTRUCTION_CLEAR_SCREEN": "clear_screen",
}


class SettingsError(Exception):
    """Raised when the settings file or environment holds invalid values."""

    pass


class Settings(BaseModel):
    """
    Runtime settings for the interactive shell.

    build_delay_seconds: cosmetic pause before each build starts
    clear_screen: clear the terminal between menu screens
    """

    build_delay_seconds: float = Field(default=1.0, ge=0, le=10)
    clear_screen: bool = True


def _read_settings_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        console.print("[yellow][SETTINGS] Settings file not found, using defaults[/yellow]")
        return {}

    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise SettingsError(f"Invalid settings file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SettingsError(f"Settings file must contain a mapping: {path}")
    return data


def load_settings(path: Path = SETTINGS_PATH) -> Settings:
    """
    Load settings from the YAML file and the environment.

    Args:
        path: Location of the optional YAML settings file.

    Returns:
        Validated Settings.

    Raises:
        SettingsError: If the file is malformed or a value fails validation.
    """
    data = _read_settings_file(path)

    for env_name, field_name in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value is not None and value.strip():
            data[field_name] = value.strip()

    try:
        return Settings(**data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings: {e}") from e
