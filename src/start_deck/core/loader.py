"""Configuration loading utilities."""

import os
import yaml
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .config import DeckConfig
from .errors import ConfigError

DEFAULT_CONFIG_FILE = Path("startdeck.yaml")

# Environment variables win over keys written in the config file
ENV_API_KEYS = {
    "weather": "STARTDECK_WEATHER_KEY",
    "geocode": "STARTDECK_GEOCODE_KEY",
    "unsplash": "STARTDECK_UNSPLASH_KEY",
}


def load_yaml(file_path: Path) -> dict:
    """Load YAML file."""
    with open(file_path, 'r') as f:
        return yaml.safe_load(f) or {}


def load_deck_config(config_file: Optional[Path] = None) -> DeckConfig:
    """Load and validate the dashboard configuration.

    Args:
        config_file: Path to YAML config (default: ./startdeck.yaml)

    Returns:
        Validated config. Defaults are used when the file does not exist.

    Raises:
        ConfigError if the file is not valid YAML or fails validation
    """
    config_file = Path(config_file) if config_file else DEFAULT_CONFIG_FILE

    data = {}
    if config_file.exists():
        try:
            data = load_yaml(config_file)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_file}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"{config_file} must contain a mapping at the top level")

    api_keys = dict(data.get("api_keys") or {})
    for name, env_var in ENV_API_KEYS.items():
        value = os.environ.get(env_var)
        if value:
            api_keys[name] = value
    if api_keys:
        data["api_keys"] = api_keys

    try:
        return DeckConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_file}: {e}") from e
