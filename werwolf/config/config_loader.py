"""
Load GameConfig values from YAML files.
"""

from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .game_config import GameConfig
from ..core.exceptions import ConfigurationError

CONFIG_KEYS = frozenset(f.name for f in fields(GameConfig))


def config_from_dict(values: Dict[str, Any]) -> GameConfig:
    """
    Build a GameConfig from a mapping, e.g. parsed YAML.

    Unknown keys print a warning and are skipped; missing keys keep their
    defaults. Value shapes are checked when the roster is built from it.
    """
    known = {}
    for key, value in values.items():
        if key in CONFIG_KEYS:
            known[key] = value
        else:
            print(f"Warning: Unknown config key '{key}' in YAML file")
    return GameConfig(**known)


def load_config_from_yaml(config_path: str) -> GameConfig:
    """
    Load a GameConfig from a YAML file. An empty file gives the defaults.

    Raises:
        FileNotFoundError: If the config file doesn't exist
        yaml.YAMLError: If the YAML file is invalid
        ConfigurationError: If the top level is not a mapping
    """
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    content = yaml.safe_load(config_file.read_text())
    if content is None:
        return GameConfig()
    if not isinstance(content, dict):
        raise ConfigurationError(
            f"Config file must contain a mapping: {config_path}",
            {"type": type(content).__name__}
        )
    return config_from_dict(content)


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """Load configuration from a YAML file, or the defaults when no path is given."""
    if config_path is None:
        return GameConfig()
    return load_config_from_yaml(config_path)
