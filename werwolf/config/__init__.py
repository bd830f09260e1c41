"""Game configuration module."""

from .game_config import GameConfig
from .config_loader import load_config, load_config_from_yaml, config_from_dict

__all__ = ['GameConfig', 'load_config', 'load_config_from_yaml', 'config_from_dict']
