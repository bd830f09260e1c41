"""
Game configuration and defaults.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, List


@dataclass
class GameConfig:
    """Configuration for the roster and round setup."""

    # Roster settings
    name_prefix: str = "Player"  # Default names are "<prefix> N"
    initial_player_count: int = 2  # Used when player_names is not given
    player_names: Optional[List[str]] = field(default=None)
    min_players: int = 2

    # Role settings
    role_counts: Optional[Dict[str, int]] = field(default=None)  # {role name: count}, villagers are derived

    # Round settings
    random_seed: Optional[int] = None  # Seed for reproducible role assignment

    # Output
    echo_events: bool = False  # Print roster and round events to the console

