"""
Core game components: roles, players, roster configuration and round assignment.
"""

from .roles import Role, special_roles, parse_role
from .player import Player, AssignedPlayer
from .roster import RosterConfig
from .round import RoundAssigner, RoundAssignment, RevealPhase
from .randomness import RandomSource, SeededRandomSource, FixedPermutationSource, uuid_id_factory
from .exceptions import WerwolfError, RoundNotStartableError, NoActiveRoundError, ConfigurationError

__all__ = [
    'Role',
    'special_roles',
    'parse_role',
    'Player',
    'AssignedPlayer',
    'RosterConfig',
    'RoundAssigner',
    'RoundAssignment',
    'RevealPhase',
    'RandomSource',
    'SeededRandomSource',
    'FixedPermutationSource',
    'uuid_id_factory',
    'WerwolfError',
    'RoundNotStartableError',
    'NoActiveRoundError',
    'ConfigurationError',
]
