"""
Pytest fixtures for Werwolf tests.
"""

import itertools

import pytest

from werwolf.core import RosterConfig, RoundAssigner, FixedPermutationSource, Role
from werwolf.config import GameConfig
from werwolf.events import EventEmitter


@pytest.fixture
def id_factory():
    """Deterministic player ids: p1, p2, ..."""
    counter = itertools.count(1)
    return lambda: f"p{next(counter)}"


@pytest.fixture
def event_emitter():
    """Recording emitter that stays quiet during tests."""
    return EventEmitter(echo=False)


@pytest.fixture
def roster(id_factory, event_emitter):
    """Default roster: Player 1 and Player 2, both villagers."""
    return RosterConfig(id_factory=id_factory, event_emitter=event_emitter)


@pytest.fixture
def four_player_roster(id_factory):
    """Players A-D with one werewolf and three villagers."""
    roster = RosterConfig(initial_player_count=0, id_factory=id_factory)
    for name in ["A", "B", "C", "D"]:
        roster.add_named_player(name)
    roster.increment(Role.WEREWOLF)
    return roster


@pytest.fixture
def identity_assigner(event_emitter):
    """Assigner that keeps the role pool in enumeration order (4 players)."""
    return RoundAssigner(FixedPermutationSource([0, 1, 2, 3]), event_emitter=event_emitter)


@pytest.fixture
def game_config():
    """Test game configuration."""
    return GameConfig(
        player_names=["Anna", "Ben", "Clara", "David", "Eva"],
        role_counts={"werewolf": 1, "witch": 1},
        random_seed=7,
    )
