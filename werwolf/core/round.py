"""
Round assignment and the one-player-at-a-time role reveal.
"""

from enum import Enum
from typing import Dict, List, Optional, Tuple, TYPE_CHECKING

from .exceptions import NoActiveRoundError, RoundNotStartableError
from .player import AssignedPlayer
from .randomness import RandomSource, SeededRandomSource
from .roles import Role
from .roster import RosterConfig

if TYPE_CHECKING:
    from ..events.event_emitter import EventEmitter


class RevealPhase(Enum):
    """Current reveal phase."""
    REVEALING = "revealing"
    COMPLETED = "completed"


class RoundAssignment:
    """
    Players with their roles for one round, plus the reveal cursor.

    The players are frozen copies in a tuple; only current_index and phase move.
    """

    def __init__(self, players: Tuple[AssignedPlayer, ...], event_emitter: Optional['EventEmitter'] = None):
        self._players = tuple(players)
        self.event_emitter = event_emitter
        self.current_index = 0
        self.phase = RevealPhase.REVEALING

    @property
    def players(self) -> Tuple[AssignedPlayer, ...]:
        return self._players

    @property
    def total(self) -> int:
        return len(self._players)

    @property
    def current_player(self) -> Optional[AssignedPlayer]:
        """Player whose turn it is. Stays on the last player once completed."""
        if self.current_index >= self.total:
            return None
        return self._players[self.current_index]

    @property
    def is_last_player(self) -> bool:
        return self.current_index >= self.total - 1

    @property
    def is_completed(self) -> bool:
        return self.phase == RevealPhase.COMPLETED

    @property
    def progress(self) -> Tuple[int, int]:
        """(1-based position of the current player, total players)."""
        return self.current_index + 1, self.total

    def role_summary(self) -> Dict[Role, int]:
        """Count of each role in this round."""
        summary = {role: 0 for role in Role}
        for player in self._players:
            summary[player.role] += 1
        return summary

    def advance(self) -> bool:
        """
        Pass the device to the next player, or complete the round after the last one.

        Returns False if the round was already completed.
        """
        if self.is_completed:
            if self.event_emitter:
                self.event_emitter.emit_rejected("advance", "round already completed", source="ROUND")
            return False

        if self.is_last_player:
            self.phase = RevealPhase.COMPLETED
            if self.event_emitter:
                self.event_emitter.emit_round_completed(self.total)
        else:
            self.current_index += 1
            if self.event_emitter:
                self.event_emitter.emit_player_advanced(self.current_index, self.total)
        return True

    def restart(self) -> None:
        """Start the reveal again from the first player with the same roles."""
        self.current_index = 0
        self.phase = RevealPhase.REVEALING
        if self.event_emitter:
            self.event_emitter.emit_round_restarted(self.total)


class RoundAssigner:
    """Turns a roster into a shuffled role assignment and drives the reveal."""

    def __init__(
        self,
        random_source: Optional[RandomSource] = None,
        event_emitter: Optional['EventEmitter'] = None,
    ):
        self.random_source = random_source or SeededRandomSource()
        self.event_emitter = event_emitter
        self.current_round: Optional[RoundAssignment] = None

    def build_role_pool(self, config: RosterConfig) -> List[Role]:
        """Each role repeated by its count, in enumeration order."""
        pool = []
        for role in Role:
            pool.extend([role] * config.role_counts[role])
        return pool

    def start(self, config: RosterConfig) -> RoundAssignment:
        """
        Assign shuffled roles to the roster's players in display order.

        Raises:
            RoundNotStartableError: If config.can_start_game is False
        """
        if not config.can_start_game:
            raise RoundNotStartableError(config.player_count, config.total_assigned_roles)

        pool = self.build_role_pool(config)
        order = self.random_source.permutation(len(pool))
        shuffled = [pool[i] for i in order]

        assigned = []
        for index, player in enumerate(config.players):
            if index < len(shuffled):
                assigned.append(player.with_role(shuffled[index]))
            else:
                assigned.append(player.with_role(Role.VILLAGER))

        self.current_round = RoundAssignment(tuple(assigned), event_emitter=self.event_emitter)
        if self.event_emitter:
            summary = self.current_round.role_summary()
            self.event_emitter.emit_round_started(
                len(assigned), {role.value: count for role, count in summary.items()}
            )
        return self.current_round

    def _require_round(self, operation: str) -> RoundAssignment:
        if self.current_round is None:
            raise NoActiveRoundError(operation)
        return self.current_round

    def advance(self) -> bool:
        return self._require_round("advance").advance()

    def restart(self) -> None:
        self._require_round("restart").restart()

    def discard(self) -> None:
        """Drop the current round so a new one can be started."""
        self.current_round = None

    @property
    def phase(self) -> Optional[RevealPhase]:
        return self.current_round.phase if self.current_round else None

    @property
    def current_player(self) -> Optional[AssignedPlayer]:
        return self.current_round.current_player if self.current_round else None
