"""
Roster configuration: players and role counts before a round starts.
"""

import re
from typing import Callable, Dict, Iterable, List, Optional, TYPE_CHECKING

from .exceptions import ConfigurationError
from .player import Player
from .randomness import uuid_id_factory
from .roles import Role, parse_role

if TYPE_CHECKING:
    from ..config.game_config import GameConfig
    from ..events.event_emitter import EventEmitter


class RosterConfig:
    """
    Owns the player list and the role -> count mapping.

    The villager count is derived: it absorbs every player not given a
    special role and is recomputed after each change to the player list.
    """

    def __init__(
        self,
        name_prefix: str = "Player",
        initial_player_count: int = 2,
        min_players: int = 2,
        id_factory: Optional[Callable[[], str]] = None,
        event_emitter: Optional['EventEmitter'] = None,
    ):
        self.name_prefix = name_prefix
        self.min_players = min_players
        self.id_factory = id_factory or uuid_id_factory
        self.event_emitter = event_emitter
        self.players: List[Player] = []
        self.role_counts: Dict[Role, int] = {role: 0 for role in Role}
        self._auto_name = re.compile(rf"^{re.escape(name_prefix)} \s*(\d+)\s*$")

        for _ in range(initial_player_count):
            self.add_player()

    @classmethod
    def from_config(
        cls,
        config: 'GameConfig',
        id_factory: Optional[Callable[[], str]] = None,
        event_emitter: Optional['EventEmitter'] = None,
    ) -> 'RosterConfig':
        """
        Build a roster from a GameConfig.

        Explicit player_names take precedence over initial_player_count.
        Special role counts are applied one increment at a time so the usual
        limits hold.

        Raises:
            ConfigurationError: If names or counts are malformed, a role name is
                unknown or a count cannot be reached
        """
        if config.player_names is not None and not isinstance(config.player_names, list):
            raise ConfigurationError(
                "player_names must be a list of names",
                {"player_names": config.player_names},
            )
        if config.role_counts is not None and not isinstance(config.role_counts, dict):
            raise ConfigurationError(
                "role_counts must map role names to counts",
                {"role_counts": config.role_counts},
            )

        roster = cls(
            name_prefix=config.name_prefix,
            initial_player_count=0 if config.player_names else config.initial_player_count,
            min_players=config.min_players,
            id_factory=id_factory,
            event_emitter=event_emitter,
        )
        for name in config.player_names or []:
            roster.add_named_player(str(name))

        for role_name, count in (config.role_counts or {}).items():
            try:
                role = parse_role(str(role_name))
            except ValueError as e:
                raise ConfigurationError(str(e), {"role": role_name}) from e
            if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                raise ConfigurationError(
                    f"Role count for {role_name} must be a non-negative integer",
                    {"role": role_name, "count": count},
                )
            if role is Role.VILLAGER:
                # Derived from the player count
                continue
            for _ in range(count):
                if not roster.increment(role):
                    raise ConfigurationError(
                        f"Cannot assign {count} x {role.label} with {roster.player_count} players",
                        {"role": role.value, "requested": count, "reached": roster.role_counts[role]},
                    )
        return roster

    # Queries

    @property
    def player_count(self) -> int:
        return len(self.players)

    @property
    def total_assigned_roles(self) -> int:
        """Sum of all role counts, villagers included."""
        return sum(self.role_counts.values())

    @property
    def special_role_total(self) -> int:
        """Sum of all non-villager role counts."""
        return self.total_assigned_roles - self.role_counts[Role.VILLAGER]

    @property
    def can_start_game(self) -> bool:
        """Check if a round may be started from the current configuration."""
        return self.player_count >= self.min_players and self.total_assigned_roles == self.player_count

    def get_player(self, player_id: str) -> Optional[Player]:
        """Get player by id."""
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def can_increment(self, role: Role) -> bool:
        """Check if one more player may be given this role."""
        if role is Role.VILLAGER:
            return False
        if role.is_unique and self.role_counts[role] >= 1:
            return False
        # A villager must be left to convert
        if self.role_counts[Role.VILLAGER] == 0:
            return False
        return True

    def can_decrement(self, role: Role) -> bool:
        """Check if the role count may be lowered."""
        return role is not Role.VILLAGER and self.role_counts[role] > 0

    # Player handling

    def next_player_name(self) -> str:
        """Lowest free auto-generated name, reusing gaps left by removals."""
        used = set()
        for player in self.players:
            match = self._auto_name.match(player.name)
            if match:
                used.add(int(match.group(1)))
        number = 1
        while number in used:
            number += 1
        return f"{self.name_prefix} {number}"

    def add_player(self) -> Player:
        """Append a player with the next free default name."""
        return self.add_named_player(self.next_player_name())

    def add_named_player(self, name: str) -> Player:
        """Append a player with the given name."""
        player = Player(id=self.id_factory(), name=name.strip())
        self.players.append(player)
        if self.event_emitter:
            self.event_emitter.emit_player_added(player.id, player.name, self.player_count)
        self._resynchronize()
        return player

    def remove_players(self, indices: Iterable[int]) -> List[Player]:
        """
        Remove players at the given positions.

        Out-of-range positions are skipped. Returns the removed players.
        """
        requested = set(indices)
        valid = {i for i in requested if 0 <= i < self.player_count}
        if requested - valid and self.event_emitter:
            self.event_emitter.emit_rejected(
                "remove_players", f"positions out of range: {sorted(requested - valid)}"
            )

        removed = [p for i, p in enumerate(self.players) if i in valid]
        self.players = [p for i, p in enumerate(self.players) if i not in valid]
        if removed and self.event_emitter:
            self.event_emitter.emit_players_removed([p.name for p in removed], self.player_count)
        self._resynchronize()
        return removed

    def move_players(self, from_indices: Iterable[int], to_index: int) -> None:
        """
        Reorder players for display.

        Moved players keep their relative order and land before the player
        that was originally at to_index (to_index == len appends).
        """
        sources = sorted({i for i in from_indices if 0 <= i < self.player_count})
        if not sources:
            return
        to_index = max(0, min(to_index, self.player_count))

        moving = [self.players[i] for i in sources]
        staying = [p for i, p in enumerate(self.players) if i not in sources]
        insert_at = to_index - sum(1 for i in sources if i < to_index)
        self.players = staying[:insert_at] + moving + staying[insert_at:]
        if self.event_emitter:
            self.event_emitter.emit_players_moved(sources, to_index)

    def update_player_name(self, player_id: str, new_name: str) -> bool:
        """
        Rename a player, trimming surrounding whitespace.

        Returns False if no player has the given id.
        """
        player = self.get_player(player_id)
        if player is None:
            if self.event_emitter:
                self.event_emitter.emit_rejected("update_player_name", f"player {player_id} not found")
            return False

        old_name = player.name
        player.name = new_name.strip()
        if self.event_emitter:
            self.event_emitter.emit_player_renamed(player_id, old_name, player.name)
        return True

    # Role handling

    def increment(self, role: Role) -> bool:
        """Turn one villager into the given role. Returns False if not allowed."""
        if not self.can_increment(role):
            return False
        self.role_counts[role] += 1
        self.role_counts[Role.VILLAGER] = max(0, self.role_counts[Role.VILLAGER] - 1)
        self._emit_role_changed(role)
        return True

    def decrement(self, role: Role) -> bool:
        """Turn one player of the given role back into a villager. Returns False if not allowed."""
        if not self.can_decrement(role):
            return False
        self.role_counts[role] -= 1
        self.role_counts[Role.VILLAGER] += 1
        self._emit_role_changed(role)
        return True

    def _emit_role_changed(self, role: Role) -> None:
        if self.event_emitter:
            self.event_emitter.emit_role_changed(
                role.label, self.role_counts[role], self.role_counts[Role.VILLAGER]
            )

    def _resynchronize(self) -> None:
        """
        Recompute the villager count from the player count.

        Special roles are never reduced here. A roster shrunk below its
        special-role total keeps villagers at zero and cannot start until
        special roles are lowered and a later roster edit lands here again.
        """
        villagers = max(0, self.player_count - self.special_role_total)
        self.role_counts[Role.VILLAGER] = villagers
        if self.event_emitter:
            self.event_emitter.emit_roles_synchronized(self.player_count, villagers)
