"""
Command-line harness for configuring a Werwolf roster and revealing roles.
"""

import argparse
import random
import shlex
from typing import List, Optional

from werwolf.core import (
    RosterConfig, RoundAssigner, RevealPhase, Role,
    SeededRandomSource, special_roles, parse_role, WerwolfError, ConfigurationError
)
from werwolf.config import GameConfig, load_config
from werwolf.events import EventEmitter


HELP_TEXT = """Commands (player positions start at 1):
  players                 List players
  roles                   Show role counts
  add                     Add a player with the next free default name
  remove <n> [<n> ...]    Remove players at positions
  move <n>[,<n>...] <to>  Move players so they land before position <to>
  rename <n> <name>       Rename the player at position <n>
  inc <role>              Turn one villager into <role>
  dec <role>              Turn one <role> back into a villager
  start                   Shuffle roles and begin the reveal
  show                    Reveal the current player's role
  next                    Pass the device on (finishes after the last player)
  restart                 Reveal the same roles again from the first player
  new                     Discard the round and return to setup
  help                    Show this text
  quit                    Exit"""


class WerwolfSession:
    """Main session controller: one roster and at most one active round."""

    def __init__(self, config: Optional[GameConfig] = None, event_emitter: Optional[EventEmitter] = None):
        self.config = config or GameConfig()

        # Generate seed if not provided
        if self.config.random_seed is None:
            self.config.random_seed = random.randint(0, 2**31 - 1)

        self.event_emitter = event_emitter or EventEmitter(echo=self.config.echo_events)
        self.roster = RosterConfig.from_config(self.config, event_emitter=self.event_emitter)
        self.assigner = RoundAssigner(
            SeededRandomSource(self.config.random_seed),
            event_emitter=self.event_emitter
        )
        self.running = True

    @property
    def in_round(self) -> bool:
        return self.assigner.current_round is not None

    def execute(self, line: str) -> List[str]:
        """Run one command line and return the lines to display."""
        try:
            parts = shlex.split(line)
        except ValueError as e:
            return [f"Could not parse command: {e}"]
        if not parts:
            return []

        command, args = parts[0].lower(), parts[1:]
        handler = getattr(self, f"_cmd_{command}", None)
        if handler is None:
            return [f"Unknown command: {command}. Type 'help' for a list of commands."]

        try:
            return handler(args)
        except WerwolfError as e:
            return [f"Error: {e.message}"]

    # Setup commands

    def _cmd_help(self, args: List[str]) -> List[str]:
        return HELP_TEXT.splitlines()

    def _cmd_quit(self, args: List[str]) -> List[str]:
        self.running = False
        return ["Bye."]

    def _cmd_players(self, args: List[str]) -> List[str]:
        if not self.roster.players:
            return ["No players."]
        return [f"{i}. {p.name}" for i, p in enumerate(self.roster.players, start=1)]

    def _cmd_roles(self, args: List[str]) -> List[str]:
        lines = []
        for role in Role:
            count = self.roster.role_counts[role]
            if role is Role.VILLAGER:
                lines.append(f"{role.label}: {count}")
            else:
                plus = "+" if self.roster.can_increment(role) else " "
                minus = "-" if self.roster.can_decrement(role) else " "
                lines.append(f"{role.label}: {count} [{minus}{plus}]")
        status = "ready" if self.roster.can_start_game else "not ready"
        lines.append(
            f"Total: {self.roster.total_assigned_roles} of {self.roster.player_count} players ({status})"
        )
        return lines

    def _cmd_add(self, args: List[str]) -> List[str]:
        locked = self._setup_locked()
        if locked:
            return locked
        player = self.roster.add_player()
        return [f"Added {player.name}."]

    def _cmd_remove(self, args: List[str]) -> List[str]:
        locked = self._setup_locked()
        if locked:
            return locked
        positions = self._parse_positions(args)
        if positions is None:
            return ["Usage: remove <n> [<n> ...]"]
        removed = self.roster.remove_players(p - 1 for p in positions)
        if not removed:
            return ["No players removed."]
        return [f"Removed {', '.join(p.name for p in removed)}."]

    def _cmd_move(self, args: List[str]) -> List[str]:
        locked = self._setup_locked()
        if locked:
            return locked
        if len(args) != 2:
            return ["Usage: move <n>[,<n>...] <to>"]
        sources = self._parse_positions(args[0].split(","))
        target = self._parse_positions([args[1]])
        if sources is None or target is None:
            return ["Usage: move <n>[,<n>...] <to>"]
        self.roster.move_players([p - 1 for p in sources], target[0] - 1)
        return self._cmd_players([])

    def _cmd_rename(self, args: List[str]) -> List[str]:
        locked = self._setup_locked()
        if locked:
            return locked
        positions = self._parse_positions(args[:1])
        if positions is None or len(args) < 2:
            return ["Usage: rename <n> <name>"]
        index = positions[0] - 1
        if not 0 <= index < self.roster.player_count:
            return [f"No player at position {positions[0]}."]
        player = self.roster.players[index]
        old_name = player.name
        self.roster.update_player_name(player.id, " ".join(args[1:]))
        return [f"Renamed {old_name!r} to {player.name!r}."]

    def _cmd_inc(self, args: List[str]) -> List[str]:
        return self._change_role(args, increment=True)

    def _cmd_dec(self, args: List[str]) -> List[str]:
        return self._change_role(args, increment=False)

    def _change_role(self, args: List[str], increment: bool) -> List[str]:
        locked = self._setup_locked()
        if locked:
            return locked
        choices = ", ".join(r.value for r in special_roles())
        if not args:
            return [f"Usage: {'inc' if increment else 'dec'} <role> ({choices})"]
        try:
            role = parse_role(" ".join(args))
        except ValueError:
            return [f"Unknown role: {' '.join(args)} ({choices})"]

        changed = self.roster.increment(role) if increment else self.roster.decrement(role)
        if not changed:
            return [f"Cannot {'add' if increment else 'remove'} {role.label}."]
        return self._cmd_roles([])

    # Round commands

    def _cmd_start(self, args: List[str]) -> List[str]:
        if self.in_round:
            return ["A round is already running. Use 'new' to return to setup."]
        if not self.roster.can_start_game:
            return [
                f"Cannot start: need at least {self.roster.min_players} players "
                f"and exactly one role per player."
            ]
        self.assigner.start(self.roster)
        return ["Roles have been shuffled. Pass the device to the first player."] + self._turn_lines()

    def _cmd_show(self, args: List[str]) -> List[str]:
        if not self.in_round:
            return ["No round running. Use 'start' first."]
        if self.assigner.phase == RevealPhase.COMPLETED:
            return ["Everyone has seen their role."]
        player = self.assigner.current_player
        return [f"{player.name}, you are: {player.role.label}"]

    def _cmd_next(self, args: List[str]) -> List[str]:
        if not self.in_round:
            return ["No round running. Use 'start' first."]
        if not self.assigner.advance():
            return ["Everyone has already seen their role."]
        if self.assigner.phase == RevealPhase.COMPLETED:
            return ["All roles revealed. The game can begin!"]
        return self._turn_lines()

    def _cmd_restart(self, args: List[str]) -> List[str]:
        if not self.in_round:
            return ["No round running. Use 'start' first."]
        self.assigner.restart()
        return ["Reveal restarted with the same roles."] + self._turn_lines()

    def _cmd_new(self, args: List[str]) -> List[str]:
        self.assigner.discard()
        return ["Back to setup."]

    # Helpers

    def _turn_lines(self) -> List[str]:
        current_round = self.assigner.current_round
        position, total = current_round.progress
        hint = "finish round" if current_round.is_last_player else "pass on"
        return [
            f"Player {position} of {total}: {current_round.current_player.name}",
            f"Type 'show' to see your role, then 'next' to {hint}."
        ]

    def _setup_locked(self) -> List[str]:
        if self.in_round:
            return ["Setup is locked while a round is running. Use 'new' to return to setup."]
        return []

    @staticmethod
    def _parse_positions(values: List[str]) -> Optional[List[int]]:
        try:
            positions = [int(v) for v in values]
        except ValueError:
            return None
        return positions or None


def main():
    """Entry point for the interactive session."""
    parser = argparse.ArgumentParser(
        description="Configure a Werwolf roster and reveal roles on one device",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                                 # Two players, all villagers
  python main.py --config configs/classic.yaml   # Eight players with special roles
  python main.py --seed 42 --verbose             # Reproducible shuffle, print events
        """
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to YAML configuration file (default: use default config)"
    )
    parser.add_argument(
        "--seed",
        "-s",
        type=int,
        default=None,
        help="Random seed for reproducible role assignment"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Print roster and round events as they happen"
    )

    args = parser.parse_args()

    config = load_config(args.config)
    if args.seed is not None:
        config.random_seed = args.seed
    if args.verbose:
        config.echo_events = True

    print("Werwolf")
    print("=" * 60)
    if args.config:
        print(f"Using config: {args.config}")
    print("Type 'help' for a list of commands.")
    print("=" * 60)

    try:
        session = WerwolfSession(config=config)
    except ConfigurationError as e:
        parser.exit(1, f"Invalid configuration: {e}\n")
    while session.running:
        try:
            line = input("> ")
        except EOFError:
            break
        for output in session.execute(line):
            print(output)


if __name__ == "__main__":
    main()
