"""
Event emitter that records roster and round events in memory.
"""

from typing import Dict, Any, List


class EventEmitter:
    """Event emitter that keeps game events in memory and can echo them to the console."""

    def __init__(self, echo: bool = False):
        self.echo = echo
        self.events: List[Dict[str, Any]] = []

    def _emit(self, event_type: str, data: Dict[str, Any], source: str, message: str) -> None:
        """Record an event and optionally print a tagged line."""
        self.events.append({"type": event_type, "data": data})
        if self.echo:
            print(f"[{source}] {message}")

    def events_of_type(self, event_type: str) -> List[Dict[str, Any]]:
        """Get all recorded events of one type."""
        return [e for e in self.events if e["type"] == event_type]

    def clear(self) -> None:
        """Forget all recorded events."""
        self.events.clear()

    # Roster events

    def emit_player_added(self, player_id: str, name: str, player_count: int) -> None:
        """Emit player added event."""
        self._emit("player_added", {
            "player_id": player_id,
            "name": name,
            "player_count": player_count
        }, "ROSTER", f"Added {name}, now {player_count} players")

    def emit_players_removed(self, names: List[str], player_count: int) -> None:
        """Emit players removed event."""
        self._emit("players_removed", {
            "names": names,
            "player_count": player_count
        }, "ROSTER", f"Removed {names}, now {player_count} players")

    def emit_players_moved(self, from_indices: List[int], to_index: int) -> None:
        """Emit players moved event."""
        self._emit("players_moved", {
            "from_indices": from_indices,
            "to_index": to_index
        }, "ROSTER", f"Moved players {from_indices} to {to_index}")

    def emit_player_renamed(self, player_id: str, old_name: str, new_name: str) -> None:
        """Emit player renamed event."""
        self._emit("player_renamed", {
            "player_id": player_id,
            "old_name": old_name,
            "new_name": new_name
        }, "ROSTER", f"Renamed {old_name!r} to {new_name!r}")

    def emit_role_changed(self, role: str, count: int, villagers: int) -> None:
        """Emit role count change event."""
        self._emit("role_changed", {
            "role": role,
            "count": count,
            "villagers": villagers
        }, "ROSTER", f"{role} now {count}, villagers {villagers}")

    def emit_roles_synchronized(self, player_count: int, villagers: int) -> None:
        """Emit villager resynchronization event."""
        self._emit("roles_synchronized", {
            "player_count": player_count,
            "villagers": villagers
        }, "ROSTER", f"Synchronized roles with {player_count} players, villagers {villagers}")

    def emit_rejected(self, operation: str, reason: str, source: str = "ROSTER") -> None:
        """Emit event for an operation that was ignored."""
        self._emit("rejected", {
            "operation": operation,
            "reason": reason
        }, source, f"Ignored {operation}: {reason}")

    # Round events

    def emit_round_started(self, player_count: int, role_counts: Dict[str, int]) -> None:
        """Emit round start event."""
        self._emit("round_started", {
            "player_count": player_count,
            "role_counts": role_counts
        }, "ROUND", f"Round started with {player_count} players")

    def emit_player_advanced(self, current_index: int, total: int) -> None:
        """Emit event when the reveal passes to the next player."""
        self._emit("player_advanced", {
            "current_index": current_index,
            "total": total
        }, "ROUND", f"Passed on to player {current_index + 1} of {total}")

    def emit_round_completed(self, total: int) -> None:
        """Emit round completed event."""
        self._emit("round_completed", {
            "total": total
        }, "ROUND", f"All {total} players have seen their role")

    def emit_round_restarted(self, total: int) -> None:
        """Emit round restarted event."""
        self._emit("round_restarted", {
            "total": total
        }, "ROUND", "Reveal restarted from the first player")

