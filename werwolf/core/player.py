"""
Player classes: roster entries and the read-only copies dealt into a round.
"""

from dataclasses import dataclass
from typing import Optional

from .roles import Role


@dataclass(eq=False)
class Player:
    """Represents a player on the roster. Identity is the id, not the name."""
    id: str
    name: str
    role: Optional[Role] = None  # Assigned once a round starts

    def __str__(self) -> str:
        if self.role is None:
            return self.name
        return f"{self.name} ({self.role.label})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def is_assigned(self) -> bool:
        """Check if the player has been given a role."""
        return self.role is not None

    def with_role(self, role: Role) -> "AssignedPlayer":
        """Return a frozen copy of this player carrying the given role."""
        return AssignedPlayer(id=self.id, name=self.name, role=role)


@dataclass(frozen=True)
class AssignedPlayer:
    """A player as dealt into one round. Name and role cannot change afterwards."""
    id: str
    name: str
    role: Role

    def __str__(self) -> str:
        return f"{self.name} ({self.role.label})"

    @property
    def is_assigned(self) -> bool:
        return True
