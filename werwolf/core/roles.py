"""
Role definitions for the Werwolf game.
"""

from enum import Enum
from typing import List


class Role(Enum):
    """Player role types."""
    VILLAGER = "villager"
    WEREWOLF = "werewolf"
    FORTUNETELLER = "fortuneteller"
    WITCH = "witch"
    AMOR = "amor"

    def __str__(self) -> str:
        return self.label

    @property
    def label(self) -> str:
        """Human-readable role name."""
        return _LABELS[self]

    @property
    def is_unique(self) -> bool:
        """Check if the role may exist at most once per game."""
        return self in [Role.FORTUNETELLER, Role.WITCH, Role.AMOR]


_LABELS = {
    Role.VILLAGER: "Villager",
    Role.WEREWOLF: "Werewolf",
    Role.FORTUNETELLER: "Fortune Teller",
    Role.WITCH: "Witch",
    Role.AMOR: "Amor",
}


def special_roles() -> List[Role]:
    """Get every role the user can adjust directly (all but villager)."""
    return [role for role in Role if role is not Role.VILLAGER]


def parse_role(name: str) -> Role:
    """
    Resolve a role from its value, member name or label.

    Matching ignores case, surrounding whitespace and inner spaces, so
    "Fortune Teller", "fortuneteller" and "FORTUNETELLER" all resolve.

    Raises:
        ValueError: If no role matches
    """
    key = "".join(name.split()).lower()
    for role in Role:
        if key in (role.value, role.name.lower(), role.label.replace(" ", "").lower()):
            return role
    raise ValueError(f"Unknown role: {name!r}")
