"""
Exceptions for roster and round errors.
"""


class WerwolfError(Exception):
    """Base exception for all Werwolf errors."""

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class RoundNotStartableError(WerwolfError):
    """Raised when a round is started from a roster that cannot start a game."""

    def __init__(self, player_count: int, assigned_roles: int, message: str = ""):
        self.player_count = player_count
        self.assigned_roles = assigned_roles
        super().__init__(
            message or f"Cannot start round with {player_count} players and {assigned_roles} assigned roles",
            {"player_count": player_count, "assigned_roles": assigned_roles},
        )


class NoActiveRoundError(WerwolfError):
    """Raised when a round operation is called before any round was started."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"No active round for '{operation}'; call start() first")


class ConfigurationError(WerwolfError):
    """Raised when configuration is invalid."""

    pass
