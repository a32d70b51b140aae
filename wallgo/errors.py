"""
Wall Go Error Hierarchy

Exception hierarchy for the rules engine. Every rejected command raises a
subclass of RulesViolationError; callers can catch WallGoError to handle
anything the package raises.

Usage:
    from wallgo.errors import IllegalMoveError, RulesViolationError

    try:
        game.move_stone(stone, 3, 4)
    except RulesViolationError as e:
        logger.info(f"Rejected: {e.message} ({e.code})")
"""

from typing import Any

__all__ = [
    "ConfigurationError",
    "GameOver",
    "GameOverError",
    "IllegalMove",
    "IllegalMoveError",
    "IllegalWall",
    "IllegalWallError",
    "InvalidPlacement",
    "InvalidPlacementError",
    "InvalidStateError",
    "RulesViolationError",
    "WallGoError",
    "WrongTurn",
    "WrongTurnError",
]


class WallGoError(Exception):
    """Base exception for all Wall Go errors.

    Attributes:
        code: Machine-readable error code for categorization
        message: Human-readable error description
        context: Additional context for debugging
    """
    code: str = "WALLGO_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# Game Rules Errors
# =============================================================================


class RulesViolationError(WallGoError):
    """Command rejected by the game rules.

    The engine validates every command before touching the state, so a
    RulesViolationError always leaves the game exactly as it was.

    Attributes:
        rule_ref: Short name of the rule that rejected the command
    """
    code: str = "RULES_VIOLATION"

    def __init__(
        self,
        message: str,
        rule_ref: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        self.rule_ref = rule_ref
        if rule_ref:
            self.context["rule_ref"] = rule_ref


class InvalidPlacementError(RulesViolationError):
    """Stone placement in the wrong phase, off the board, or on a stone."""
    code: str = "INVALID_PLACEMENT"


class WrongTurnError(RulesViolationError):
    """The acting stone does not belong to the current player."""
    code: str = "WRONG_TURN"


class IllegalMoveError(RulesViolationError):
    """Stone move in the wrong phase, over budget, or to an unreachable cell."""
    code: str = "ILLEGAL_MOVE"


class IllegalWallError(RulesViolationError):
    """Wall not among the legal placements for the stone."""
    code: str = "ILLEGAL_WALL"


class GameOverError(RulesViolationError):
    """Mutating command issued after the game has finished."""
    code: str = "GAME_OVER"


# =============================================================================
# Engine Errors
# =============================================================================


class InvalidStateError(WallGoError):
    """Corrupted or unexpected game state.

    Raised when the engine would move into a configuration that should not
    be possible through normal gameplay.
    """
    code: str = "INVALID_STATE"


class ConfigurationError(WallGoError):
    """Invalid game configuration or environment override."""
    code: str = "CONFIGURATION_ERROR"

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        if setting:
            self.context["setting"] = setting


# Short names matching the rules glossary
InvalidPlacement = InvalidPlacementError
WrongTurn = WrongTurnError
IllegalMove = IllegalMoveError
IllegalWall = IllegalWallError
GameOver = GameOverError
