"""Wall Go rules engine.

Players place stones, then take turns stepping one stone up to two cells
and walling an edge next to it. Once walls leave no cell reachable by two
players, the largest territory wins.
"""

from .errors import (
    ConfigurationError,
    GameOver,
    GameOverError,
    IllegalMove,
    IllegalMoveError,
    IllegalWall,
    IllegalWallError,
    InvalidPlacement,
    InvalidPlacementError,
    InvalidStateError,
    RulesViolationError,
    WallGoError,
    WrongTurn,
    WrongTurnError,
)
from .models import (
    MAX_STEPS_PER_TURN,
    GameConfig,
    GamePhase,
    GameResult,
    GameState,
    Position,
    Region,
    Stone,
    StoneId,
    Wall,
    WallDirection,
)
from .board_manager import BoardManager
from .territory import RegionAnalyzer, ResultEvaluator
from .game_engine import GameEngine, MoveOutcome, WallOutcome
from .game import WallGoGame

__all__ = [
    "BoardManager",
    "ConfigurationError",
    "GameConfig",
    "GameEngine",
    "GameOver",
    "GameOverError",
    "GamePhase",
    "GameResult",
    "GameState",
    "IllegalMove",
    "IllegalMoveError",
    "IllegalWall",
    "IllegalWallError",
    "InvalidPlacement",
    "InvalidPlacementError",
    "InvalidStateError",
    "MAX_STEPS_PER_TURN",
    "MoveOutcome",
    "Position",
    "Region",
    "RegionAnalyzer",
    "ResultEvaluator",
    "RulesViolationError",
    "Stone",
    "StoneId",
    "Wall",
    "WallDirection",
    "WallGoError",
    "WallGoGame",
    "WallOutcome",
    "WrongTurn",
    "WrongTurnError",
]
