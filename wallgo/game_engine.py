"""Core game engine for Wall Go.

Every command takes a ``GameState`` snapshot and returns a new one; the
input is never modified. All validation runs before the new snapshot is
built, so a rejected command has no effect at all.

Set ``WALLGO_DEBUG_ENGINE=1`` to log every applied command.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from .board_manager import BoardManager, StoneRef
from .config import env_flag
from .errors import (
    IllegalMoveError,
    IllegalWallError,
    InvalidPlacementError,
    WrongTurnError,
)
from .models import (
    GameConfig,
    GamePhase,
    GameResult,
    GameState,
    Position,
    Stone,
    Wall,
    WallDirection,
)
from .territory import ResultEvaluator
from .turn_logic import (
    GameAction,
    assert_action_allowed,
    assert_stone_may_move,
    assert_stone_may_wall,
    enter_phase,
    start_next_player,
)

logger = logging.getLogger(__name__)

DEBUG_ENGINE = env_flag("WALLGO_DEBUG_ENGINE")


def _debug(msg: str) -> None:
    """Log a trace message when engine debug is enabled."""
    if DEBUG_ENGINE:
        logger.debug(msg)


@dataclass(frozen=True)
class MoveOutcome:
    """Result of a stone step.

    Attributes:
        state: Snapshot after the step.
        placable_walls: Walls the moved stone may now erect.
    """
    state: GameState
    placable_walls: List[Wall]


@dataclass(frozen=True)
class WallOutcome:
    """Result of a wall placement.

    Attributes:
        state: Snapshot after the wall, with the next player to act.
        result: The final result if this wall ended the game, else ``None``.
    """
    state: GameState
    result: Optional[GameResult]


class GameEngine:
    """Wall Go rules: placement, movement, walls and game completion."""

    @staticmethod
    def new_game(config: GameConfig | None = None) -> GameState:
        """Return the opening snapshot: empty board, player 0 to place."""
        config = config or GameConfig()
        size = config.board_size
        return GameState(
            config=config,
            cells=BoardManager.empty_grid(size, size),
            horizontal_walls=BoardManager.empty_grid(size + 1, size),
            vertical_walls=BoardManager.empty_grid(size, size + 1),
            stones=tuple(() for _ in range(config.num_players)),
        )

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------

    @staticmethod
    def can_place_stone(state: GameState, x: int, y: int) -> bool:
        if state.phase != GamePhase.PLACING_STONES:
            return False
        if not BoardManager.is_valid_position(x, y, state.config.board_size):
            return False
        return state.cells[x][y] is None

    @staticmethod
    def place_stone(state: GameState, x: int, y: int) -> GameState:
        """Place a stone for the current player and pass the turn.

        Once every player holds ``stones_per_player`` stones the game
        enters the moving phase.
        """
        assert_action_allowed(state, GameAction.PLACE_STONE)
        if not GameEngine.can_place_stone(state, x, y):
            raise InvalidPlacementError(
                "Cannot place a stone there",
                rule_ref="placement",
                context={"x": x, "y": y},
            )

        player = state.current_player
        stone = Stone(
            player=player,
            index=len(state.stones[player]),
            position=Position(x=x, y=y),
        )
        stones = list(state.stones)
        stones[player] = stones[player] + (stone,)

        new_state = state.model_copy(
            update={
                "cells": BoardManager.replace_in_grid(state.cells, x, y, stone.id),
                "stones": tuple(stones),
            }
        )
        _debug(f"Player {player} placed stone {stone.index} at ({x}, {y})")

        per_player = state.config.stones_per_player
        if all(len(s) == per_player for s in new_state.stones):
            new_state = enter_phase(new_state, GameAction.PLACE_STONE, GamePhase.MOVING)

        return start_next_player(new_state)

    # ------------------------------------------------------------------
    # Movement
    # ------------------------------------------------------------------

    @staticmethod
    def can_move_stone_to(state: GameState, stone: StoneRef, x: int, y: int) -> bool:
        """Whether ``stone`` may step to ``(x, y)`` right now.

        Ownership is not checked here; :meth:`move_stone` reports a foreign
        stone as a wrong-turn error.
        """
        if state.phase != GamePhase.MOVING or state.remaining_steps <= 0:
            return False
        current = BoardManager.resolve_stone(stone, state)
        if current is None:
            return False
        if state.active_stone is not None and state.active_stone != current.id:
            return False
        reachable = BoardManager.get_reachable_positions_in_one_step(
            current.position, state
        )
        return Position(x=x, y=y) in reachable

    @staticmethod
    def move_stone(state: GameState, stone: StoneRef, x: int, y: int) -> MoveOutcome:
        """Step ``stone`` one cell and spend one unit of the step budget.

        The turn does not pass; the returned outcome lists the walls the
        stone may erect from its new cell.
        """
        assert_action_allowed(state, GameAction.MOVE_STONE)
        current = BoardManager.resolve_stone(stone, state)
        if current is None:
            raise IllegalMoveError("Unknown stone", rule_ref="movement")
        assert_stone_may_move(state, current)
        if not GameEngine.can_move_stone_to(state, current, x, y):
            raise IllegalMoveError(
                "Destination is not reachable in one step",
                rule_ref="movement",
                context={
                    "from": f"({current.position.x}, {current.position.y})",
                    "to": f"({x}, {y})",
                },
            )
        if current.player != state.current_player:
            raise WrongTurnError(
                f"It is player {state.current_player}'s turn",
                context={"stone_player": current.player},
            )

        old = current.position
        moved = current.model_copy(update={"position": Position(x=x, y=y)})
        stones = list(state.stones)
        player_stones = list(stones[moved.player])
        player_stones[moved.index] = moved
        stones[moved.player] = tuple(player_stones)

        cells = BoardManager.replace_in_grid(state.cells, old.x, old.y, None)
        cells = BoardManager.replace_in_grid(cells, x, y, moved.id)

        new_state = state.model_copy(
            update={
                "cells": cells,
                "stones": tuple(stones),
                "remaining_steps": state.remaining_steps - 1,
                "active_stone": moved.id,
            }
        )
        _debug(
            f"Player {moved.player} moved stone {moved.index} "
            f"({old.x}, {old.y}) -> ({x}, {y}); {new_state.remaining_steps} steps left"
        )
        return MoveOutcome(
            state=new_state,
            placable_walls=BoardManager.get_placable_walls_for_stone(moved, new_state),
        )

    # ------------------------------------------------------------------
    # Walls
    # ------------------------------------------------------------------

    @staticmethod
    def place_wall_for_stone(state: GameState, stone: StoneRef, wall: Wall) -> WallOutcome:
        """Erect ``wall`` next to ``stone``, end the turn, check for game end.

        Walls are permanent. When the wall completes the partition of the
        board the game is over and the outcome carries the result.
        """
        assert_action_allowed(state, GameAction.PLACE_WALL)
        current = BoardManager.resolve_stone(stone, state)
        if current is None:
            raise IllegalWallError("Unknown stone", rule_ref="walls")
        if current.player != state.current_player:
            raise WrongTurnError(
                f"It is player {state.current_player}'s turn",
                context={"stone_player": current.player},
            )
        assert_stone_may_wall(state, current)
        if wall not in BoardManager.get_placable_walls_for_stone(current, state):
            raise IllegalWallError(
                "Wall is not a free edge of the stone's cell",
                rule_ref="walls",
                context={
                    "direction": wall.direction.value,
                    "x": wall.x,
                    "y": wall.y,
                },
            )

        if wall.direction == WallDirection.HORIZONTAL:
            update = {
                "horizontal_walls": BoardManager.replace_in_grid(
                    state.horizontal_walls, wall.x, wall.y, wall
                )
            }
        else:
            update = {
                "vertical_walls": BoardManager.replace_in_grid(
                    state.vertical_walls, wall.x, wall.y, wall
                )
            }
        new_state = state.model_copy(update=update)
        _debug(
            f"Player {wall.player} built {wall.direction.value} wall at ({wall.x}, {wall.y})"
        )

        new_state = start_next_player(new_state)
        result = ResultEvaluator.check_for_game_completion(new_state)
        if result is not None:
            new_state = enter_phase(new_state, GameAction.PLACE_WALL, GamePhase.OVER)
            new_state = new_state.model_copy(update={"result": result})
            logger.info(f"Game over: winners={list(result.winners)}, scores={list(result.scores)}")
        return WallOutcome(state=new_state, result=result)

    # ------------------------------------------------------------------
    # Turn
    # ------------------------------------------------------------------

    @staticmethod
    def start_next_player(state: GameState) -> GameState:
        """Pass the turn without any other change; see turn_logic."""
        return start_next_player(state)

    @staticmethod
    def check_for_game_completion(state: GameState) -> Optional[GameResult]:
        return ResultEvaluator.check_for_game_completion(state)
