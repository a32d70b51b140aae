"""Stateful handle on one Wall Go game.

A rendering layer keeps a :class:`WallGoGame` and reads ``game.state``
once per frame. Commands swap in a new immutable snapshot, so a frame that
already holds a snapshot never sees it change underneath it.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional, Tuple, TypeVar

from .board_manager import BoardManager, StoneRef
from .errors import RulesViolationError
from .game_engine import GameEngine, MoveOutcome, WallOutcome
from .models import (
    GameConfig,
    GamePhase,
    GameResult,
    GameState,
    Position,
    Region,
    Stone,
    StoneId,
    Wall,
)
from .territory import RegionAnalyzer

__all__ = ["WallGoGame"]

logger = logging.getLogger(__name__)

R = TypeVar("R")


class WallGoGame:
    """One game instance: queries never fail, commands succeed or raise.

    The configuration is fixed for the lifetime of the instance; start a
    new game (another size, more players) by constructing a new one.
    """

    def __init__(self, config: GameConfig | None = None):
        self._state = GameEngine.new_game(config)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def state(self) -> GameState:
        """The current snapshot."""
        return self._state

    @property
    def config(self) -> GameConfig:
        return self._state.config

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    @property
    def current_player(self) -> int:
        return self._state.current_player

    @property
    def remaining_steps(self) -> int:
        return self._state.remaining_steps

    @property
    def cells(self) -> Tuple[Tuple[Optional[StoneId], ...], ...]:
        return self._state.cells

    @property
    def horizontal_walls(self) -> Tuple[Tuple[Optional[Wall], ...], ...]:
        return self._state.horizontal_walls

    @property
    def vertical_walls(self) -> Tuple[Tuple[Optional[Wall], ...], ...]:
        return self._state.vertical_walls

    @property
    def stones(self) -> Tuple[Tuple[Stone, ...], ...]:
        return self._state.stones

    @property
    def result(self) -> Optional[GameResult]:
        return self._state.result

    def stone_at(self, x: int, y: int) -> Optional[Stone]:
        return BoardManager.get_stone_at(Position(x=x, y=y), self._state)

    def can_place_stone(self, x: int, y: int) -> bool:
        return GameEngine.can_place_stone(self._state, x, y)

    def get_reachable_positions_in_one_step(self, position: Position) -> list[Position]:
        return BoardManager.get_reachable_positions_in_one_step(position, self._state)

    def can_move_stone_to(self, stone: StoneRef, x: int, y: int) -> bool:
        return GameEngine.can_move_stone_to(self._state, stone, x, y)

    def get_placable_walls_for_stone(self, stone: StoneRef) -> list[Wall]:
        return BoardManager.get_placable_walls_for_stone(stone, self._state)

    def get_reachable_region_for_player(self, player: int) -> Region:
        return RegionAnalyzer.get_reachable_region_for_player(self._state, player)

    def check_for_game_completion(self) -> Optional[GameResult]:
        """Speculative completion check; does not end the game."""
        return GameEngine.check_for_game_completion(self._state)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def place_stone(self, x: int, y: int) -> GameState:
        """Place a stone for the current player; returns the new snapshot."""
        self._state = self._run(
            "place_stone", lambda s: GameEngine.place_stone(s, x, y)
        )
        return self._state

    def move_stone(self, stone: StoneRef, x: int, y: int) -> list[Wall]:
        """Step a stone; returns the walls it may now erect."""
        outcome: MoveOutcome = self._run(
            "move_stone", lambda s: GameEngine.move_stone(s, stone, x, y)
        )
        self._state = outcome.state
        return outcome.placable_walls

    def place_wall_for_stone(self, stone: StoneRef, wall: Wall) -> Optional[GameResult]:
        """Erect a wall and end the turn; returns the result if the game ended."""
        outcome: WallOutcome = self._run(
            "place_wall", lambda s: GameEngine.place_wall_for_stone(s, stone, wall)
        )
        self._state = outcome.state
        return outcome.result

    def _run(self, action: str, command: Callable[[GameState], R]) -> R:
        try:
            return command(self._state)
        except RulesViolationError as exc:
            logger.debug(f"Rejected {action} for player {self._state.current_player}: {exc}")
            raise
