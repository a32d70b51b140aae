"""
Shared pytest fixtures for wallgo tests.

Game fixtures are function-scoped so every test starts from its own game.
``make_state`` builds arbitrary snapshots (stones anywhere, walls already
standing) without replaying a whole game.
"""

from pathlib import Path
import sys
from typing import Callable, Dict, Iterable, List, Optional, Tuple

import pytest

# Make `import wallgo` work when pytest is run from a checkout without an
# editable install.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from wallgo.board_manager import BoardManager
from wallgo.game import WallGoGame
from wallgo.models import (
    GameConfig,
    GamePhase,
    GameState,
    Position,
    Stone,
    Wall,
    WallDirection,
)
from wallgo.game_engine import GameEngine


def hwall(x: int, y: int, player: int = 0) -> Wall:
    return Wall(player=player, direction=WallDirection.HORIZONTAL, x=x, y=y)


def vwall(x: int, y: int, player: int = 0) -> Wall:
    return Wall(player=player, direction=WallDirection.VERTICAL, x=x, y=y)


def box_walls(x: int, y: int, player: int = 0) -> List[Wall]:
    """All four edges of cell (x, y)."""
    return [
        hwall(x, y, player),
        hwall(x + 1, y, player),
        vwall(x, y, player),
        vwall(x, y + 1, player),
    ]


def make_state(
    size: int = 7,
    stones: Optional[Dict[int, List[Tuple[int, int]]]] = None,
    walls: Iterable[Wall] = (),
    phase: GamePhase = GamePhase.MOVING,
    current_player: int = 0,
    num_players: Optional[int] = None,
    stones_per_player: Optional[int] = None,
) -> GameState:
    """Build a snapshot with the given stones and standing walls."""
    stones = stones or {}
    num_players = num_players or max(2, len(stones))
    per_player = stones_per_player or max(
        (len(v) for v in stones.values()), default=1
    )
    config = GameConfig(
        board_size=size,
        num_players=num_players,
        stones_per_player=per_player,
    )
    state = GameEngine.new_game(config)

    cells = state.cells
    all_stones = []
    for player in range(num_players):
        player_stones = []
        for index, (x, y) in enumerate(stones.get(player, [])):
            stone = Stone(player=player, index=index, position=Position(x=x, y=y))
            cells = BoardManager.replace_in_grid(cells, x, y, stone.id)
            player_stones.append(stone)
        all_stones.append(tuple(player_stones))

    horizontal = state.horizontal_walls
    vertical = state.vertical_walls
    for wall in walls:
        if wall.direction == WallDirection.HORIZONTAL:
            horizontal = BoardManager.replace_in_grid(horizontal, wall.x, wall.y, wall)
        else:
            vertical = BoardManager.replace_in_grid(vertical, wall.x, wall.y, wall)

    return state.model_copy(
        update={
            "cells": cells,
            "stones": tuple(all_stones),
            "horizontal_walls": horizontal,
            "vertical_walls": vertical,
            "phase": phase,
            "current_player": current_player,
        }
    )


@pytest.fixture
def state_factory() -> Callable[..., GameState]:
    """Factory for snapshots with stones and walls already in place."""
    return make_state


@pytest.fixture
def game_factory() -> Callable[..., WallGoGame]:
    """Factory for fresh games with customizable config."""

    def _create_game(
        board_size: int = 7,
        num_players: int = 2,
        stones_per_player: int = 2,
    ) -> WallGoGame:
        return WallGoGame(
            GameConfig(
                board_size=board_size,
                num_players=num_players,
                stones_per_player=stones_per_player,
            )
        )

    return _create_game


@pytest.fixture
def moving_game(game_factory) -> WallGoGame:
    """7x7, two players, two stones each, placed in the four corners.

    Player 0 holds (0, 0) and (0, 6); player 1 holds (6, 6) and (6, 0).
    """
    game = game_factory()
    for x, y in [(0, 0), (6, 6), (0, 6), (6, 0)]:
        game.place_stone(x, y)
    return game
