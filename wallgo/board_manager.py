"""Board-level helpers for the Wall Go rules engine.

Cell and wall coordinates share one convention: ``x`` is the row and ``y``
the column. The horizontal wall grid has ``N + 1`` rows, slot ``(x, y)``
being the edge above cell ``(x, y)``; the vertical wall grid has ``N + 1``
columns, slot ``(x, y)`` being the edge left of cell ``(x, y)``.
"""
from __future__ import annotations

from typing import Optional, Tuple, TypeVar, Union

from .models import (
    GameState,
    Position,
    Stone,
    StoneId,
    Wall,
    WallDirection,
)

__all__ = ["BoardManager", "StoneRef"]

T = TypeVar("T")

# Commands accept either a stone record (possibly from an older snapshot) or
# its arena id; both are resolved against the current state.
StoneRef = Union[Stone, StoneId]


class BoardManager:
    """Helper for board-level operations.

    It is side-effect-free; callers pass in ``GameState`` snapshots and
    receive derived views or new grids.
    """

    @staticmethod
    def is_valid_position(x: int, y: int, size: int) -> bool:
        return 0 <= x < size and 0 <= y < size

    @staticmethod
    def empty_grid(rows: int, cols: int) -> Tuple[Tuple[None, ...], ...]:
        return tuple(tuple(None for _ in range(cols)) for _ in range(rows))

    @staticmethod
    def replace_in_grid(
        grid: Tuple[Tuple[T, ...], ...], x: int, y: int, value: T
    ) -> Tuple[Tuple[T, ...], ...]:
        """Return a copy of ``grid`` with slot ``(x, y)`` set to ``value``."""
        row = grid[x]
        new_row = row[:y] + (value,) + row[y + 1:]
        return grid[:x] + (new_row,) + grid[x + 1:]

    @staticmethod
    def resolve_stone(ref: StoneRef, state: GameState) -> Optional[Stone]:
        """Return the current record of ``ref`` or ``None`` if unknown."""
        stone_id = ref.id if isinstance(ref, Stone) else ref
        return state.get_stone(stone_id)

    @staticmethod
    def get_stone_at(position: Position, state: GameState) -> Optional[Stone]:
        """Return the stone at ``position`` or ``None`` if empty."""
        size = state.config.board_size
        if not BoardManager.is_valid_position(position.x, position.y, size):
            return None
        occupant = state.cells[position.x][position.y]
        if occupant is None:
            return None
        return state.get_stone(occupant)

    @staticmethod
    def is_wall_slot_free(wall: Wall, state: GameState) -> bool:
        if wall.direction == WallDirection.HORIZONTAL:
            grid = state.horizontal_walls
        else:
            grid = state.vertical_walls
        if not (0 <= wall.x < len(grid) and 0 <= wall.y < len(grid[0])):
            return False
        return grid[wall.x][wall.y] is None

    @staticmethod
    def get_reachable_positions_in_one_step(
        position: Position, state: GameState
    ) -> list[Position]:
        """Return the up/down/left/right neighbours a stone could step to.

        A neighbour qualifies when it is on the board, no wall sits on the
        shared edge, and no stone (of any player) occupies it. Region flood
        fill expands with exactly this rule.
        """
        size = state.config.board_size
        x, y = position.x, position.y
        if not BoardManager.is_valid_position(x, y, size):
            return []

        horizontal = state.horizontal_walls
        vertical = state.vertical_walls
        candidates: list[Position] = []
        if x > 0 and horizontal[x][y] is None:
            candidates.append(Position(x=x - 1, y=y))
        if x < size - 1 and horizontal[x + 1][y] is None:
            candidates.append(Position(x=x + 1, y=y))
        if y > 0 and vertical[x][y] is None:
            candidates.append(Position(x=x, y=y - 1))
        if y < size - 1 and vertical[x][y + 1] is None:
            candidates.append(Position(x=x, y=y + 1))

        return [p for p in candidates if state.cells[p.x][p.y] is None]

    @staticmethod
    def get_placable_walls_for_stone(
        stone: StoneRef, state: GameState
    ) -> list[Wall]:
        """Return the free wall slots on the four edges of the stone's cell.

        Order is above, below, left, right. Walls are attributed to the
        stone's owner.
        """
        current = BoardManager.resolve_stone(stone, state)
        if current is None:
            return []
        x, y = current.position.x, current.position.y
        candidates = (
            Wall(player=current.player, direction=WallDirection.HORIZONTAL, x=x, y=y),
            Wall(player=current.player, direction=WallDirection.HORIZONTAL, x=x + 1, y=y),
            Wall(player=current.player, direction=WallDirection.VERTICAL, x=x, y=y),
            Wall(player=current.player, direction=WallDirection.VERTICAL, x=x, y=y + 1),
        )
        return [w for w in candidates if BoardManager.is_wall_slot_free(w, state)]

    @staticmethod
    def get_wall_on_side(
        stone: StoneRef, side: str, state: GameState
    ) -> Optional[Wall]:
        """Return the wall value for one named edge of the stone's cell.

        ``side`` is one of ``up``, ``down``, ``left``, ``right``. The wall is
        returned whether or not its slot is free.
        """
        current = BoardManager.resolve_stone(stone, state)
        if current is None:
            return None
        x, y = current.position.x, current.position.y
        slots = {
            "up": (WallDirection.HORIZONTAL, x, y),
            "down": (WallDirection.HORIZONTAL, x + 1, y),
            "left": (WallDirection.VERTICAL, x, y),
            "right": (WallDirection.VERTICAL, x, y + 1),
        }
        slot = slots.get(side.lower())
        if slot is None:
            return None
        direction, wx, wy = slot
        return Wall(player=current.player, direction=direction, x=wx, y=wy)

    @staticmethod
    def has_legal_turn(state: GameState, player: int) -> bool:
        """Whether ``player`` can complete a move-and-wall turn.

        A zero-step turn is always available to a stone with a free edge, and
        a stone with no free edge cannot step anywhere either.
        """
        return any(
            BoardManager.get_placable_walls_for_stone(stone, state)
            for stone in state.stones[player]
        )
