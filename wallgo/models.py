"""
Pydantic Models for Wall Go Game State

Every model is frozen: the engine never mutates a snapshot, it returns a new
one from each command. Field aliases follow the camelCase names used by the
browser front end so ``model_dump(by_alias=True)`` can be handed straight to
a renderer.
"""

from pydantic import BaseModel, Field, ValidationError, model_validator
from typing import Optional, Tuple
from enum import Enum

from .errors import ConfigurationError


MAX_STEPS_PER_TURN = 2


class GamePhase(str, Enum):
    """Game phase enumeration"""
    PLACING_STONES = "placing_stones"
    MOVING = "moving"
    OVER = "over"


class WallDirection(str, Enum):
    """Wall orientation enumeration"""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class GameConfig(BaseModel):
    """Board size, seat count and stones per seat for one game."""
    board_size: int = Field(7, gt=0, alias="boardSize")
    num_players: int = Field(2, ge=2, alias="numPlayers")
    stones_per_player: int = Field(2, ge=1, alias="stonesPerPlayer")

    class Config:
        populate_by_name = True
        frozen = True

    @model_validator(mode="after")
    def _check_board_capacity(self) -> "GameConfig":
        total = self.num_players * self.stones_per_player
        if total > self.board_size * self.board_size:
            raise ValueError(
                f"{total} stones do not fit on a "
                f"{self.board_size}x{self.board_size} board"
            )
        return self

    @classmethod
    def create(
        cls,
        board_size: int = 7,
        num_players: int = 2,
        stones_per_player: int = 2,
    ) -> "GameConfig":
        """Build a config, reporting bad values as ConfigurationError."""
        try:
            return cls(
                board_size=board_size,
                num_players=num_players,
                stones_per_player=stones_per_player,
            )
        except ValidationError as exc:
            raise ConfigurationError(
                "Invalid game configuration",
                context={
                    "boardSize": board_size,
                    "numPlayers": num_players,
                    "stonesPerPlayer": stones_per_player,
                    "errors": "; ".join(e["msg"] for e in exc.errors()),
                },
            ) from exc


class Position(BaseModel):
    """Board cell; ``x`` is the row, ``y`` the column."""
    x: int
    y: int

    class Config:
        frozen = True


class StoneId(BaseModel):
    """Arena key of a stone: owner plus per-player placement index."""
    player: int
    index: int

    class Config:
        frozen = True


class Stone(BaseModel):
    """Stone on the board"""
    player: int
    index: int
    position: Position

    class Config:
        frozen = True

    @property
    def id(self) -> StoneId:
        return StoneId(player=self.player, index=self.index)


class Wall(BaseModel):
    """Wall segment.

    Horizontal slot (x, y) is the edge above cell (x, y); the grid has
    board_size + 1 rows. Vertical slot (x, y) is the edge left of cell
    (x, y); the grid has board_size + 1 columns.
    """
    player: int
    direction: WallDirection
    x: int
    y: int

    class Config:
        frozen = True


class Region(BaseModel):
    """Cells reachable from one player's stones"""
    player: int
    cells: Tuple[Tuple[bool, ...], ...]
    size: int

    class Config:
        frozen = True

    def contains(self, position: Position) -> bool:
        """Whether ``position`` is in the region; off-board cells never are."""
        size = len(self.cells)
        if not (0 <= position.x < size and 0 <= position.y < size):
            return False
        return self.cells[position.x][position.y]


class GameResult(BaseModel):
    """Final outcome: every player tied for the largest region wins."""
    winners: Tuple[int, ...]
    regions: Tuple[Region, ...]

    class Config:
        frozen = True

    @property
    def is_draw(self) -> bool:
        return len(self.winners) > 1

    @property
    def winner(self) -> Optional[int]:
        """The sole winner, or ``None`` when the game is drawn."""
        return None if self.is_draw else self.winners[0]

    @property
    def scores(self) -> Tuple[int, ...]:
        return tuple(region.size for region in self.regions)


class GameState(BaseModel):
    """Complete game state.

    ``cells`` stores the :class:`StoneId` of the occupant rather than the
    stone itself; ``stones`` is the single owner of stone records, so a move
    rewrites both views in the same new snapshot.
    """
    config: GameConfig
    cells: Tuple[Tuple[Optional[StoneId], ...], ...]
    horizontal_walls: Tuple[Tuple[Optional[Wall], ...], ...] = Field(
        alias="horizontalWalls"
    )
    vertical_walls: Tuple[Tuple[Optional[Wall], ...], ...] = Field(
        alias="verticalWalls"
    )
    stones: Tuple[Tuple[Stone, ...], ...]
    current_player: int = Field(0, alias="currentPlayer")
    remaining_steps: int = Field(
        MAX_STEPS_PER_TURN,
        ge=0,
        le=MAX_STEPS_PER_TURN,
        alias="remainingStepsAllowedForCurrentPlayer",
    )
    phase: GamePhase = GamePhase.PLACING_STONES
    active_stone: Optional[StoneId] = Field(None, alias="activeStone")
    result: Optional[GameResult] = None

    class Config:
        populate_by_name = True
        frozen = True

    def get_stone(self, stone_id: StoneId) -> Optional[Stone]:
        """Return the stone record for ``stone_id`` or ``None`` if unknown."""
        if not 0 <= stone_id.player < len(self.stones):
            return None
        player_stones = self.stones[stone_id.player]
        if not 0 <= stone_id.index < len(player_stones):
            return None
        return player_stones[stone_id.index]
