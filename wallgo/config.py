"""Environment-driven defaults for Wall Go.

Game settings can be overridden per process:

    export WALLGO_BOARD_SIZE=9
    export WALLGO_NUM_PLAYERS=3
    export WALLGO_STONES_PER_PLAYER=2

Command-line flags of ``python -m wallgo`` take precedence over these.
"""
from __future__ import annotations

import os

from .errors import ConfigurationError
from .models import GameConfig

__all__ = [
    "DEFAULT_BOARD_SIZE",
    "DEFAULT_NUM_PLAYERS",
    "DEFAULT_STONES_PER_PLAYER",
    "default_game_config",
    "env_flag",
    "env_int",
    "get_log_level",
]

DEFAULT_BOARD_SIZE = 7
DEFAULT_NUM_PLAYERS = 2
DEFAULT_STONES_PER_PLAYER = 2

_TRUTHY = {"1", "true", "yes", "on"}


def env_flag(name: str, default: str = "0") -> bool:
    """Return True when ``name`` is set to 1/true/yes/on."""
    return os.environ.get(name, default).strip().lower() in _TRUTHY


def env_int(name: str, default: int) -> int:
    """Read an integer setting, rejecting anything that does not parse."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(
            f"{name} must be an integer",
            setting=name,
            context={"value": raw},
        ) from exc


def get_log_level(default: str = "INFO") -> str:
    return os.getenv("WALLGO_LOG_LEVEL", default).upper()


def default_game_config(
    board_size: int | None = None,
    num_players: int | None = None,
    stones_per_player: int | None = None,
) -> GameConfig:
    """Build a GameConfig from explicit values, falling back to the environment."""
    return GameConfig.create(
        board_size=(
            board_size
            if board_size is not None
            else env_int("WALLGO_BOARD_SIZE", DEFAULT_BOARD_SIZE)
        ),
        num_players=(
            num_players
            if num_players is not None
            else env_int("WALLGO_NUM_PLAYERS", DEFAULT_NUM_PLAYERS)
        ),
        stones_per_player=(
            stones_per_player
            if stones_per_player is not None
            else env_int("WALLGO_STONES_PER_PLAYER", DEFAULT_STONES_PER_PLAYER)
        ),
    )
