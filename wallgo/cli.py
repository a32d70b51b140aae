"""Hot-seat terminal Wall Go.

Usage:
    python -m wallgo --board-size 7 --players 2 --stones 2

Commands at the prompt:
    place X Y               place a stone (placement phase)
    move X Y TO_X TO_Y      step the stone at (X, Y) one cell
    wall X Y SIDE           wall the up/down/left/right edge of the stone at (X, Y)
    show                    redraw the board
    help                    list commands
    quit                    leave the game
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence, TextIO

from .board_manager import BoardManager
from .config import default_game_config
from .errors import ConfigurationError, RulesViolationError
from .game import WallGoGame
from .logging_config import setup_logging
from .models import GamePhase
from .render import render_board, render_result, render_status

__all__ = ["HotSeatSession", "build_parser", "main"]

HELP_TEXT = """Commands:
  place X Y               place a stone
  move X Y TO_X TO_Y      step the stone at (X, Y) to an adjacent cell
  wall X Y SIDE           wall the up/down/left/right edge of the stone at (X, Y)
  show                    redraw the board
  quit                    leave the game"""

SIDES = ("up", "down", "left", "right")


class HotSeatSession:
    """Reads commands for whichever player is to act and applies them."""

    def __init__(self, game: WallGoGame, out: TextIO):
        self.game = game
        self.out = out

    def _print(self, text: str = "") -> None:
        self.out.write(text + "\n")

    def show(self) -> None:
        state = self.game.state
        if state.phase == GamePhase.OVER and state.result is not None:
            self._print(render_board(state, state.result.regions))
            self._print(render_result(state.result))
            return
        self._print(render_board(state))
        self._print(render_status(state))

    def handle(self, line: str) -> bool:
        """Apply one command line; returns False when the session should end."""
        parts = line.split()
        if not parts:
            return True
        command, args = parts[0].lower(), parts[1:]

        if command in ("quit", "exit"):
            return False
        if command == "help":
            self._print(HELP_TEXT)
            return True
        if command == "show":
            self.show()
            return True

        try:
            if command == "place":
                x, y = _ints(args, 2)
                self.game.place_stone(x, y)
            elif command == "move":
                x, y, to_x, to_y = _ints(args, 4)
                stone = self._stone_at(x, y)
                walls = self.game.move_stone(stone, to_x, to_y)
                sides = self._free_sides(to_x, to_y, walls)
                self._print(f"Free edges: {', '.join(sides) or 'none'}")
            elif command == "wall":
                if len(args) != 3 or args[2].lower() not in SIDES:
                    raise ValueError("expected: wall X Y up|down|left|right")
                x, y = _ints(args[:2], 2)
                stone = self._stone_at(x, y)
                wall = BoardManager.get_wall_on_side(stone, args[2], self.game.state)
                self.game.place_wall_for_stone(stone, wall)
            else:
                self._print(f"Unknown command '{command}'. Type 'help'.")
                return True
        except ValueError as exc:
            self._print(f"Bad input: {exc}")
            return True
        except RulesViolationError as exc:
            self._print(f"Rejected: {exc.message}")
            return True

        self.show()
        return self.game.phase != GamePhase.OVER

    def _stone_at(self, x: int, y: int):
        stone = self.game.stone_at(x, y)
        if stone is None:
            raise ValueError(f"no stone at ({x}, {y})")
        return stone

    def _free_sides(self, x: int, y: int, walls) -> List[str]:
        stone = self.game.stone_at(x, y)
        return [
            side for side in SIDES
            if BoardManager.get_wall_on_side(stone, side, self.game.state) in walls
        ]

    def run(self, lines: TextIO) -> int:
        self.show()
        for line in lines:
            if not self.handle(line):
                break
        return 0


def _ints(args: Sequence[str], count: int) -> List[int]:
    if len(args) != count:
        raise ValueError(f"expected {count} numbers")
    try:
        return [int(a) for a in args]
    except ValueError:
        raise ValueError(f"expected {count} numbers, got {' '.join(args)}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wallgo",
        description="Play Wall Go at one terminal.",
    )
    parser.add_argument("--board-size", type=int, default=None, help="Cells per side (default 7)")
    parser.add_argument("--players", type=int, default=None, help="Number of players (default 2)")
    parser.add_argument("--stones", type=int, default=None, help="Stones per player (default 2)")
    parser.add_argument("--log-level", default=None, help="Logging level (default WALLGO_LOG_LEVEL or INFO)")
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    return parser


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    args = build_parser().parse_args(argv)
    setup_logging("wallgo", level=args.log_level, log_file=args.log_file)

    try:
        config = default_game_config(
            board_size=args.board_size,
            num_players=args.players,
            stones_per_player=args.stones,
        )
    except ConfigurationError as exc:
        stdout.write(f"{exc}\n")
        return 2

    session = HotSeatSession(WallGoGame(config), stdout)
    return session.run(stdin)
