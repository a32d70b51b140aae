"""Plain-text rendering of Wall Go snapshots.

Stones show as their owner's digit, walls as ``---`` and ``|`` segments on
the grid lines. Passing regions shades each empty cell owned by exactly
one player with that player's letter (``a`` for player 0).
"""
from __future__ import annotations

from typing import Optional, Sequence

from .models import GamePhase, GameResult, GameState, Region

__all__ = ["player_letter", "render_board", "render_result", "render_status"]


def player_letter(player: int) -> str:
    return chr(ord("a") + player)


def _owner(regions: Sequence[Region], x: int, y: int) -> Optional[int]:
    owners = [r.player for r in regions if r.cells[x][y]]
    return owners[0] if len(owners) == 1 else None


def _cell_text(state: GameState, regions: Sequence[Region], x: int, y: int) -> str:
    occupant = state.cells[x][y]
    if occupant is not None:
        return f" {occupant.player} "
    owner = _owner(regions, x, y)
    if owner is not None:
        return f" {player_letter(owner)} "
    return " . "


def render_board(state: GameState, regions: Optional[Sequence[Region]] = None) -> str:
    size = state.config.board_size
    regions = regions or ()
    horizontal = state.horizontal_walls
    vertical = state.vertical_walls

    lines = ["   " + "".join(f"  {y:<2}" for y in range(size)).rstrip()]
    for x in range(size + 1):
        segments = ("---" if horizontal[x][y] is not None else "   " for y in range(size))
        lines.append("   +" + "+".join(segments) + "+")
        if x == size:
            break
        row = [f"{x:>2} "]
        for y in range(size):
            row.append("|" if vertical[x][y] is not None else " ")
            row.append(_cell_text(state, regions, x, y))
        row.append("|" if vertical[x][size] is not None else " ")
        lines.append("".join(row).rstrip())
    return "\n".join(lines)


def render_status(state: GameState) -> str:
    lines = [f"Phase: {state.phase.value}"]
    if state.phase == GamePhase.OVER:
        return "\n".join(lines)
    lines.append(f"Current player: {state.current_player}")
    if state.phase == GamePhase.PLACING_STONES:
        placed = len(state.stones[state.current_player])
        lines.append(
            f"Stones placed: {placed}/{state.config.stones_per_player}"
        )
    else:
        lines.append(f"Steps left: {state.remaining_steps}")
        if state.active_stone is not None:
            lines.append(f"Moving stone: {state.active_stone.index}")
    return "\n".join(lines)


def render_result(result: GameResult) -> str:
    if result.is_draw:
        players = ", ".join(str(p) for p in result.winners)
        lines = [f"Draw between players {players}"]
    else:
        lines = [f"Winner: player {result.winner}"]
    for region in result.regions:
        lines.append(f"  player {region.player}: {region.size} cells")
    return "\n".join(lines)
