"""Territory detection and scoring.

A player's region is everything their stones can flood into through
unwalled, unoccupied cells. The game is decided once no cell lies in two
regions; the largest region wins and equal largest regions share the win.
"""
from __future__ import annotations

import logging
from typing import Optional

from .board_manager import BoardManager
from .models import GameResult, GameState, Region

__all__ = ["RegionAnalyzer", "ResultEvaluator"]

logger = logging.getLogger(__name__)


class RegionAnalyzer:
    """Flood-fill regions, recomputed from scratch on every call."""

    @staticmethod
    def get_reachable_region_for_player(state: GameState, player: int) -> Region:
        """Return the cells reachable from ``player``'s stones.

        Stone cells are seeds and always belong to the region. Expansion
        uses :meth:`BoardManager.get_reachable_positions_in_one_step`, so
        walls and every other stone, friendly or not, stop the fill.
        """
        size = state.config.board_size
        visited = [[False] * size for _ in range(size)]
        count = 0

        seeds = state.stones[player] if 0 <= player < len(state.stones) else ()
        queue = []
        for stone in seeds:
            pos = stone.position
            if not visited[pos.x][pos.y]:
                visited[pos.x][pos.y] = True
                count += 1
                queue.append(pos)

        while queue:
            current = queue.pop(0)
            for neighbor in BoardManager.get_reachable_positions_in_one_step(
                current, state
            ):
                if visited[neighbor.x][neighbor.y]:
                    continue
                visited[neighbor.x][neighbor.y] = True
                count += 1
                queue.append(neighbor)

        return Region(
            player=player,
            cells=tuple(tuple(row) for row in visited),
            size=count,
        )

    @staticmethod
    def get_all_regions(state: GameState) -> list[Region]:
        return [
            RegionAnalyzer.get_reachable_region_for_player(state, player)
            for player in range(state.config.num_players)
        ]


class ResultEvaluator:
    """Decides whether walls have fully separated the players."""

    @staticmethod
    def find_contested_cell(regions: list[Region]) -> Optional[tuple[int, int]]:
        """Return the first cell lying in two or more regions, if any."""
        if not regions:
            return None
        size = len(regions[0].cells)
        for x in range(size):
            for y in range(size):
                owners = sum(1 for region in regions if region.cells[x][y])
                if owners >= 2:
                    return (x, y)
        return None

    @staticmethod
    def check_for_game_completion(state: GameState) -> Optional[GameResult]:
        """Return the GameResult if the board is partitioned, else ``None``.

        Read-only; safe to call at any point, including during placement,
        for previews.
        """
        regions = RegionAnalyzer.get_all_regions(state)
        if ResultEvaluator.find_contested_cell(regions) is not None:
            return None

        best = max(region.size for region in regions)
        winners = tuple(r.player for r in regions if r.size == best)
        logger.debug(
            f"Board partitioned: scores={[r.size for r in regions]}, winners={winners}"
        )
        return GameResult(winners=winners, regions=tuple(regions))
