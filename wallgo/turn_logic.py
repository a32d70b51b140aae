"""Phase and turn state machine.

Phases only move forward: placing_stones -> moving -> over. Each command
is an action; the transition table lists which phases it may run in and
which phases it may leave the game in. ``over`` accepts no actions.

Within the moving phase a turn belongs to one stone: the first step
commits it (``active_stone``), it may take up to two steps, and the turn
ends when that stone erects a wall. A wall with no preceding step is a
legal zero-step turn for any of the player's stones.
"""
from __future__ import annotations

import logging
from enum import Enum

from .board_manager import BoardManager
from .errors import (
    GameOverError,
    IllegalMoveError,
    IllegalWallError,
    InvalidPlacementError,
    InvalidStateError,
    RulesViolationError,
)
from .models import MAX_STEPS_PER_TURN, GamePhase, GameState, Stone

__all__ = [
    "GameAction",
    "TRANSITIONS",
    "assert_action_allowed",
    "assert_stone_may_move",
    "assert_stone_may_wall",
    "enter_phase",
    "start_next_player",
]

logger = logging.getLogger(__name__)


class GameAction(str, Enum):
    """Commands understood by the engine."""
    PLACE_STONE = "place_stone"
    MOVE_STONE = "move_stone"
    PLACE_WALL = "place_wall"


# (phase, action) -> phases the action may leave the game in
TRANSITIONS: dict[tuple[GamePhase, GameAction], frozenset[GamePhase]] = {
    (GamePhase.PLACING_STONES, GameAction.PLACE_STONE): frozenset(
        {GamePhase.PLACING_STONES, GamePhase.MOVING}
    ),
    (GamePhase.MOVING, GameAction.MOVE_STONE): frozenset({GamePhase.MOVING}),
    (GamePhase.MOVING, GameAction.PLACE_WALL): frozenset(
        {GamePhase.MOVING, GamePhase.OVER}
    ),
}

_WRONG_PHASE_ERRORS: dict[GameAction, type[RulesViolationError]] = {
    GameAction.PLACE_STONE: InvalidPlacementError,
    GameAction.MOVE_STONE: IllegalMoveError,
    GameAction.PLACE_WALL: IllegalWallError,
}


def assert_action_allowed(state: GameState, action: GameAction) -> None:
    """Reject ``action`` if the current phase has no transition for it."""
    if state.phase == GamePhase.OVER:
        raise GameOverError(
            "The game is over",
            rule_ref="over-is-final",
            context={"action": action.value},
        )
    if (state.phase, action) not in TRANSITIONS:
        error_cls = _WRONG_PHASE_ERRORS[action]
        raise error_cls(
            f"Cannot {action.value.replace('_', ' ')} during {state.phase.value}",
            rule_ref="phase",
            context={"phase": state.phase.value},
        )


def enter_phase(
    state: GameState, action: GameAction, target: GamePhase
) -> GameState:
    """Move ``state`` into ``target``, which the action must permit."""
    allowed = TRANSITIONS.get((state.phase, action), frozenset())
    if target not in allowed:
        raise InvalidStateError(
            "Phase transition not permitted",
            context={
                "from": state.phase.value,
                "to": target.value,
                "action": action.value,
            },
        )
    if target == state.phase:
        return state
    logger.info(f"Phase {state.phase.value} -> {target.value}")
    return state.model_copy(update={"phase": target})


def assert_stone_may_move(state: GameState, stone: Stone) -> None:
    """Only the committed stone may keep moving, and only within budget."""
    if state.remaining_steps <= 0:
        raise IllegalMoveError(
            "No steps left this turn; place a wall",
            rule_ref="step-budget",
        )
    if state.active_stone is not None and state.active_stone != stone.id:
        raise IllegalMoveError(
            "Another stone has already moved this turn",
            rule_ref="one-stone-per-turn",
            context={"active": f"{state.active_stone.player}/{state.active_stone.index}"},
        )


def assert_stone_may_wall(state: GameState, stone: Stone) -> None:
    """After a step, only the stone that moved may erect the wall."""
    if state.active_stone is not None and state.active_stone != stone.id:
        raise IllegalWallError(
            "The wall must be placed next to the stone that moved",
            rule_ref="one-stone-per-turn",
            context={"active": f"{state.active_stone.player}/{state.active_stone.index}"},
        )


def start_next_player(state: GameState) -> GameState:
    """Hand the turn to the next seat with a fresh step budget.

    In the moving phase, seats that cannot complete a turn (all their
    stones boxed in by walls) are passed over in round-robin order.
    """
    num_players = state.config.num_players
    next_player = (state.current_player + 1) % num_players

    if state.phase == GamePhase.MOVING:
        for offset in range(1, num_players + 1):
            candidate = (state.current_player + offset) % num_players
            if BoardManager.has_legal_turn(state, candidate):
                next_player = candidate
                break
            logger.info(f"Player {candidate} has no legal turn; skipping")
        # If no seat qualifies every stone is sealed in its own cell, so no
        # cell is shared and the completion check ends the game.

    return state.model_copy(
        update={
            "current_player": next_player,
            "remaining_steps": MAX_STEPS_PER_TURN,
            "active_stone": None,
        }
    )
