"""Uniform-random AI targeting over unshot cells."""

from __future__ import annotations

import logging
from dataclasses import replace

from seabattle.game.core.board import Board
from seabattle.game.core.combat import fire_at
from seabattle.game.core.models import Coord, Phase, Player
from seabattle.game.core.placement import RandomSource
from seabattle.game.core.result import EngineError, Err, Ok, Result, fail
from seabattle.game.core.state import AiMemory, GameState

logger = logging.getLogger(__name__)


def choose_random_unshot_coord(board: Board, rng: RandomSource) -> Coord | None:
    """Pick uniformly among cells whose shot status is still unknown."""
    candidates = board.unshot_coords()
    if not candidates:
        return None
    return candidates[int(rng.random() * len(candidates))]


def record_ai_shot(memory: AiMemory, coord: Coord) -> AiMemory:
    if coord in memory:
        return memory
    return AiMemory(attempted_shots=(*memory.attempted_shots, coord))


def take_ai_turn(state: GameState, rng: RandomSource) -> Result[GameState]:
    """Fire one AI shot at the human board.

    Unknown-cell sampling is what prevents repeats; ``AiMemory`` only mirrors the
    coordinates that were resolved.
    """
    if state.phase is not Phase.PLAY:
        return fail(EngineError.NOT_IN_PLAY_PHASE)
    if state.turn is not Player.ENEMY:
        return fail(EngineError.NOT_YOUR_TURN)

    coord = choose_random_unshot_coord(state.you.board, rng)
    if coord is None:
        return fail(EngineError.NO_AVAILABLE_SHOTS)

    fired = fire_at(state, Player.ENEMY, coord)
    if isinstance(fired, Err):
        return fired

    next_state = fired.value.next_state
    logger.debug(
        "ai_fired target=(%d, %d)",
        coord.row,
        coord.col,
        extra={"player": Player.ENEMY.value, "result": fired.value.outcome.result.value},
    )
    return Ok(replace(next_state, ai=record_ai_shot(next_state.ai, coord)))
