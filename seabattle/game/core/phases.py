"""Phase transitions and end-of-game queries."""

from __future__ import annotations

from dataclasses import replace

from seabattle.game.core.fleet import all_sunk, is_fully_placed
from seabattle.game.core.models import Phase, Player
from seabattle.game.core.result import EngineError, Ok, Result, fail
from seabattle.game.core.state import GameState, Side


def start_play_phase(state: GameState, enemy_side: Side) -> Result[GameState]:
    """Install the pre-placed enemy side and hand the first turn to the human."""
    if not is_fully_placed(state.you.fleet):
        return fail(EngineError.INCOMPLETE_PLACEMENT)
    return Ok(
        replace(
            state,
            phase=Phase.PLAY,
            turn=Player.YOU,
            enemy=enemy_side,
            messages=(),
        )
    )


def winner(state: GameState) -> Player | None:
    if state.phase is not Phase.GAME_OVER:
        return None
    if all_sunk(state.enemy.fleet):
        return Player.YOU
    if all_sunk(state.you.fleet):
        return Player.ENEMY
    return None
