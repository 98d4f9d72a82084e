"""Shot resolution: hit/miss/sunk/win determination and message generation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import StrEnum

from seabattle.game.core.fleet import all_sunk, is_sunk, with_hit
from seabattle.game.core.models import (
    Coord,
    MessageKind,
    Phase,
    Player,
    ShipId,
    ShotStatus,
    in_bounds,
)
from seabattle.game.core.result import EngineError, Ok, Result, fail
from seabattle.game.core.state import GameState, Side, push_message, side_of, with_side

logger = logging.getLogger(__name__)

REPEAT_SHOT_TEXT = "You already fired there."


class FireResult(StrEnum):
    """Tag of a resolved shot attempt."""

    REPEAT = "repeat"
    MISS = "miss"
    HIT = "hit"
    SUNK = "sunk"
    WIN = "win"


@dataclass(frozen=True, slots=True)
class FireOutcome:
    """Who fired where, what happened, and which ship sits on the target cell."""

    attacker: Player
    defender: Player
    target: Coord
    result: FireResult
    hit_ship_id: ShipId | None


@dataclass(frozen=True, slots=True)
class FireResolution:
    """State after a shot together with its outcome."""

    next_state: GameState
    outcome: FireOutcome


def fire_at(state: GameState, attacker: Player, target: Coord) -> Result[FireResolution]:
    """Resolve one shot by ``attacker`` at the opponent's board."""
    defender = attacker.opponent

    if state.phase is not Phase.PLAY:
        return fail(EngineError.NOT_IN_PLAY_PHASE)
    if state.turn is not attacker:
        return fail(EngineError.NOT_YOUR_TURN)
    if not in_bounds(target):
        return fail(EngineError.OUT_OF_BOUNDS)

    defending = side_of(state, defender)
    cell = defending.board.cell(target)

    if cell.shot is not ShotStatus.UNKNOWN:
        return Ok(
            FireResolution(
                next_state=push_message(state, MessageKind.ERROR, REPEAT_SHOT_TEXT),
                outcome=FireOutcome(attacker, defender, target, FireResult.REPEAT, cell.occupant),
            )
        )

    label = attacker.label
    next_board = defending.board.with_shot(
        target, ShotStatus.HIT if cell.occupant is not None else ShotStatus.MISS
    )
    next_fleet = defending.fleet
    next_state = state

    if cell.occupant is None:
        result = FireResult.MISS
        next_state = push_message(next_state, MessageKind.MISS, f"{label}: Miss.")
    else:
        result = FireResult.HIT
        next_fleet = with_hit(next_fleet, cell.occupant)
        next_state = push_message(next_state, MessageKind.HIT, f"{label}: Hit!")
        if is_sunk(next_fleet, cell.occupant):
            result = FireResult.SUNK
            next_state = push_message(next_state, MessageKind.SUNK, f"{label}: Sunk a ship!")
            if all_sunk(next_fleet):
                result = FireResult.WIN
                if attacker is Player.YOU:
                    next_state = push_message(next_state, MessageKind.WIN, "You win!")
                else:
                    next_state = push_message(next_state, MessageKind.LOSE, "You lose.")

    next_state = with_side(next_state, defender, Side(board=next_board, fleet=next_fleet))
    if result is FireResult.WIN:
        next_state = replace(next_state, phase=Phase.GAME_OVER)
    else:
        next_state = replace(next_state, turn=defender)

    logger.debug(
        "shot_resolved target=(%d, %d) ship=%s",
        target.row,
        target.col,
        cell.occupant,
        extra={"player": attacker.value, "result": result.value},
    )
    return Ok(
        FireResolution(
            next_state=next_state,
            outcome=FireOutcome(attacker, defender, target, result, cell.occupant),
        )
    )
