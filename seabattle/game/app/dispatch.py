"""Single entry point mapping intents to engine transitions."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from seabattle.game.ai.random_target import take_ai_turn
from seabattle.game.app.intents import (
    ClearMessages,
    Fire,
    Intent,
    PlaceShip,
    Restart,
    RotateOrientation,
    SetOrientation,
)
from seabattle.game.core.combat import fire_at
from seabattle.game.core.fleet import is_fully_placed
from seabattle.game.core.models import MessageKind, PLACEMENT_ATTEMPT_LIMIT, Phase, Player
from seabattle.game.core.phases import start_play_phase
from seabattle.game.core.placement import RandomSource, place_ship, randomly_place_fleet
from seabattle.game.core.result import EngineError, Err, fail
from seabattle.game.core.state import (
    GameState,
    clear_messages,
    push_message,
    restart_game,
    set_orientation,
    toggle_orientation,
)

logger = logging.getLogger(__name__)

BATTLE_START_TEXT = "Battle start!"

IntentHandler = Callable[[GameState, Any], GameState]


class IntentDispatcher:
    """Apply intents to a game state. Never raises for invalid input.

    Every rejected intent leaves the state unchanged apart from one appended
    ``error`` message.
    """

    def __init__(
        self, rng: RandomSource, *, max_placement_attempts: int = PLACEMENT_ATTEMPT_LIMIT
    ) -> None:
        self._rng = rng
        self._max_placement_attempts = max_placement_attempts
        self._handlers: dict[type, IntentHandler] = {
            SetOrientation: self._on_set_orientation,
            RotateOrientation: self._on_rotate,
            PlaceShip: self._on_place_ship,
            Fire: self._on_fire,
            Restart: self._on_restart,
            ClearMessages: self._on_clear_messages,
        }

    def dispatch(self, state: GameState, intent: Intent) -> GameState:
        handler = self._handlers.get(type(intent))
        if handler is None:
            return self._reject(state, fail(EngineError.UNKNOWN_ACTION))
        logger.debug(
            "intent_dispatch", extra={"intent": type(intent).__name__, "phase": state.phase.value}
        )
        return handler(state, intent)

    def _reject(self, state: GameState, failure: Err) -> GameState:
        logger.info(
            "intent_rejected", extra={"error": failure.error.value, "phase": state.phase.value}
        )
        return push_message(state, MessageKind.ERROR, failure.message)

    def _on_set_orientation(self, state: GameState, intent: SetOrientation) -> GameState:
        return set_orientation(state, intent.orientation)

    def _on_rotate(self, state: GameState, intent: RotateOrientation) -> GameState:
        return toggle_orientation(state)

    def _on_place_ship(self, state: GameState, intent: PlaceShip) -> GameState:
        if state.phase is not Phase.SETUP:
            return self._reject(state, fail(EngineError.NOT_IN_SETUP_PHASE))

        placed = place_ship(state, Player.YOU, intent.ship_id, intent.start, state.orientation)
        if isinstance(placed, Err):
            return self._reject(state, placed)

        next_state = placed.value
        if not is_fully_placed(next_state.you.fleet):
            return next_state

        enemy = randomly_place_fleet(
            next_state.enemy.fleet.specs,
            self._rng,
            max_attempts=self._max_placement_attempts,
        )
        if isinstance(enemy, Err):
            return self._reject(next_state, enemy)

        started = start_play_phase(next_state, enemy.value)
        if isinstance(started, Err):
            return self._reject(next_state, started)

        logger.info("battle_started")
        return push_message(started.value, MessageKind.INFO, BATTLE_START_TEXT)

    def _on_fire(self, state: GameState, intent: Fire) -> GameState:
        if state.phase is not Phase.PLAY:
            return self._reject(state, fail(EngineError.NOT_IN_PLAY_PHASE))

        fired = fire_at(state, Player.YOU, intent.target)
        if isinstance(fired, Err):
            return self._reject(state, fired)

        next_state = fired.value.next_state
        if next_state.phase is Phase.PLAY and next_state.turn is Player.ENEMY:
            answered = take_ai_turn(next_state, self._rng)
            if isinstance(answered, Err):
                return self._reject(next_state, answered)
            next_state = answered.value

        if next_state.phase is Phase.GAME_OVER:
            logger.info(
                "game_over last_message=%s",
                next_state.messages[-1].text,
                extra={"phase": next_state.phase.value},
            )
        return next_state

    def _on_restart(self, state: GameState, intent: Restart) -> GameState:
        logger.info("game_restarted")
        return restart_game()

    def _on_clear_messages(self, state: GameState, intent: ClearMessages) -> GameState:
        return clear_messages(state)
