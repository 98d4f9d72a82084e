"""Revisioned game session with intent history, undo and replay."""

from __future__ import annotations

from collections.abc import Iterable

from seabattle.game.app.dispatch import IntentDispatcher
from seabattle.game.app.intents import Intent, Restart
from seabattle.game.core.placement import RandomSource
from seabattle.game.core.state import GameState, create_initial_state


class GameSession:
    """Hold the current state and every state it replaced.

    States are immutable values, so keeping the previous ones is enough for undo.
    """

    def __init__(self, dispatcher: IntentDispatcher, initial_state: GameState | None = None) -> None:
        self._dispatcher = dispatcher
        start = initial_state if initial_state is not None else create_initial_state()
        self._states: list[GameState] = [start]
        self._intents: list[Intent] = []

    @property
    def state(self) -> GameState:
        return self._states[-1]

    @property
    def revision(self) -> int:
        return len(self._intents)

    @property
    def history(self) -> tuple[Intent, ...]:
        return tuple(self._intents)

    def apply(self, intent: Intent) -> GameState:
        """Dispatch one intent and record the resulting state."""
        next_state = self._dispatcher.dispatch(self.state, intent)
        self._states.append(next_state)
        self._intents.append(intent)
        return next_state

    def undo(self) -> GameState:
        """Drop the most recent transition. No-op at revision 0."""
        if self._intents:
            self._intents.pop()
            self._states.pop()
        return self.state

    def restart(self) -> GameState:
        return self.apply(Restart())


def replay(
    intents: Iterable[Intent],
    rng: RandomSource,
    *,
    initial_state: GameState | None = None,
) -> GameState:
    """Fold intents over an initial state with a fresh dispatcher."""
    dispatcher = IntentDispatcher(rng)
    state = initial_state if initial_state is not None else create_initial_state()
    for intent in intents:
        state = dispatcher.dispatch(state, intent)
    return state
