"""Root game-state aggregate and small whole-state transitions."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field, replace

from seabattle.game.core.board import Board
from seabattle.game.core.fleet import Fleet, create_fleet
from seabattle.game.core.models import (
    Coord,
    GameMessage,
    MessageKind,
    Orientation,
    Phase,
    Player,
    ShipSpec,
    default_ship_specs,
)


@dataclass(frozen=True, slots=True)
class Side:
    """One player's board and fleet."""

    board: Board
    fleet: Fleet


@dataclass(frozen=True, slots=True)
class AiMemory:
    """Coordinates the AI has fired at, in order. Never shrinks."""

    attempted_shots: tuple[Coord, ...] = ()

    def __contains__(self, coord: object) -> bool:
        return coord in self.attempted_shots


@dataclass(frozen=True, slots=True)
class GameState:
    """Single root aggregate, replaced wholesale on each transition."""

    phase: Phase
    orientation: Orientation
    turn: Player
    you: Side
    enemy: Side
    ai: AiMemory = field(default_factory=AiMemory)
    messages: tuple[GameMessage, ...] = ()


def create_side(specs: Sequence[ShipSpec]) -> Side:
    return Side(board=Board.empty(), fleet=create_fleet(specs))


def create_initial_state(specs: Sequence[ShipSpec] | None = None) -> GameState:
    """Fresh game: empty boards, unplaced fleets, setup phase."""
    fleet_specs = tuple(specs) if specs is not None else default_ship_specs()
    return GameState(
        phase=Phase.SETUP,
        orientation=Orientation.HORIZONTAL,
        turn=Player.YOU,
        you=create_side(fleet_specs),
        enemy=create_side(fleet_specs),
    )


def restart_game() -> GameState:
    return create_initial_state()


def side_of(state: GameState, player: Player) -> Side:
    return state.you if player is Player.YOU else state.enemy


def with_side(state: GameState, player: Player, side: Side) -> GameState:
    if player is Player.YOU:
        return replace(state, you=side)
    return replace(state, enemy=side)


def push_message(state: GameState, kind: MessageKind, text: str) -> GameState:
    return replace(state, messages=(*state.messages, GameMessage(kind=kind, text=text)))


def clear_messages(state: GameState) -> GameState:
    return replace(state, messages=())


def set_orientation(state: GameState, orientation: Orientation) -> GameState:
    return replace(state, orientation=orientation)


def toggle_orientation(state: GameState) -> GameState:
    return replace(state, orientation=state.orientation.toggled())
