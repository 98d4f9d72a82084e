"""Read-only projection of game state for presentation layers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from seabattle.game.core.board import Board
from seabattle.game.core.fleet import next_unplaced_ship, ship_length
from seabattle.game.core.models import (
    BoardCell,
    GameMessage,
    Orientation,
    Phase,
    Player,
    ShipId,
    ShotStatus,
)
from seabattle.game.core.phases import winner
from seabattle.game.core.state import GameState

DEFAULT_MESSAGE_LIMIT = 8


class CellView(StrEnum):
    """What a presentation layer may show for one cell."""

    EMPTY = "empty"
    SHIP = "ship"
    HIT = "hit"
    MISS = "miss"


@dataclass(frozen=True, slots=True)
class BoardView:
    title: str
    cells: tuple[tuple[CellView, ...], ...]
    reveal_ships: bool


@dataclass(frozen=True, slots=True)
class GameView:
    """Everything a renderer needs for one frame."""

    phase: Phase
    orientation: Orientation
    turn: Player
    status: str
    next_ship_id: ShipId | None
    next_ship_length: int | None
    your_board: BoardView
    enemy_board: BoardView
    messages: tuple[GameMessage, ...]
    winner: Player | None


def cell_view(cell: BoardCell, *, reveal_ships: bool) -> CellView:
    if cell.shot is ShotStatus.HIT:
        return CellView.HIT
    if cell.shot is ShotStatus.MISS:
        return CellView.MISS
    if reveal_ships and cell.occupant is not None:
        return CellView.SHIP
    return CellView.EMPTY


def board_view(title: str, board: Board, *, reveal_ships: bool) -> BoardView:
    return BoardView(
        title=title,
        cells=tuple(
            tuple(cell_view(cell, reveal_ships=reveal_ships) for cell in row) for row in board.rows()
        ),
        reveal_ships=reveal_ships,
    )


def status_text(state: GameState) -> str:
    """One-line status for the current phase."""
    if state.phase is Phase.SETUP:
        ship_id = next_unplaced_ship(state.you.fleet)
        length = ship_length(state.you.fleet, ship_id) if ship_id is not None else None
        if length is None:
            return "Setup: all ships placed."
        return f"Setup: place ship of length {length} ({state.orientation.value})."
    if state.phase is Phase.PLAY:
        return "Play: your turn." if state.turn is Player.YOU else "Play: enemy turn."
    return "Game over."


def build_game_view(state: GameState, *, message_limit: int = DEFAULT_MESSAGE_LIMIT) -> GameView:
    """Project state; enemy ships stay hidden until the game is over."""
    next_ship = next_unplaced_ship(state.you.fleet)
    messages = state.messages[-message_limit:] if message_limit > 0 else ()
    return GameView(
        phase=state.phase,
        orientation=state.orientation,
        turn=state.turn,
        status=status_text(state),
        next_ship_id=next_ship,
        next_ship_length=ship_length(state.you.fleet, next_ship) if next_ship is not None else None,
        your_board=board_view("Your Board", state.you.board, reveal_ships=True),
        enemy_board=board_view(
            "Enemy Board", state.enemy.board, reveal_ships=state.phase is Phase.GAME_OVER
        ),
        messages=tuple(messages),
        winner=winner(state),
    )
