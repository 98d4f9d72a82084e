from __future__ import annotations

from collections.abc import Sequence

from seabattle.game.core.models import BOARD_SIZE, Coord, Orientation, Player, ShipId
from seabattle.game.core.phases import start_play_phase
from seabattle.game.core.placement import place_ship
from seabattle.game.core.result import Ok
from seabattle.game.core.state import GameState, create_initial_state

# ship-0..ship-4 laid out horizontally on even rows from column 0.
DEFAULT_LAYOUT: tuple[tuple[ShipId, Coord], ...] = (
    ("ship-0", Coord(0, 0)),
    ("ship-1", Coord(2, 0)),
    ("ship-2", Coord(4, 0)),
    ("ship-3", Coord(6, 0)),
    ("ship-4", Coord(8, 0)),
)
LAYOUT_LENGTHS: dict[ShipId, int] = {
    "ship-0": 5,
    "ship-1": 4,
    "ship-2": 3,
    "ship-3": 3,
    "ship-4": 2,
}


class ScriptedRandom:
    """Deterministic ``random()`` source cycling through fixed values."""

    def __init__(self, values: Sequence[float]) -> None:
        self._values = list(values)
        self._index = 0
        self.calls = 0

    def random(self) -> float:
        value = self._values[self._index % len(self._values)]
        self._index += 1
        self.calls += 1
        return value


def all_coords(size: int = BOARD_SIZE) -> list[Coord]:
    """Every board coordinate in row-major order."""
    return [Coord(row, col) for row in range(size) for col in range(size)]


def layout_cells() -> list[Coord]:
    """Every occupied cell of ``DEFAULT_LAYOUT`` in placement order."""
    return [
        Coord(start.row, start.col + offset)
        for ship_id, start in DEFAULT_LAYOUT
        for offset in range(LAYOUT_LENGTHS[ship_id])
    ]


def place_layout(state: GameState, player: Player) -> GameState:
    for ship_id, start in DEFAULT_LAYOUT:
        placed = place_ship(state, player, ship_id, start, Orientation.HORIZONTAL)
        assert isinstance(placed, Ok), placed
        state = placed.value
    return state


def make_play_state() -> GameState:
    state = place_layout(create_initial_state(), Player.YOU)
    enemy = place_layout(create_initial_state(), Player.ENEMY).enemy
    started = start_play_phase(state, enemy)
    assert isinstance(started, Ok)
    return started.value
