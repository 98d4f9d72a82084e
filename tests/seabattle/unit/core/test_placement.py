import random

import pytest

from seabattle.game.core.board import Board
from seabattle.game.core.fleet import create_fleet, hit_count, is_fully_placed
from seabattle.game.core.models import Coord, Orientation, Phase, Player, default_ship_specs
from seabattle.game.core.placement import (
    apply_placement,
    place_ship,
    randomly_place_fleet,
    validate_placement,
)
from seabattle.game.core.result import EngineError, Err, Ok
from seabattle.game.core.state import create_initial_state
from tests.seabattle.helpers import ScriptedRandom


def _error(result) -> EngineError:
    assert isinstance(result, Err)
    return result.error


def test_validate_placement_builds_placement_without_applying() -> None:
    board = Board.empty()
    fleet = create_fleet(default_ship_specs())
    result = validate_placement(board, fleet, "ship-2", Coord(3, 3), Orientation.VERTICAL)
    assert isinstance(result, Ok)
    placement = result.value
    assert placement.length == 3
    assert placement.coords == (Coord(3, 3), Coord(4, 3), Coord(5, 3))
    assert board.occupant(Coord(3, 3)) is None


def test_validate_placement_unknown_ship() -> None:
    result = validate_placement(
        Board.empty(), create_fleet(default_ship_specs()), "ship-9", Coord(0, 0), Orientation.HORIZONTAL
    )
    assert _error(result) is EngineError.UNKNOWN_SHIP
    assert isinstance(result, Err) and result.message == "Unknown ship."


def test_place_ship_rejects_already_placed(placed_state) -> None:
    result = place_ship(placed_state, Player.YOU, "ship-0", Coord(9, 0), Orientation.HORIZONTAL)
    assert _error(result) is EngineError.ALREADY_PLACED


def test_place_ship_out_of_bounds() -> None:
    state = create_initial_state()
    result = place_ship(state, Player.YOU, "ship-0", Coord(0, 8), Orientation.HORIZONTAL)
    assert _error(result) is EngineError.OUT_OF_BOUNDS
    vertical = place_ship(state, Player.YOU, "ship-0", Coord(6, 0), Orientation.VERTICAL)
    assert _error(vertical) is EngineError.OUT_OF_BOUNDS


def test_place_ship_fits_flush_against_edge() -> None:
    state = create_initial_state()
    result = place_ship(state, Player.YOU, "ship-0", Coord(0, 5), Orientation.HORIZONTAL)
    assert isinstance(result, Ok)


def test_place_ship_overlap() -> None:
    state = create_initial_state()
    first = place_ship(state, Player.YOU, "ship-0", Coord(0, 0), Orientation.HORIZONTAL)
    assert isinstance(first, Ok)
    second = place_ship(first.value, Player.YOU, "ship-1", Coord(0, 0), Orientation.HORIZONTAL)
    assert _error(second) is EngineError.OVERLAP
    crossing = place_ship(first.value, Player.YOU, "ship-1", Coord(0, 4), Orientation.VERTICAL)
    assert _error(crossing) is EngineError.OVERLAP


@pytest.mark.parametrize(
    ("ship_id", "start", "orientation"),
    [
        ("ship-0", Coord(5, 5), Orientation.HORIZONTAL),
        ("ship-1", Coord(0, 9), Orientation.VERTICAL),
        ("ship-4", Coord(8, 8), Orientation.HORIZONTAL),
    ],
)
def test_place_ship_occupies_exactly_its_length(ship_id, start, orientation) -> None:
    state = create_initial_state()
    result = place_ship(state, Player.YOU, ship_id, start, orientation)
    assert isinstance(result, Ok)
    next_state = result.value
    board = next_state.you.board
    length = {"ship-0": 5, "ship-1": 4, "ship-4": 2}[ship_id]
    assert len(board.cells_of(ship_id)) == length
    assert hit_count(next_state.you.fleet, ship_id) == 0
    assert next_state.you.fleet.hits_by_ship == {ship_id: 0}
    assert next_state.phase is Phase.SETUP
    assert next_state.turn is Player.YOU
    assert next_state.enemy == state.enemy
    assert state.you.board.cells_of(ship_id) == []


def test_place_ship_on_enemy_side_leaves_human_side_alone() -> None:
    state = create_initial_state()
    result = place_ship(state, Player.ENEMY, "ship-3", Coord(2, 2), Orientation.VERTICAL)
    assert isinstance(result, Ok)
    assert result.value.you == state.you
    assert result.value.enemy.board.occupant(Coord(4, 2)) == "ship-3"


def test_apply_placement_leaves_shots_untouched() -> None:
    board = Board.empty()
    fleet = create_fleet(default_ship_specs())
    validation = validate_placement(board, fleet, "ship-4", Coord(0, 0), Orientation.HORIZONTAL)
    assert isinstance(validation, Ok)
    applied = apply_placement(board, validation.value)
    assert applied.occupant(Coord(0, 1)) == "ship-4"
    assert (applied.shots == board.shots).all()


def test_randomly_place_fleet_is_valid(seeded_rng: random.Random) -> None:
    result = randomly_place_fleet(default_ship_specs(), seeded_rng)
    assert isinstance(result, Ok)
    side = result.value
    assert is_fully_placed(side.fleet)
    assert len(side.board.unshot_coords()) == 100
    for spec in side.fleet.specs:
        assert len(side.board.cells_of(spec.ship_id)) == spec.length
        assert hit_count(side.fleet, spec.ship_id) == 0
    occupied = sum(1 for row in side.board.rows() for cell in row if cell.occupant is not None)
    assert occupied == 17


def test_randomly_place_fleet_is_deterministic_for_seed() -> None:
    first = randomly_place_fleet(default_ship_specs(), random.Random(42))
    second = randomly_place_fleet(default_ship_specs(), random.Random(42))
    assert isinstance(first, Ok) and isinstance(second, Ok)
    assert first.value == second.value


def test_randomly_place_fleet_uses_scripted_draws() -> None:
    # orientation < 0.5 -> horizontal; row and col draws scale by board size.
    rng = ScriptedRandom([0.1, 0.0, 0.0, 0.1, 0.2, 0.0, 0.1, 0.4, 0.0, 0.1, 0.6, 0.0, 0.1, 0.8, 0.0])
    result = randomly_place_fleet(default_ship_specs(), rng)
    assert isinstance(result, Ok)
    board = result.value.board
    assert board.occupant(Coord(0, 0)) == "ship-0"
    assert board.occupant(Coord(2, 3)) == "ship-1"
    assert board.occupant(Coord(4, 0)) == "ship-2"
    assert board.occupant(Coord(6, 2)) == "ship-3"
    assert board.occupant(Coord(8, 1)) == "ship-4"
    assert rng.calls == 15


def test_randomly_place_fleet_exhausts_attempts() -> None:
    # vertical at (9, 9) never fits a ship longer than one cell
    rng = ScriptedRandom([0.99])
    result = randomly_place_fleet(default_ship_specs(), rng, max_attempts=10)
    assert _error(result) is EngineError.PLACEMENT_EXHAUSTED
    assert rng.calls == 30
