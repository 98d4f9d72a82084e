import numpy as np
import pytest

from seabattle.game.core.board import Board
from seabattle.game.core.models import BoardCell, Coord, ShotStatus


def test_empty_board_cells_are_unknown_and_unoccupied() -> None:
    board = Board.empty()
    assert board.size == 10
    assert board.cell(Coord(3, 4)) == BoardCell(occupant=None, shot=ShotStatus.UNKNOWN)
    assert len(board.unshot_coords()) == 100


def test_with_occupant_returns_new_board() -> None:
    board = Board.empty()
    placed = board.with_occupant([Coord(0, 0), Coord(0, 1)], "ship-4")
    assert placed.occupant(Coord(0, 0)) == "ship-4"
    assert placed.occupant(Coord(0, 1)) == "ship-4"
    assert board.occupant(Coord(0, 0)) is None
    assert placed.cells_of("ship-4") == [Coord(0, 0), Coord(0, 1)]
    assert placed.cells_of("ship-0") == []


def test_with_shot_keeps_occupants() -> None:
    board = Board.empty().with_occupant([Coord(1, 1)], "ship-0")
    shot = board.with_shot(Coord(1, 1), ShotStatus.HIT)
    assert shot.cell(Coord(1, 1)) == BoardCell(occupant="ship-0", shot=ShotStatus.HIT)
    assert board.shot(Coord(1, 1)) is ShotStatus.UNKNOWN
    assert Coord(1, 1) not in shot.unshot_coords()


def test_board_arrays_are_read_only() -> None:
    board = Board.empty()
    with pytest.raises(ValueError):
        board.ships[0, 0] = 1
    with pytest.raises(ValueError):
        board.shots[0, 0] = 1


def test_board_copies_caller_arrays() -> None:
    ships = np.zeros((10, 10), dtype=np.int16)
    shots = np.zeros((10, 10), dtype=np.int8)
    board = Board(ships=ships, shots=shots)

    assert ships.flags.writeable and shots.flags.writeable
    ships[0, 0] = 1
    shots[0, 0] = 2
    assert board.occupant(Coord(0, 0)) is None
    assert board.shot(Coord(0, 0)) is ShotStatus.UNKNOWN


def test_board_value_equality() -> None:
    first = Board.empty().with_occupant([Coord(2, 2)], "ship-1")
    second = Board.empty().with_occupant([Coord(2, 2)], "ship-1")
    assert first == second
    assert first != Board.empty()
    assert first != second.with_shot(Coord(0, 0), ShotStatus.MISS)


def test_board_rejects_non_square_grid() -> None:
    with pytest.raises(ValueError):
        Board(ships=np.zeros((3, 4), dtype=np.int16), shots=np.zeros((3, 4), dtype=np.int8))


def test_rows_projection_matches_cells() -> None:
    board = Board.empty().with_occupant([Coord(0, 1)], "ship-2").with_shot(Coord(0, 2), ShotStatus.MISS)
    rows = board.rows()
    assert len(rows) == 10 and all(len(row) == 10 for row in rows)
    assert rows[0][1].occupant == "ship-2"
    assert rows[0][2].shot is ShotStatus.MISS
