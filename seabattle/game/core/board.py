"""Immutable numpy-backed board representation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from seabattle.game.core.models import (
    BOARD_SIZE,
    BoardCell,
    Coord,
    ShipId,
    ShotStatus,
    in_bounds,
)

_SHOT_CODES: dict[ShotStatus, int] = {
    ShotStatus.UNKNOWN: 0,
    ShotStatus.MISS: 1,
    ShotStatus.HIT: 2,
}
_SHOT_BY_CODE: dict[int, ShotStatus] = {code: status for status, code in _SHOT_CODES.items()}


@dataclass(frozen=True, slots=True, eq=False)
class Board:
    """Grid of cells.

    ``ships`` holds occupant codes: 0 is empty, ``n`` refers to ``ship_ids[n - 1]``.
    ``shots`` holds shot status codes. The board keeps read-only copies of the
    arrays it is given, so callers keep ownership of theirs.
    """

    ships: np.ndarray
    shots: np.ndarray
    ship_ids: tuple[ShipId, ...] = ()

    def __post_init__(self) -> None:
        if self.ships.ndim != 2 or self.ships.shape[0] != self.ships.shape[1]:
            raise ValueError(f"board must be square, got shape {self.ships.shape}")
        if self.shots.shape != self.ships.shape:
            raise ValueError("ships and shots grids must share a shape")
        ships = self.ships.copy()
        shots = self.shots.copy()
        ships.setflags(write=False)
        shots.setflags(write=False)
        object.__setattr__(self, "ships", ships)
        object.__setattr__(self, "shots", shots)

    @classmethod
    def empty(cls, size: int = BOARD_SIZE) -> Board:
        return cls(
            ships=np.zeros((size, size), dtype=np.int16),
            shots=np.zeros((size, size), dtype=np.int8),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.ship_ids == other.ship_ids
            and np.array_equal(self.ships, other.ships)
            and np.array_equal(self.shots, other.shots)
        )

    __hash__ = None  # type: ignore[assignment]

    @property
    def size(self) -> int:
        return int(self.ships.shape[0])

    def in_bounds(self, coord: Coord) -> bool:
        return in_bounds(coord, self.size)

    def occupant(self, coord: Coord) -> ShipId | None:
        code = int(self.ships[coord.row, coord.col])
        if code == 0:
            return None
        return self.ship_ids[code - 1]

    def shot(self, coord: Coord) -> ShotStatus:
        return _SHOT_BY_CODE[int(self.shots[coord.row, coord.col])]

    def cell(self, coord: Coord) -> BoardCell:
        return BoardCell(occupant=self.occupant(coord), shot=self.shot(coord))

    def rows(self) -> tuple[tuple[BoardCell, ...], ...]:
        """Full grid of cells for presentation layers."""
        return tuple(
            tuple(self.cell(Coord(row, col)) for col in range(self.size))
            for row in range(self.size)
        )

    def unshot_coords(self) -> list[Coord]:
        """Coordinates with unknown shot status, row-major."""
        rows, cols = np.nonzero(self.shots == _SHOT_CODES[ShotStatus.UNKNOWN])
        return [Coord(int(row), int(col)) for row, col in zip(rows, cols)]

    def cells_of(self, ship_id: ShipId) -> list[Coord]:
        """Coordinates occupied by the given ship, row-major."""
        if ship_id not in self.ship_ids:
            return []
        code = self.ship_ids.index(ship_id) + 1
        rows, cols = np.nonzero(self.ships == code)
        return [Coord(int(row), int(col)) for row, col in zip(rows, cols)]

    def with_occupant(self, coords: Iterable[Coord], ship_id: ShipId) -> Board:
        """Return a copy with the given cells occupied by ``ship_id``."""
        ship_ids = self.ship_ids
        if ship_id not in ship_ids:
            ship_ids = (*ship_ids, ship_id)
        code = ship_ids.index(ship_id) + 1
        ships = self.ships.copy()
        for coord in coords:
            ships[coord.row, coord.col] = code
        return Board(ships=ships, shots=self.shots, ship_ids=ship_ids)

    def with_shot(self, coord: Coord, status: ShotStatus) -> Board:
        """Return a copy with one cell's shot status replaced."""
        shots = self.shots.copy()
        shots[coord.row, coord.col] = _SHOT_CODES[status]
        return Board(ships=self.ships, shots=shots, ship_ids=self.ship_ids)
