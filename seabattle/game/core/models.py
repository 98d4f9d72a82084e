"""Core domain models used by game logic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

BOARD_SIZE = 10
DEFAULT_SHIP_LENGTHS: tuple[int, ...] = (5, 4, 3, 3, 2)
PLACEMENT_ATTEMPT_LIMIT = 5000

ShipId = str


class Orientation(StrEnum):
    """Ship orientation."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    def toggled(self) -> Orientation:
        if self is Orientation.HORIZONTAL:
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL


class Player(StrEnum):
    """Side identity; also used as the turn owner."""

    YOU = "you"
    ENEMY = "enemy"

    @property
    def opponent(self) -> Player:
        return Player.ENEMY if self is Player.YOU else Player.YOU

    @property
    def label(self) -> str:
        return "You" if self is Player.YOU else "Enemy"


class Phase(StrEnum):
    """Top-level game stage."""

    SETUP = "setup"
    PLAY = "play"
    GAME_OVER = "game_over"


class ShotStatus(StrEnum):
    """Per-cell shot status."""

    UNKNOWN = "unknown"
    HIT = "hit"
    MISS = "miss"


class MessageKind(StrEnum):
    """Message log entry kind."""

    INFO = "info"
    ERROR = "error"
    HIT = "hit"
    MISS = "miss"
    SUNK = "sunk"
    WIN = "win"
    LOSE = "lose"


@dataclass(frozen=True, slots=True)
class Coord:
    """Board coordinate."""

    row: int
    col: int


@dataclass(frozen=True, slots=True)
class ShipSpec:
    """Ship identity and length."""

    ship_id: ShipId
    length: int


@dataclass(frozen=True, slots=True)
class ShipPlacement:
    """Placement of a single ship with its derived cells."""

    ship_id: ShipId
    start: Coord
    orientation: Orientation
    length: int
    coords: tuple[Coord, ...]


@dataclass(frozen=True, slots=True)
class BoardCell:
    """Occupant and shot status of one board cell."""

    occupant: ShipId | None = None
    shot: ShotStatus = ShotStatus.UNKNOWN


@dataclass(frozen=True, slots=True)
class GameMessage:
    """Single message log entry."""

    kind: MessageKind
    text: str


def in_bounds(coord: Coord, size: int = BOARD_SIZE) -> bool:
    """Return whether the coordinate is in board bounds."""
    return 0 <= coord.row < size and 0 <= coord.col < size


def coords_for_placement(start: Coord, orientation: Orientation, length: int) -> tuple[Coord, ...]:
    """Compute the cells a ship would occupy. No bounds clipping."""
    result: list[Coord] = []
    for i in range(length):
        if orientation is Orientation.HORIZONTAL:
            result.append(Coord(start.row, start.col + i))
        else:
            result.append(Coord(start.row + i, start.col))
    return tuple(result)


def default_ship_specs() -> tuple[ShipSpec, ...]:
    """Classic fleet: ids ``ship-0`` .. ``ship-4`` with lengths 5, 4, 3, 3, 2."""
    return tuple(
        ShipSpec(ship_id=f"ship-{idx}", length=length)
        for idx, length in enumerate(DEFAULT_SHIP_LENGTHS)
    )
