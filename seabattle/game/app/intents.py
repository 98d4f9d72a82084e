"""Intents a presentation layer may submit to the engine."""

from __future__ import annotations

from dataclasses import dataclass

from seabattle.game.core.models import Coord, Orientation, ShipId


@dataclass(frozen=True, slots=True)
class SetOrientation:
    orientation: Orientation


@dataclass(frozen=True, slots=True)
class RotateOrientation:
    """Toggle the pending placement orientation."""


@dataclass(frozen=True, slots=True)
class PlaceShip:
    """Place ``ship_id`` at ``start`` using the current orientation."""

    ship_id: ShipId
    start: Coord


@dataclass(frozen=True, slots=True)
class Fire:
    target: Coord


@dataclass(frozen=True, slots=True)
class Restart:
    pass


@dataclass(frozen=True, slots=True)
class ClearMessages:
    pass


Intent = SetOrientation | RotateOrientation | PlaceShip | Fire | Restart | ClearMessages
