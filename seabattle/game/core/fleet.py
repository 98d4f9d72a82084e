"""Fleet value type and pure fleet queries."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from seabattle.game.core.models import ShipId, ShipPlacement, ShipSpec


@dataclass(frozen=True, slots=True)
class Fleet:
    """One player's ship specs, placements and damage.

    ``hits_by_ship`` is stored as a read-only snapshot of whatever mapping is passed in.
    """

    specs: tuple[ShipSpec, ...]
    placements: tuple[ShipPlacement, ...] = ()
    hits_by_ship: Mapping[ShipId, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "hits_by_ship", MappingProxyType(dict(self.hits_by_ship)))


def create_fleet(specs: Sequence[ShipSpec]) -> Fleet:
    """Create an unplaced, undamaged fleet."""
    return Fleet(specs=tuple(specs))


def find_spec(fleet: Fleet, ship_id: ShipId) -> ShipSpec | None:
    for spec in fleet.specs:
        if spec.ship_id == ship_id:
            return spec
    return None


def is_placed(fleet: Fleet, ship_id: ShipId) -> bool:
    return any(placement.ship_id == ship_id for placement in fleet.placements)


def is_fully_placed(fleet: Fleet) -> bool:
    return len(fleet.placements) == len(fleet.specs)


def hit_count(fleet: Fleet, ship_id: ShipId) -> int:
    return fleet.hits_by_ship.get(ship_id, 0)


def is_sunk(fleet: Fleet, ship_id: ShipId) -> bool:
    """A ship is sunk once its hit count reaches its length."""
    spec = find_spec(fleet, ship_id)
    if spec is None:
        return False
    return hit_count(fleet, ship_id) >= spec.length


def all_sunk(fleet: Fleet) -> bool:
    return all(is_sunk(fleet, spec.ship_id) for spec in fleet.specs)


def next_unplaced_ship(fleet: Fleet) -> ShipId | None:
    """First ship in spec order that has no placement yet."""
    for spec in fleet.specs:
        if not is_placed(fleet, spec.ship_id):
            return spec.ship_id
    return None


def ship_length(fleet: Fleet, ship_id: ShipId) -> int | None:
    spec = find_spec(fleet, ship_id)
    return spec.length if spec is not None else None


def with_placement(fleet: Fleet, placement: ShipPlacement) -> Fleet:
    """Record a placement and start the ship's hit count at zero."""
    return replace(
        fleet,
        placements=(*fleet.placements, placement),
        hits_by_ship={**fleet.hits_by_ship, placement.ship_id: 0},
    )


def with_hit(fleet: Fleet, ship_id: ShipId) -> Fleet:
    """Increment the hit count for one ship."""
    return replace(
        fleet,
        hits_by_ship={**fleet.hits_by_ship, ship_id: hit_count(fleet, ship_id) + 1},
    )
