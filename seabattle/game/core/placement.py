"""Ship placement validation, application and random fleet layout."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from seabattle.game.core.board import Board
from seabattle.game.core.fleet import Fleet, create_fleet, find_spec, is_placed, with_placement
from seabattle.game.core.models import (
    Coord,
    Orientation,
    PLACEMENT_ATTEMPT_LIMIT,
    Player,
    ShipId,
    ShipPlacement,
    ShipSpec,
    coords_for_placement,
)
from seabattle.game.core.result import EngineError, Err, Ok, Result, fail
from seabattle.game.core.state import GameState, Side, side_of, with_side

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Uniform float source in ``[0, 1)``; ``random.Random`` satisfies it."""

    def random(self) -> float: ...


def validate_placement(
    board: Board,
    fleet: Fleet,
    ship_id: ShipId,
    start: Coord,
    orientation: Orientation,
) -> Result[ShipPlacement]:
    """Check a prospective placement without applying it."""
    spec = find_spec(fleet, ship_id)
    if spec is None:
        return fail(EngineError.UNKNOWN_SHIP)
    if is_placed(fleet, ship_id):
        return fail(EngineError.ALREADY_PLACED)

    coords = coords_for_placement(start, orientation, spec.length)
    for coord in coords:
        if not board.in_bounds(coord):
            return fail(EngineError.OUT_OF_BOUNDS)
        if board.occupant(coord) is not None:
            return fail(EngineError.OVERLAP)

    return Ok(
        ShipPlacement(
            ship_id=ship_id,
            start=start,
            orientation=orientation,
            length=spec.length,
            coords=coords,
        )
    )


def apply_placement(board: Board, placement: ShipPlacement) -> Board:
    """Occupy the placement's cells. Callers validate first."""
    return board.with_occupant(placement.coords, placement.ship_id)


def place_ship(
    state: GameState,
    player: Player,
    ship_id: ShipId,
    start: Coord,
    orientation: Orientation,
) -> Result[GameState]:
    """Validate and apply a placement on one side. Phase and turn are untouched."""
    side = side_of(state, player)
    validation = validate_placement(side.board, side.fleet, ship_id, start, orientation)
    if isinstance(validation, Err):
        return validation

    placement = validation.value
    placed = Side(
        board=apply_placement(side.board, placement),
        fleet=with_placement(side.fleet, placement),
    )
    logger.debug(
        "ship_placed ship=%s start=(%d, %d) orientation=%s",
        ship_id,
        start.row,
        start.col,
        orientation.value,
        extra={"player": player.value},
    )
    return Ok(with_side(state, player, placed))


def randomly_place_fleet(
    specs: Sequence[ShipSpec],
    rng: RandomSource,
    *,
    max_attempts: int = PLACEMENT_ATTEMPT_LIMIT,
) -> Result[Side]:
    """Rejection-sample a position for each ship in order.

    Each attempt draws an orientation, then a row, then a column from ``rng``.
    Gives up with ``PLACEMENT_EXHAUSTED`` after ``max_attempts`` tries for one ship.
    """
    board = Board.empty()
    fleet = create_fleet(specs)

    for spec in specs:
        placed = False
        for _ in range(max_attempts):
            orientation = Orientation.HORIZONTAL if rng.random() < 0.5 else Orientation.VERTICAL
            start = Coord(
                row=int(rng.random() * board.size),
                col=int(rng.random() * board.size),
            )
            validation = validate_placement(board, fleet, spec.ship_id, start, orientation)
            if isinstance(validation, Err):
                continue
            board = apply_placement(board, validation.value)
            fleet = with_placement(fleet, validation.value)
            placed = True
            break
        if not placed:
            logger.warning(
                "random_placement_exhausted ship=%s attempts=%d", spec.ship_id, max_attempts
            )
            return fail(EngineError.PLACEMENT_EXHAUSTED)

    return Ok(Side(board=board, fleet=fleet))
