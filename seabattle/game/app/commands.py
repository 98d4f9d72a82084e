"""Text command parsing for the terminal front end."""

from __future__ import annotations

from dataclasses import dataclass

from seabattle.game.app.intents import (
    ClearMessages,
    Fire,
    Intent,
    PlaceShip,
    Restart,
    RotateOrientation,
    SetOrientation,
)
from seabattle.game.core.fleet import next_unplaced_ship
from seabattle.game.core.models import Coord, Orientation
from seabattle.game.core.state import GameState

USAGE = (
    "Commands: place [ship-id] <row> <col> | rotate | orient h|v | "
    "fire <row> <col> | restart | clear | quit"
)

_ORIENTATIONS: dict[str, Orientation] = {
    "h": Orientation.HORIZONTAL,
    "horizontal": Orientation.HORIZONTAL,
    "v": Orientation.VERTICAL,
    "vertical": Orientation.VERTICAL,
}


@dataclass(frozen=True, slots=True)
class CommandError:
    """Malformed command; the text is shown to the user as-is."""

    text: str


def parse_command(line: str, state: GameState) -> Intent | CommandError | None:
    """Translate one input line into an intent. Blank lines yield None."""
    parts = line.strip().lower().split()
    if not parts:
        return None
    verb, args = parts[0], parts[1:]

    if verb == "rotate" and not args:
        return RotateOrientation()
    if verb == "orient" and len(args) == 1:
        orientation = _ORIENTATIONS.get(args[0])
        if orientation is None:
            return CommandError(f"Unknown orientation '{args[0]}'. Use h or v.")
        return SetOrientation(orientation)
    if verb == "place":
        return _parse_place(args, state)
    if verb == "fire" and len(args) == 2:
        coord = _parse_coord(args)
        if coord is None:
            return CommandError("Row and column must be integers.")
        return Fire(coord)
    if verb == "restart" and not args:
        return Restart()
    if verb == "clear" and not args:
        return ClearMessages()
    return CommandError(USAGE)


def _parse_place(args: list[str], state: GameState) -> Intent | CommandError:
    if len(args) == 3:
        ship_id, coord_args = args[0], args[1:]
    elif len(args) == 2:
        next_ship = next_unplaced_ship(state.you.fleet)
        if next_ship is None:
            return CommandError("All ships are already placed.")
        ship_id, coord_args = next_ship, args
    else:
        return CommandError(USAGE)
    coord = _parse_coord(coord_args)
    if coord is None:
        return CommandError("Row and column must be integers.")
    return PlaceShip(ship_id=ship_id, start=coord)


def _parse_coord(args: list[str]) -> Coord | None:
    try:
        return Coord(row=int(args[0]), col=int(args[1]))
    except ValueError:
        return None
