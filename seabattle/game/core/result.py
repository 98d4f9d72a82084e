"""Success/failure result type and the engine error taxonomy."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class EngineError(StrEnum):
    """Expected failure codes returned by engine operations."""

    UNKNOWN_SHIP = "unknown_ship"
    ALREADY_PLACED = "already_placed"
    OUT_OF_BOUNDS = "out_of_bounds"
    OVERLAP = "overlap"
    INCOMPLETE_PLACEMENT = "incomplete_placement"
    PLACEMENT_EXHAUSTED = "placement_exhausted"
    NOT_IN_PLAY_PHASE = "not_in_play_phase"
    NOT_YOUR_TURN = "not_your_turn"
    NO_AVAILABLE_SHOTS = "no_available_shots"
    NOT_IN_SETUP_PHASE = "not_in_setup_phase"
    UNKNOWN_ACTION = "unknown_action"

    @property
    def text(self) -> str:
        return ERROR_TEXT[self]


ERROR_TEXT: dict[EngineError, str] = {
    EngineError.UNKNOWN_SHIP: "Unknown ship.",
    EngineError.ALREADY_PLACED: "Ship already placed.",
    EngineError.OUT_OF_BOUNDS: "Out of bounds.",
    EngineError.OVERLAP: "Overlaps another ship.",
    EngineError.INCOMPLETE_PLACEMENT: "Place all your ships first.",
    EngineError.PLACEMENT_EXHAUSTED: "Failed to place fleet.",
    EngineError.NOT_IN_PLAY_PHASE: "Not in play phase.",
    EngineError.NOT_YOUR_TURN: "Not your turn.",
    EngineError.NO_AVAILABLE_SHOTS: "No available shots.",
    EngineError.NOT_IN_SETUP_PHASE: "Not in setup phase.",
    EngineError.UNKNOWN_ACTION: "Unknown action.",
}


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful result carrying a value."""

    value: T


@dataclass(frozen=True, slots=True)
class Err:
    """Failed result carrying an error code and human text."""

    error: EngineError
    message: str


type Result[T] = Ok[T] | Err


def fail(error: EngineError) -> Err:
    """Build a failure with the default text for the error code."""
    return Err(error=error, message=error.text)
