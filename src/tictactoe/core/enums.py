"""Core enumerations for the tic-tac-toe domain."""

from __future__ import annotations

from enum import Enum, IntEnum, auto


class Marker(str, Enum):
    """Symbol a player places in a cell."""

    X = "X"
    O = "O"  # noqa: E741

    @property
    def opposite(self) -> Marker:
        return Marker.O if self is Marker.X else Marker.X

    def __str__(self) -> str:
        return self.value


class GamePhase(IntEnum):
    """Finite-state-machine states for a game."""

    IN_PROGRESS = auto()
    WON = auto()
    DRAW = auto()

    @property
    def is_terminal(self) -> bool:
        return self is not GamePhase.IN_PROGRESS
