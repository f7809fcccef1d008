"""Exception hierarchy for the game layer.

Invalid move input is not an error: :meth:`Player.select_position`
rejects it and asks again.
"""

from __future__ import annotations


class TicTacToeError(Exception):
    """Base class for all tic-tac-toe errors."""


class InputExhaustedError(TicTacToeError):
    """The input source has no more moves to give. Fatal for the session."""

    def __init__(self, message: str = "No more input available.") -> None:
        super().__init__(message)


class IllegalMoveError(TicTacToeError):
    """A move targets a cell outside the board or one already marked."""

    def __init__(self, position: int) -> None:
        super().__init__(f"Position {position} cannot be played")
        self.position = position


class GameOverError(TicTacToeError):
    """A move or turn switch was attempted after the game ended."""
