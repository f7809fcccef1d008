"""Win and draw detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tictactoe.core.enums import GamePhase, Marker
from tictactoe.core.types import LINES, Line

if TYPE_CHECKING:
    from tictactoe.core.board import Board


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def winning_line(board: Board, marker: Marker) -> Line | None:
        """First line in ``LINES`` order fully held by *marker*."""
        for line in LINES:
            if all(board[cell] == marker for cell in line):
                return line
        return None

    @staticmethod
    def has_won(board: Board, marker: Marker) -> bool:
        return Rules.winning_line(board, marker) is not None

    @staticmethod
    def outcome(board: Board, marker: Marker) -> GamePhase:
        """Phase after *marker* has moved.

        A completed line wins even when it fills the board.
        """
        if Rules.has_won(board, marker):
            return GamePhase.WON
        if board.is_full():
            return GamePhase.DRAW
        return GamePhase.IN_PROGRESS
