"""Core domain layer — pure tic-tac-toe logic with zero external dependencies.

Quick start::

    from tictactoe.core import Board, Marker, Rules

    board = Board()
    for cell in (1, 2, 3):
        board.place_marker(cell, Marker.X)
    assert Rules.has_won(board, Marker.X)
    print(board.render())
"""

from tictactoe.core.board import Board
from tictactoe.core.enums import GamePhase, Marker
from tictactoe.core.rules import Rules
from tictactoe.core.types import (
    ALL_CELLS,
    LINES,
    ROWS,
    Cell,
    Line,
    is_valid_cell,
)

__all__ = [
    # Enums
    "GamePhase",
    "Marker",
    # Types / helpers
    "ALL_CELLS",
    "Cell",
    "LINES",
    "Line",
    "ROWS",
    "is_valid_cell",
    # Domain objects
    "Board",
    "Rules",
]
