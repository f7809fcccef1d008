"""Cell type alias and the fixed line table.

Board layout (row-major, 1-based)::

    1 | 2 | 3
    --+---+--
    4 | 5 | 6
    --+---+--
    7 | 8 | 9
"""

from __future__ import annotations

from typing import TypeAlias

Cell: TypeAlias = int  # 1–9
Line: TypeAlias = tuple[Cell, Cell, Cell]

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

ALL_CELLS: tuple[Cell, ...] = tuple(range(1, CELL_COUNT + 1))

ROWS: tuple[Line, ...] = ((1, 2, 3), (4, 5, 6), (7, 8, 9))
COLUMNS: tuple[Line, ...] = ((1, 4, 7), (2, 5, 8), (3, 6, 9))
DIAGONALS: tuple[Line, ...] = ((1, 5, 9), (3, 5, 7))

# Checked in this order by the win detector.
LINES: tuple[Line, ...] = ROWS + COLUMNS + DIAGONALS


def is_valid_cell(cell: int) -> bool:
    """Check whether integer is a valid cell index."""
    return 1 <= cell <= CELL_COUNT
