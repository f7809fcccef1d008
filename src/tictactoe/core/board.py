"""Board - marker placement on a 3x3 grid."""

from __future__ import annotations

from collections.abc import Mapping

from tictactoe.core.enums import Marker
from tictactoe.core.types import ALL_CELLS, CELL_COUNT, ROWS, Cell

COL_SEPARATOR = " | "
ROW_SEPARATOR = "--+---+--"


class Board:
    """Mutable 9-cell board indexed 1–9."""

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        # Slot 0 is unused so that cell indices map directly.
        self._cells: list[Marker | None] = [None] * (CELL_COUNT + 1)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, cell: Cell) -> Marker | None:
        return self._cells[cell]

    def is_empty(self, cell: Cell) -> bool:
        return self._cells[cell] is None

    # -- Query helpers ------------------------------------------------------

    def free_positions(self) -> list[Cell]:
        """Empty cells in ascending order."""
        return [cell for cell in ALL_CELLS if self._cells[cell] is None]

    def occupied(self) -> dict[Cell, Marker]:
        """Occupied cells mapped to their marker."""
        return {
            cell: marker
            for cell in ALL_CELLS
            if (marker := self._cells[cell]) is not None
        }

    def is_full(self) -> bool:
        return not self.free_positions()

    # -- Mutation / copying -------------------------------------------------

    def place_marker(self, cell: Cell, marker: Marker) -> None:
        """Write *marker* into *cell*.

        Caller is responsible for checking that the cell is free.
        """
        self._cells[cell] = marker

    def copy(self) -> Board:
        b = Board()
        b._cells = self._cells.copy()
        return b

    # -- Rendering ----------------------------------------------------------

    def render(self) -> str:
        """Human-readable grid; empty cells show their own index."""
        rows = [
            COL_SEPARATOR.join(self._label(cell) for cell in row) for row in ROWS
        ]
        return f"\n{ROW_SEPARATOR}\n".join(rows)

    def _label(self, cell: Cell) -> str:
        marker = self._cells[cell]
        return str(marker) if marker is not None else str(cell)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def from_cells(cls, cells: Mapping[Cell, Marker]) -> Board:
        """Board with the given cells already marked."""
        b = cls()
        for cell, marker in cells.items():
            b.place_marker(cell, marker)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return self.render()
