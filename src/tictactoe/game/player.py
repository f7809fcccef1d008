"""Turn-taking participant."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tictactoe.game.strings import STRINGS

if TYPE_CHECKING:
    from tictactoe.core.board import Board
    from tictactoe.core.enums import Marker
    from tictactoe.core.types import Cell
    from tictactoe.game.interfaces import IInputSource, IOutputSink

_LOGGER = logging.getLogger(__name__)


class Player:
    """A local participant identified by index and marker.

    The player keeps no reference to the game; the board is passed to
    :meth:`select_position` on every turn.
    """

    __slots__ = ("_index", "_marker", "_label")

    def __init__(self, index: int, marker: Marker, label: str = "") -> None:
        if index not in (0, 1):
            raise ValueError(f"Player index must be 0 or 1, got {index}")
        self._index = index
        self._marker = marker
        self._label = label or f"Player {index + 1}"

    @property
    def index(self) -> int:
        return self._index

    @property
    def marker(self) -> Marker:
        return self._marker

    @property
    def label(self) -> str:
        return self._label

    def select_position(
        self, board: Board, source: IInputSource, sink: IOutputSink
    ) -> Cell:
        """Show the board and ask until a free cell is chosen.

        ``InputExhaustedError`` from *source* propagates to the caller.
        """
        sink.show(board.render())
        while True:
            sink.show(STRINGS.select_prompt(self._marker), end="")
            selection = source.read_position()
            if selection in board.free_positions():
                return selection
            _LOGGER.debug("%s rejected position %d", self._label, selection)
            sink.show(STRINGS.rejected(selection))

    def __str__(self) -> str:
        return self._label

    def __repr__(self) -> str:
        return f"Player({self._index}, {self._marker.value!r}, {self._label!r})"
