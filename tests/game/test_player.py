"""Tests for Player move selection."""

import pytest

from tictactoe.console.io import BufferedOutput, ScriptedInput
from tictactoe.core.board import Board
from tictactoe.core.enums import Marker
from tictactoe.game.errors import InputExhaustedError
from tictactoe.game.player import Player


class TestPlayerProperties:
    def test_properties(self) -> None:
        p = Player(0, Marker.X, "Alice")
        assert p.index == 0
        assert p.marker == Marker.X
        assert p.label == "Alice"
        assert str(p) == "Alice"

    def test_default_label(self) -> None:
        assert Player(1, Marker.O).label == "Player 2"

    def test_invalid_index(self) -> None:
        with pytest.raises(ValueError):
            Player(2, Marker.X)


class TestSelectPosition:
    def test_accepts_free_position(self, output: BufferedOutput) -> None:
        p = Player(0, Marker.X)
        assert p.select_position(Board(), ScriptedInput(["5"]), output) == 5
        assert output.text == (
            "1 | 2 | 3\n--+---+--\n4 | 5 | 6\n--+---+--\n7 | 8 | 9\n"
            "Select your X position: "
        )

    def test_rejects_occupied_without_mutating(self, output: BufferedOutput) -> None:
        board = Board.from_cells({5: Marker.X})
        before = board.copy()
        p = Player(1, Marker.O)
        assert p.select_position(board, ScriptedInput(["5", "1"]), output) == 1
        assert board == before
        assert output.text.endswith(
            "Select your O position: "
            "Position 5 is not available. Please try again.\n"
            "Select your O position: "
        )

    @pytest.mark.parametrize(
        ("raw", "shown"),
        [("abc", 0), ("", 0), ("0", 0), ("10", 10), ("-3", -3), ("12x", 12)],
    )
    def test_rejects_invalid_input(
        self, output: BufferedOutput, raw: str, shown: int
    ) -> None:
        p = Player(0, Marker.X)
        assert p.select_position(Board(), ScriptedInput([raw, "9"]), output) == 9
        assert f"Position {shown} is not available. Please try again." in output.lines()

    def test_keeps_asking_until_valid(self, output: BufferedOutput) -> None:
        board = Board.from_cells({1: Marker.X, 2: Marker.O})
        source = ScriptedInput(["1", "2", "x", "42", "3"])
        assert Player(0, Marker.X).select_position(board, source, output) == 3
        assert output.text.count("is not available") == 4
        assert output.text.count("Select your X position: ") == 5
        assert source.remaining == 0

    def test_board_rendered_once_per_selection(self, output: BufferedOutput) -> None:
        Player(0, Marker.X).select_position(Board(), ScriptedInput(["0", "4"]), output)
        assert output.text.count("--+---+--") == 2

    def test_exhaustion_propagates(self, output: BufferedOutput) -> None:
        board = Board.from_cells({7: Marker.O})
        with pytest.raises(InputExhaustedError):
            Player(0, Marker.X).select_position(board, ScriptedInput(["7"]), output)
        assert output.lines()[-1] == "Select your X position: "

    @pytest.mark.parametrize("raw", ["9" * 5000, "٥", "５"])
    def test_unreadable_number_rejected(
        self, output: BufferedOutput, raw: str
    ) -> None:
        p = Player(0, Marker.X)
        assert p.select_position(Board(), ScriptedInput([raw, "1"]), output) == 1
        assert output.lines()[-2:] == [
            "Select your X position: "
            "Position 0 is not available. Please try again.",
            "Select your X position: ",
        ]
