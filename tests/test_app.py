"""Tests for the application entry point."""

import io
import logging

import pytest

from tictactoe.app import EXIT_INPUT_EXHAUSTED, EXIT_OK, main, run_game
from tictactoe.console.io import BufferedOutput, ScriptedInput


class TestRunGame:
    def test_win_exits_zero(self) -> None:
        output = BufferedOutput()
        assert run_game(ScriptedInput([1, 4, 2, 5, 3]), output) == EXIT_OK
        assert "Player 1 wins!" in output.lines()

    def test_draw_exits_zero(self) -> None:
        output = BufferedOutput()
        code = run_game(ScriptedInput([1, 2, 3, 5, 4, 6, 8, 7, 9]), output)
        assert code == EXIT_OK
        assert "It's a draw." in output.lines()

    def test_exhaustion_exits_nonzero(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR, logger="tictactoe.app"):
            code = run_game(ScriptedInput([5]), BufferedOutput())
        assert code == EXIT_INPUT_EXHAUSTED
        assert "No more input available." in caplog.text


class TestMain:
    def test_console_game(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("1\n4\n2\n5\n3\n"))
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == EXIT_OK
        out = capsys.readouterr().out
        assert out.endswith(
            "Player 1 wins!\n"
            "X | X | X\n--+---+--\nO | O | 6\n--+---+--\n7 | 8 | 9\n"
        )

    def test_empty_stdin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(""))
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == EXIT_INPUT_EXHAUSTED
