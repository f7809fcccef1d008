"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterable

import pytest

from tictactoe.console.io import BufferedOutput, ScriptedInput
from tictactoe.game.engine import GameEngine

EngineFactory = Callable[[Iterable[str | int]], GameEngine]


@pytest.fixture
def output() -> BufferedOutput:
    """Captures everything the game shows."""
    return BufferedOutput()


@pytest.fixture
def make_engine(output: BufferedOutput) -> EngineFactory:
    """Build an engine fed by scripted input lines."""

    def _make(lines: Iterable[str | int]) -> GameEngine:
        return GameEngine(ScriptedInput(lines), output)

    return _make
