"""Console adapters for the game's input source and output sink."""

from tictactoe.console.io import (
    BufferedOutput,
    ConsoleInput,
    ConsoleOutput,
    ScriptedInput,
    coerce_position,
)

__all__ = [
    "BufferedOutput",
    "ConsoleInput",
    "ConsoleOutput",
    "ScriptedInput",
    "coerce_position",
]
