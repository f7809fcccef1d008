"""Console and in-memory implementations of the game's I/O interfaces."""

from __future__ import annotations

import re
import sys
from collections import deque
from collections.abc import Iterable
from typing import TextIO

from tictactoe.game.errors import InputExhaustedError
from tictactoe.game.interfaces import IInputSource, IOutputSink

_LEADING_INT = re.compile(r"\s*([+-]?)([0-9]+)")

# Cap on significant digits; longer numbers read as invalid.
_MAX_DIGITS = 18

# Returned for input that does not start with a number; never a free cell.
INVALID_POSITION = 0


def coerce_position(text: str) -> int:
    """Leading integer of *text*, or ``INVALID_POSITION``.

    ``"5"`` -> 5, ``" 7\\n"`` -> 7, ``"3abc"`` -> 3, ``"abc"`` -> 0.
    Only ASCII digits count. Numbers longer than ``_MAX_DIGITS`` significant
    digits are invalid.
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return INVALID_POSITION
    sign, digits = match.groups()
    if len(digits.lstrip("0")) > _MAX_DIGITS:
        return INVALID_POSITION
    return int(sign + digits)


class ConsoleInput(IInputSource):
    """Reads one move per line from *stream* (stdin by default)."""

    __slots__ = ("_stream",)

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def read_position(self) -> int:
        stream = self._stream if self._stream is not None else sys.stdin
        line = stream.readline()
        if not line:
            raise InputExhaustedError()
        return coerce_position(line)


class ConsoleOutput(IOutputSink):
    """Writes to *stream* (stdout by default), flushing every call."""

    __slots__ = ("_stream",)

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def show(self, text: str, end: str = "\n") -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        print(text, end=end, file=stream, flush=True)


class ScriptedInput(IInputSource):
    """Replays a fixed sequence of raw lines, then reports exhaustion."""

    __slots__ = ("_lines",)

    def __init__(self, lines: Iterable[str | int]) -> None:
        self._lines: deque[str] = deque(str(line) for line in lines)

    @property
    def remaining(self) -> int:
        return len(self._lines)

    def read_position(self) -> int:
        if not self._lines:
            raise InputExhaustedError()
        return coerce_position(self._lines.popleft())


class BufferedOutput(IOutputSink):
    """Collects everything shown into a single transcript string."""

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def show(self, text: str, end: str = "\n") -> None:
        self._parts.append(text + end)

    @property
    def text(self) -> str:
        return "".join(self._parts)

    def lines(self) -> list[str]:
        return self.text.splitlines()
