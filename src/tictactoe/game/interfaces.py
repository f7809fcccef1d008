"""Abstract interfaces for the game layer.

The engine talks to the console only through these ABCs, so tests can
drive a whole game with scripted input and captured output.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class IInputSource(ABC):
    """Where moves come from."""

    @abstractmethod
    def read_position(self) -> int:
        """Block until the next move number is available.

        Unparseable input yields a number that is never a free cell.

        Raises:
            InputExhaustedError: no more input can be read.
        """


class IOutputSink(ABC):
    """Where game text goes."""

    @abstractmethod
    def show(self, text: str, end: str = "\n") -> None:
        """Display *text* followed by *end*."""
