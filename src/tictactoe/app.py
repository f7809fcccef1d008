"""Application entry point."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from tictactoe.console.io import ConsoleInput, ConsoleOutput
from tictactoe.game.engine import GameEngine
from tictactoe.game.errors import InputExhaustedError

if TYPE_CHECKING:
    from tictactoe.game.interfaces import IInputSource, IOutputSink

_LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT_EXHAUSTED = 1


def run_game(
    source: IInputSource | None = None,
    sink: IOutputSink | None = None,
) -> int:
    """Play one game and return the process exit code."""
    engine = GameEngine(
        source if source is not None else ConsoleInput(),
        sink if sink is not None else ConsoleOutput(),
    )
    try:
        engine.run()
    except InputExhaustedError as exc:
        _LOGGER.error("Game aborted: %s", exc)
        return EXIT_INPUT_EXHAUSTED
    return EXIT_OK


def main() -> None:
    """Launch a new game between two local players."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    sys.exit(run_game())


if __name__ == "__main__":
    main()
