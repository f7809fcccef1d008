"""Game management layer — engine, players, state machine.

Quick start::

    from tictactoe.console.io import ConsoleInput, ConsoleOutput
    from tictactoe.game import GameEngine

    result = GameEngine(ConsoleInput(), ConsoleOutput()).run()
"""

from tictactoe.game.engine import GameEngine, GameEvents
from tictactoe.game.errors import (
    GameOverError,
    IllegalMoveError,
    InputExhaustedError,
    TicTacToeError,
)
from tictactoe.game.interfaces import IInputSource, IOutputSink
from tictactoe.game.player import Player
from tictactoe.game.settings import GameSettings
from tictactoe.game.state import GameResult, GameState, MoveRecord

__all__ = [
    # Interfaces
    "IInputSource",
    "IOutputSink",
    # Errors
    "GameOverError",
    "IllegalMoveError",
    "InputExhaustedError",
    "TicTacToeError",
    # Concrete
    "GameEngine",
    "GameEvents",
    "GameResult",
    "GameSettings",
    "GameState",
    "MoveRecord",
    "Player",
]
