"""Two-player console tic-tac-toe."""

__version__ = "1.0.0"
