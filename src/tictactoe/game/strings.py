"""User-facing console strings.

Usage::

    from tictactoe.game.strings import STRINGS

    print(STRINGS.winner("Player 1"))   # "Player 1 wins!"
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    prompt: str  # "Select your {marker} position: "
    position_unavailable: str  # "Position {position} is not available. ..."
    move_echo: str  # "{label} selects {marker} position {position}"
    wins: str  # "{label} wins!"
    draw: str

    def select_prompt(self, marker: object) -> str:
        return self.prompt.format(marker=marker)

    def rejected(self, position: int) -> str:
        return self.position_unavailable.format(position=position)

    def selected(self, label: str, marker: object, position: int) -> str:
        return self.move_echo.format(label=label, marker=marker, position=position)

    def winner(self, label: str) -> str:
        return self.wins.format(label=label)


STRINGS = Strings(
    prompt="Select your {marker} position: ",
    position_unavailable="Position {position} is not available. Please try again.",
    move_echo="{label} selects {marker} position {position}",
    wins="{label} wins!",
    draw="It's a draw.",
)
