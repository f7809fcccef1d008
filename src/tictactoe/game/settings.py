"""Code-level game settings."""

from __future__ import annotations

from dataclasses import dataclass

from tictactoe.core.enums import Marker

PLAYER_COUNT = 2


@dataclass(frozen=True, slots=True)
class GameSettings:
    """Immutable per-session settings.

    Args:
        first_marker: Marker of player 0, who always moves first.
        labels: Display labels of player 0 and player 1.
    """

    first_marker: Marker = Marker.X
    labels: tuple[str, str] = ("Player 1", "Player 2")

    def __post_init__(self) -> None:
        if len(self.labels) != PLAYER_COUNT:
            raise ValueError(f"Expected {PLAYER_COUNT} labels, got {self.labels!r}")
        if not all(self.labels):
            raise ValueError("Player labels must not be empty")

    @classmethod
    def standard(cls) -> GameSettings:
        return cls()

    def marker_for(self, index: int) -> Marker:
        return self.first_marker if index == 0 else self.first_marker.opposite
