"""GameEngine — the game loop and its state machine.

Drives one session: ask the current player for a move, apply it, check
for a win or a full board, otherwise switch turns.  Emits events via
simple callbacks so tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from tictactoe.core.enums import GamePhase
from tictactoe.game.interfaces import IInputSource, IOutputSink
from tictactoe.game.settings import GameSettings
from tictactoe.game.state import GameResult, GameState, MoveRecord
from tictactoe.game.strings import STRINGS

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
GameOverCallback = Callable[[GameResult], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Engine ───────────────────────────────────────────────────────────────────


class GameEngine:
    """Owns one :class:`GameState` from creation until :meth:`run` returns."""

    __slots__ = ("_state", "_source", "_sink", "events")

    def __init__(
        self,
        source: IInputSource,
        sink: IOutputSink,
        settings: GameSettings | None = None,
    ) -> None:
        self._state = GameState.new(settings)
        self._source = source
        self._sink = sink
        self.events = GameEvents()

    @property
    def state(self) -> GameState:
        return self._state

    def render(self) -> None:
        """Show the current board on the output sink."""
        self._sink.show(self._state.board.render())

    def run(self) -> GameResult:
        """Play until a win or a draw.

        Raises:
            InputExhaustedError: the input source ran dry mid-game.
        """
        while not self._state.is_game_over:
            self.play_turn()
        return self._state.result()

    def play_turn(self) -> MoveRecord:
        """Request, apply and resolve a single move."""
        state = self._state
        player = state.current_player
        position = player.select_position(state.board, self._source, self._sink)

        record = state.apply_move(position)
        _LOGGER.debug(
            "Turn %d: %s placed %s at %d",
            record.turn,
            player.label,
            record.marker,
            position,
        )
        self._sink.show(STRINGS.selected(player.label, player.marker, position))
        self._emit_move(record)

        if state.phase == GamePhase.WON:
            self._finish(STRINGS.winner(player.label))
        elif state.phase == GamePhase.DRAW:
            self._finish(STRINGS.draw)
        else:
            state.switch_turn()
        return record

    # ── Internal helpers ─────────────────────────────────────────────────

    def _finish(self, announcement: str) -> None:
        self._sink.show(announcement)
        self.render()
        result = self._state.result()
        _LOGGER.debug(
            "Game over after %d moves: %s", result.move_count, result.phase.name
        )
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)
