"""Game state — board, players, turn and phase."""

from __future__ import annotations

from dataclasses import dataclass, field

from tictactoe.core.board import Board
from tictactoe.core.enums import GamePhase, Marker
from tictactoe.core.rules import Rules
from tictactoe.core.types import CELL_COUNT, Cell, is_valid_cell
from tictactoe.game.errors import GameOverError, IllegalMoveError
from tictactoe.game.player import Player
from tictactoe.game.settings import PLAYER_COUNT, GameSettings


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the in-memory move history."""

    turn: int  # 0-based
    player_index: int
    marker: Marker
    position: Cell


@dataclass(frozen=True, slots=True)
class GameResult:
    """Terminal outcome returned by :meth:`GameEngine.run`."""

    phase: GamePhase
    winner: Player | None
    move_count: int

    @property
    def is_draw(self) -> bool:
        return self.phase == GamePhase.DRAW


@dataclass
class GameState:
    """Mutable state of one session.

    Mutated only through :meth:`apply_move` and :meth:`switch_turn`.
    The number of marked cells always equals ``len(move_history)``.
    """

    players: tuple[Player, Player]
    board: Board = field(default_factory=Board)
    current_index: int = 0
    phase: GamePhase = GamePhase.IN_PROGRESS
    winner: Player | None = None
    move_history: list[MoveRecord] = field(default_factory=list)

    @classmethod
    def new(cls, settings: GameSettings | None = None) -> GameState:
        """Empty board, player 0 to move."""
        settings = settings or GameSettings.standard()
        players = tuple(
            Player(i, settings.marker_for(i), settings.labels[i])
            for i in range(PLAYER_COUNT)
        )
        return cls(players=players)  # type: ignore[arg-type]

    # ── Mutation ─────────────────────────────────────────────────────────

    def apply_move(self, position: Cell) -> MoveRecord:
        """Mark *position* for the current player and update the phase.

        Does not switch turns.
        """
        if self.phase.is_terminal:
            raise GameOverError("The game is already over")
        if not is_valid_cell(position) or not self.board.is_empty(position):
            raise IllegalMoveError(position)

        player = self.current_player
        self.board.place_marker(position, player.marker)
        record = MoveRecord(
            turn=len(self.move_history),
            player_index=player.index,
            marker=player.marker,
            position=position,
        )
        self.move_history.append(record)

        self.phase = Rules.outcome(self.board, player.marker)
        if self.phase == GamePhase.WON:
            self.winner = player
        return record

    def switch_turn(self) -> None:
        if self.phase.is_terminal:
            raise GameOverError("The game is already over")
        self.current_index = self.other_player_index

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def current_player(self) -> Player:
        return self.players[self.current_index]

    @property
    def other_player_index(self) -> int:
        return 1 - self.current_index

    @property
    def opponent(self) -> Player:
        return self.players[self.other_player_index]

    @property
    def move_count(self) -> int:
        return len(self.move_history)

    @property
    def turn_number(self) -> int:
        """1-based number of the move about to be made."""
        return CELL_COUNT + 1 - len(self.board.free_positions())

    @property
    def is_game_over(self) -> bool:
        return self.phase.is_terminal

    def result(self) -> GameResult:
        return GameResult(self.phase, self.winner, self.move_count)
