"""Session state — the authoritative record of the game in progress."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chesscompanion.core.enums import Color
from chesscompanion.core.move import Move
from chesscompanion.core.position import Position
from chesscompanion.core.rules import ChessRules, GameStatus, IllegalMoveError, IRulesEngine
from chesscompanion.game.errors import GameOver, IllegalMove, NoActiveGame

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single applied move."""

    move: Move
    san: str
    position_after: Position
    mover: Color


@dataclass
class SessionState:
    """Position history, SAN log, display cursor and side assignment.

    ``history[-1]`` is the live position: moves always apply there.
    ``cursor`` only selects which history entry is displayed.
    ``move_log`` is parallel to ``history[1:]``.

    This is a pure data/logic class — no threading, no UI.  All mutation
    must happen on one thread; :meth:`apply_move` refuses nested calls.
    """

    rules: IRulesEngine = field(default_factory=ChessRules)
    history: list[Position] = field(init=False)
    move_log: list[str] = field(default_factory=list, init=False)
    cursor: int = field(default=0, init=False)
    oracle_side: Color | None = field(default=None, init=False)
    status: GameStatus = field(default_factory=GameStatus.in_progress, init=False)
    _moves: list[Move] = field(default_factory=list, init=False, repr=False)
    _applying: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        self.history = [Position.initial()]
        self._refresh_status()

    # ── Lifecycle ────────────────────────────────────────────────────────

    def reset(self, oracle_side: Color, start: Position | None = None) -> None:
        """Start a new game with *oracle_side* played by the oracle."""
        self.oracle_side = oracle_side
        self.history = [start if start is not None else Position.initial()]
        self.move_log = []
        self._moves = []
        self.cursor = 0
        self._refresh_status()
        _LOGGER.info("New game: oracle plays %s", oracle_side)

    def clear(self) -> None:
        """Drop the game; no side is assigned afterwards."""
        self.oracle_side = None
        self.history = [Position.initial()]
        self.move_log = []
        self._moves = []
        self.cursor = 0
        self._refresh_status()

    # ── Mutation ─────────────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord:
        """Apply *move* to the live position and advance the cursor to it.

        Raises:
            NoActiveGame: no side assignment.
            GameOver: the live position is terminal.
            IllegalMove: the rules engine rejected *move*; nothing changed.
        """
        if self._applying:
            raise RuntimeError("apply_move is not re-entrant")
        if self.oracle_side is None:
            raise NoActiveGame()
        if self.status.is_over:
            raise GameOver()

        self._applying = True
        try:
            live = self.live_position
            mover = self.rules.turn_to_move(live)
            try:
                new_position, san = self.rules.apply(live, move)
            except IllegalMoveError as exc:
                raise IllegalMove(str(exc)) from exc

            self.history.append(new_position)
            self.move_log.append(san)
            self._moves.append(move)
            self.cursor = len(self.history) - 1
            self._refresh_status()
        finally:
            self._applying = False

        return MoveRecord(move=move, san=san, position_after=new_position, mover=mover)

    def pop_last(self) -> MoveRecord:
        """Remove the most recent move. Used by manual undo only."""
        if not self.move_log:
            raise IndexError("no move to remove")
        mover = self.mover_of(len(self.move_log) - 1)
        position = self.history.pop()
        san = self.move_log.pop()
        move = self._moves.pop()
        self.cursor = len(self.history) - 1
        self._refresh_status()
        return MoveRecord(move=move, san=san, position_after=position, mover=mover)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_active(self) -> bool:
        return self.oracle_side is not None

    @property
    def manual_side(self) -> Color | None:
        return None if self.oracle_side is None else self.oracle_side.opposite

    @property
    def live_position(self) -> Position:
        return self.history[-1]

    @property
    def displayed_position(self) -> Position:
        return self.history[self.cursor]

    @property
    def side_to_move(self) -> Color:
        return self.rules.turn_to_move(self.live_position)

    @property
    def is_game_over(self) -> bool:
        return self.status.is_over

    @property
    def ply_count(self) -> int:
        """Number of half-moves played in this session."""
        return len(self.move_log)

    @property
    def last_move(self) -> Move | None:
        return self.move_leading_to(len(self.history) - 1)

    def move_leading_to(self, index: int) -> Move | None:
        """Move that produced ``history[index]``; ``None`` for the start."""
        return self._moves[index - 1] if index > 0 else None

    def mover_of(self, index: int) -> Color:
        """Side that played ``move_log[index]``."""
        return self.rules.turn_to_move(self.history[index])

    # ── Internal ─────────────────────────────────────────────────────────

    def _refresh_status(self) -> None:
        self.status = self.rules.status(self.live_position)
