"""ManualMoveValidator — gates human moves before they reach the session."""

from __future__ import annotations

from dataclasses import dataclass

from chesscompanion.core.enums import PieceType
from chesscompanion.core.move import Move
from chesscompanion.core.types import Square
from chesscompanion.game.coordinator import TurnCoordinator
from chesscompanion.game.errors import (
    AnalysisInProgress,
    GameOver,
    IllegalMove,
    NoActiveGame,
    NoPieceAtSource,
    SessionError,
    WrongPieceColor,
    WrongTurn,
)
from chesscompanion.game.interfaces import SelectionPhase
from chesscompanion.game.session import MoveRecord, SessionState

# Promotions are never prompted for.
DEFAULT_PROMOTION = PieceType.QUEEN


@dataclass(frozen=True, slots=True)
class SquareSelection:
    """Chosen origin square and its precomputed destinations."""

    origin: Square | None = None
    destinations: frozenset[Square] = frozenset()

    @property
    def phase(self) -> SelectionPhase:
        if self.origin is None:
            return SelectionPhase.UNSELECTED
        return SelectionPhase.SELECTED


_EMPTY_SELECTION = SquareSelection()


class ManualMoveValidator:
    """Two-phase gate (eligibility, then legality) plus click-to-move state.

    All checks run against the live position, never the displayed one.
    """

    __slots__ = ("_session", "_coordinator", "_selection")

    def __init__(self, session: SessionState, coordinator: TurnCoordinator) -> None:
        self._session = session
        self._coordinator = coordinator
        self._selection = _EMPTY_SELECTION

    @property
    def selection(self) -> SquareSelection:
        return self._selection

    def clear_selection(self) -> None:
        self._selection = _EMPTY_SELECTION

    # ── Phase 1: eligibility ─────────────────────────────────────────────

    def check_eligibility(self) -> None:
        session = self._session
        if session.oracle_side is None:
            raise NoActiveGame()
        if self._coordinator.is_awaiting:
            raise AnalysisInProgress()
        if session.is_game_over:
            raise GameOver()
        if session.side_to_move != session.manual_side:
            raise WrongTurn()

    # ── Phase 2: legality ────────────────────────────────────────────────

    def resolve_move(self, origin: Square, destination: Square) -> Move:
        """Pick the legal move *origin* → *destination* in the live position."""
        session = self._session
        live = session.live_position
        owner = session.rules.piece_color_at(live, origin)
        if owner is None:
            raise NoPieceAtSource()
        if owner != session.manual_side:
            raise WrongPieceColor()

        candidates = [
            m
            for m in session.rules.legal_moves(live, origin)
            if m.destination == destination
        ]
        if not candidates:
            raise IllegalMove(f"{origin}->{destination}")
        for move in candidates:
            if move.promotion == DEFAULT_PROMOTION:
                return move
        return candidates[0]

    def destinations_from(self, origin: Square) -> frozenset[Square]:
        session = self._session
        return frozenset(
            m.destination for m in session.rules.legal_moves(session.live_position, origin)
        )

    # ── Entry points ─────────────────────────────────────────────────────

    def submit(self, origin: Square, destination: Square) -> MoveRecord:
        """Validate and apply a manual move. Selection is cleared either way."""
        try:
            self.check_eligibility()
            move = self.resolve_move(origin, destination)
            return self._session.apply_move(move)
        finally:
            self.clear_selection()

    def drop(self, origin: Square, destination: Square) -> MoveRecord:
        """Drag-and-drop: explicit origin/destination, no selection state."""
        return self.submit(origin, destination)

    def click(self, square: Square) -> MoveRecord | None:
        """Advance the click-to-move state machine.

        Returns the applied record when the click completed a move.
        """
        try:
            self.check_eligibility()
        except SessionError:
            self.clear_selection()
            raise

        origin = self._selection.origin
        if origin is None:
            if self._is_own_piece(square):
                self._select(square)
            return None

        try:
            return self.submit(origin, square)
        except SessionError:
            if self._is_own_piece(square):
                self._select(square)
                return None
            raise

    # ── Internal ─────────────────────────────────────────────────────────

    def _is_own_piece(self, square: Square) -> bool:
        session = self._session
        owner = session.rules.piece_color_at(session.live_position, square)
        return owner is not None and owner == session.manual_side

    def _select(self, square: Square) -> None:
        self._selection = SquareSelection(square, self.destinations_from(square))
