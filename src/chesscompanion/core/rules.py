"""Rules engine seam: legality, move application and terminal status.

The chess rules themselves come from python-chess.  The game layer only
talks to :class:`IRulesEngine`, so tests can substitute a stub engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import chess

from chesscompanion.core.enums import Color, DrawReason, StatusKind
from chesscompanion.core.move import Move
from chesscompanion.core.position import Position
from chesscompanion.core.types import Square


class IllegalMoveError(ValueError):
    """Raised by :meth:`IRulesEngine.apply` for a move the position forbids."""


@dataclass(frozen=True, slots=True)
class GameStatus:
    """Terminal status of a position."""

    kind: StatusKind = StatusKind.IN_PROGRESS
    winner: Color | None = None
    draw_reason: DrawReason | None = None

    @classmethod
    def in_progress(cls) -> GameStatus:
        return cls()

    @classmethod
    def checkmate(cls, winner: Color) -> GameStatus:
        return cls(StatusKind.CHECKMATE, winner=winner)

    @classmethod
    def draw(cls, reason: DrawReason) -> GameStatus:
        return cls(StatusKind.DRAW, draw_reason=reason)

    @property
    def is_over(self) -> bool:
        return self.kind != StatusKind.IN_PROGRESS


class IRulesEngine(Protocol):
    """Protocol for the rules collaborator used by the game layer."""

    def legal_moves(
        self, position: Position, origin: Square | None = None
    ) -> frozenset[Move]: ...

    def apply(self, position: Position, move: Move) -> tuple[Position, str]: ...

    def status(self, position: Position) -> GameStatus: ...

    def turn_to_move(self, position: Position) -> Color: ...

    def is_in_check(self, position: Position) -> bool: ...

    def piece_color_at(self, position: Position, square: Square) -> Color | None: ...

    def parse_move(self, position: Position, text: str) -> Move | None: ...


_DRAW_REASONS: dict[chess.Termination, DrawReason] = {
    chess.Termination.STALEMATE: DrawReason.STALEMATE,
    chess.Termination.THREEFOLD_REPETITION: DrawReason.REPETITION,
    chess.Termination.FIVEFOLD_REPETITION: DrawReason.REPETITION,
    chess.Termination.INSUFFICIENT_MATERIAL: DrawReason.INSUFFICIENT_MATERIAL,
}

_FIFTY_MOVE_PLIES = 100


class ChessRules:
    """Standard chess rules backed by python-chess.

    Threefold repetition and the fifty-move rule end the game as soon as the
    position on the board satisfies them, like most online boards do.
    """

    def legal_moves(
        self, position: Position, origin: Square | None = None
    ) -> frozenset[Move]:
        board = position.board()
        return frozenset(
            Move.from_chess(m)
            for m in board.legal_moves
            if origin is None or m.from_square == origin
        )

    def apply(self, position: Position, move: Move) -> tuple[Position, str]:
        board = position.board()
        raw = move.to_chess()
        if not board.is_legal(raw):
            raise IllegalMoveError(f"Illegal move {move} in {position.fen}")
        san = board.san(raw)
        board.push(raw)
        return Position(board), san

    def status(self, position: Position) -> GameStatus:
        board = position.board()
        outcome = board.outcome(claim_draw=False)
        if outcome is not None:
            if outcome.winner is not None:
                return GameStatus.checkmate(Color.from_chess(outcome.winner))
            return GameStatus.draw(
                _DRAW_REASONS.get(outcome.termination, DrawReason.OTHER)
            )
        # Only the position on the board counts; a repetition the next move
        # could reach is not a draw yet.
        if board.is_repetition(3):
            return GameStatus.draw(DrawReason.REPETITION)
        if board.halfmove_clock >= _FIFTY_MOVE_PLIES:
            return GameStatus.draw(DrawReason.OTHER)
        return GameStatus.in_progress()

    def turn_to_move(self, position: Position) -> Color:
        return position.side_to_move

    def is_in_check(self, position: Position) -> bool:
        return position.board().is_check()

    def piece_color_at(self, position: Position, square: Square) -> Color | None:
        return position.piece_color_at(square)

    def parse_move(self, position: Position, text: str) -> Move | None:
        """Read *text* as SAN first, then UCI; ``None`` unless legal here."""
        token = text.strip()
        if not token:
            return None

        board = position.board()
        try:
            raw = board.parse_san(token)
        except ValueError:
            pass
        else:
            return Move.from_chess(raw) if raw else None

        try:
            raw = chess.Move.from_uci(token.lower())
        except ValueError:
            return None
        if not board.is_legal(raw):
            return None
        return Move.from_chess(raw)
