"""Position — immutable snapshot of a full chess game state."""

from __future__ import annotations

import chess

from chesscompanion.core.enums import Color
from chesscompanion.core.types import Square

STARTING_FEN = chess.STARTING_FEN


class Position:
    """Board layout, side to move, castling/en-passant rights and clocks.

    Wraps a private :class:`chess.Board` copy.  The move stack travels with
    the board so repetition draws stay detectable.  Nothing mutates the
    wrapped board after construction; :meth:`board` hands out copies.

    Positions compare by identity.  Two positions with the same FEN reached
    in different sessions are different snapshots.
    """

    __slots__ = ("_board",)

    def __init__(self, board: chess.Board | None = None) -> None:
        self._board = board.copy() if board is not None else chess.Board()

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def initial(cls) -> Position:
        return cls(chess.Board())

    @classmethod
    def from_fen(cls, fen: str) -> Position:
        try:
            board = chess.Board(fen)
        except ValueError:
            raise ValueError(f"Invalid FEN: {fen!r}") from None
        return cls(board)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def fen(self) -> str:
        return self._board.fen()

    @property
    def side_to_move(self) -> Color:
        return Color.from_chess(self._board.turn)

    @property
    def fullmove_number(self) -> int:
        return self._board.fullmove_number

    @property
    def ply(self) -> int:
        """Half-moves played since the start of the game (from the FEN counters)."""
        return self._board.ply()

    def piece_color_at(self, square: Square) -> Color | None:
        color = self._board.color_at(square)
        return None if color is None else Color.from_chess(color)

    def board(self) -> chess.Board:
        """Return a mutable copy of the underlying board."""
        return self._board.copy()

    def __str__(self) -> str:
        return str(self._board)

    def __repr__(self) -> str:
        return f"Position({self.fen!r})"
