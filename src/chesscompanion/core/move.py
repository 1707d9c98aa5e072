"""Move value object (UCI-style representation)."""

from __future__ import annotations

from dataclasses import dataclass

import chess

from chesscompanion.core.enums import PieceType
from chesscompanion.core.types import Square, square_name

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable origin/destination pair, plus an optional promotion piece."""

    origin: Square
    destination: Square
    promotion: PieceType | None = None

    # ── Conversion ───────────────────────────────────────────────────────

    @classmethod
    def from_uci(cls, text: str) -> Move:
        """Parse long algebraic text such as ``e2e4`` or ``e7e8q``."""
        try:
            raw = chess.Move.from_uci(text.strip())
        except ValueError:
            raise ValueError(f"Invalid UCI move: {text!r}") from None
        return cls.from_chess(raw)

    @classmethod
    def from_chess(cls, move: chess.Move) -> Move:
        promotion = PieceType(move.promotion) if move.promotion else None
        return cls(move.from_square, move.to_square, promotion)

    def to_chess(self) -> chess.Move:
        promotion = int(self.promotion) if self.promotion is not None else None
        return chess.Move(self.origin, self.destination, promotion=promotion)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.origin)}{square_name(self.destination)}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)
