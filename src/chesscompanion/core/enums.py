"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum, auto

import chess


class Color(IntEnum):
    """Side color. White is the first player."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def as_chess(self) -> chess.Color:
        """python-chess representation (``chess.WHITE`` is ``True``)."""
        return self == Color.WHITE

    @classmethod
    def from_chess(cls, color: chess.Color) -> Color:
        return cls.WHITE if color else cls.BLACK

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types, numbered like python-chess."""

    PAWN = chess.PAWN
    KNIGHT = chess.KNIGHT
    BISHOP = chess.BISHOP
    ROOK = chess.ROOK
    QUEEN = chess.QUEEN
    KING = chess.KING


class StatusKind(IntEnum):
    """Terminal classification of a position."""

    IN_PROGRESS = 0
    CHECKMATE = auto()
    DRAW = auto()


class DrawReason(IntEnum):
    """Why a drawn position is drawn."""

    STALEMATE = auto()
    REPETITION = auto()
    INSUFFICIENT_MATERIAL = auto()
    OTHER = auto()


class Direction(IntEnum):
    """History navigation step."""

    BACK = -1
    FORWARD = 1
