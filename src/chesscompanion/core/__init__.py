"""Core domain layer — positions, moves and the rules-engine seam.

Quick start::

    from chesscompanion.core import ChessRules, Position

    rules = ChessRules()
    pos = Position.initial()
    for move in rules.legal_moves(pos):
        print(move)
"""

from chesscompanion.core.enums import Color, Direction, DrawReason, PieceType, StatusKind
from chesscompanion.core.move import Move
from chesscompanion.core.position import STARTING_FEN, Position
from chesscompanion.core.rules import ChessRules, GameStatus, IllegalMoveError, IRulesEngine
from chesscompanion.core.types import Square, parse_square, square_name

__all__ = [
    # Enums
    "Color",
    "Direction",
    "DrawReason",
    "PieceType",
    "StatusKind",
    # Types / helpers
    "Square",
    "parse_square",
    "square_name",
    # Domain objects
    "Move",
    "Position",
    "STARTING_FEN",
    # Rules
    "ChessRules",
    "GameStatus",
    "IRulesEngine",
    "IllegalMoveError",
]
