"""Session errors.

Every user-facing error is recoverable: it is shown as a transient notice
and leaves the session untouched.  ``StaleOracleResponse`` never leaves the
game layer.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    NO_ACTIVE_GAME = "no_active_game"
    ANALYSIS_IN_PROGRESS = "analysis_in_progress"
    GAME_OVER = "game_over"
    WRONG_TURN = "wrong_turn"
    NO_PIECE_AT_SOURCE = "no_piece_at_source"
    WRONG_PIECE_COLOR = "wrong_piece_color"
    ILLEGAL_MOVE = "illegal_move"
    ORACLE_FAILURE = "oracle_failure"
    STALE_ORACLE_RESPONSE = "stale_oracle_response"
    UNDO_UNAVAILABLE = "undo_unavailable"


class SessionError(Exception):
    """Base class for rejected session operations."""

    kind: ErrorKind

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail or self.kind.value)
        self.detail = detail


class NoActiveGame(SessionError):
    kind = ErrorKind.NO_ACTIVE_GAME


class AnalysisInProgress(SessionError):
    kind = ErrorKind.ANALYSIS_IN_PROGRESS


class GameOver(SessionError):
    kind = ErrorKind.GAME_OVER


class WrongTurn(SessionError):
    kind = ErrorKind.WRONG_TURN


class NoPieceAtSource(SessionError):
    kind = ErrorKind.NO_PIECE_AT_SOURCE


class WrongPieceColor(SessionError):
    kind = ErrorKind.WRONG_PIECE_COLOR


class IllegalMove(SessionError):
    kind = ErrorKind.ILLEGAL_MOVE


class OracleFailure(SessionError):
    """Oracle error, malformed or illegal suggestion, or timeout."""

    kind = ErrorKind.ORACLE_FAILURE


class StaleOracleResponse(SessionError):
    """Response for a request that no longer matches the live position."""

    kind = ErrorKind.STALE_ORACLE_RESPONSE


class UndoUnavailable(SessionError):
    kind = ErrorKind.UNDO_UNAVAILABLE
