"""BoardSurface — everything a renderer needs, derived from the controller."""

from __future__ import annotations

from dataclasses import dataclass

from chesscompanion.core.enums import Color, DrawReason, StatusKind
from chesscompanion.core.move import Move
from chesscompanion.core.position import Position
from chesscompanion.core.rules import GameStatus
from chesscompanion.core.types import Square
from chesscompanion.game.controller import GameController
from chesscompanion.game.errors import ErrorKind, SessionError
from chesscompanion.ui.i18n import t


@dataclass(frozen=True, slots=True)
class MoveRow:
    """One line of the move table: a full move number and up to two SANs."""

    number: int
    white: str
    black: str = ""


@dataclass(frozen=True, slots=True)
class BoardSurface:
    """Render snapshot. Immutable; rebuild after every change."""

    position: Position
    orientation: Color
    selected: Square | None
    destinations: frozenset[Square]
    last_move: Move | None
    analyzing: bool
    notice: str | None
    game_over: str | None
    copy_move: str | None
    status_line: str
    oracle_side: Color | None
    moves: tuple[MoveRow, ...]
    counter: str
    can_go_back: bool
    can_go_forward: bool


def color_name(color: Color) -> str:
    s = t()
    return s.color_white if color == Color.WHITE else s.color_black


def game_over_text(status: GameStatus) -> str | None:
    s = t()
    if status.kind == StatusKind.CHECKMATE and status.winner is not None:
        return s.wins_checkmate.format(color=color_name(status.winner))
    if status.kind == StatusKind.DRAW:
        if status.draw_reason == DrawReason.STALEMATE:
            return s.draw_stalemate
        if status.draw_reason == DrawReason.REPETITION:
            return s.draw_repetition
        if status.draw_reason == DrawReason.INSUFFICIENT_MATERIAL:
            return s.draw_insufficient
        return s.draw_generic
    return None


def notice_text(error: SessionError, side_to_move: Color) -> str | None:
    """Localised notice for *error*; ``None`` for errors never shown."""
    s = t()
    if error.kind == ErrorKind.WRONG_PIECE_COLOR:
        return s.notice_wrong_piece_color.format(color=color_name(side_to_move))
    texts = {
        ErrorKind.NO_ACTIVE_GAME: s.notice_no_active_game,
        ErrorKind.ANALYSIS_IN_PROGRESS: s.notice_analysis_in_progress,
        ErrorKind.GAME_OVER: s.notice_game_over,
        ErrorKind.WRONG_TURN: s.notice_wrong_turn,
        ErrorKind.NO_PIECE_AT_SOURCE: s.notice_no_piece_at_source,
        ErrorKind.ILLEGAL_MOVE: s.notice_illegal_move,
        ErrorKind.ORACLE_FAILURE: s.notice_oracle_failure,
        ErrorKind.UNDO_UNAVAILABLE: s.notice_undo_unavailable,
    }
    return texts.get(error.kind)


def move_rows(move_log: list[str]) -> tuple[MoveRow, ...]:
    """Pair the SAN log into numbered white/black rows."""
    rows = []
    for i in range(0, len(move_log), 2):
        black = move_log[i + 1] if i + 1 < len(move_log) else ""
        rows.append(MoveRow(i // 2 + 1, move_log[i], black))
    return tuple(rows)


def status_line(controller: GameController) -> str:
    session = controller.session
    s = t()
    if not session.is_active:
        return s.status_no_game
    over = game_over_text(session.status)
    if over is not None:
        return over
    if session.rules.is_in_check(session.live_position):
        return s.status_check
    if session.side_to_move == Color.WHITE:
        return s.status_white_to_move
    return s.status_black_to_move


def build_surface(controller: GameController) -> BoardSurface:
    session = controller.session
    navigator = controller.navigator
    selection = controller.selection
    notice = controller.notice

    return BoardSurface(
        position=session.displayed_position,
        orientation=controller.orientation,
        selected=selection.origin,
        destinations=selection.destinations,
        last_move=session.move_leading_to(session.cursor),
        analyzing=controller.coordinator.is_awaiting,
        notice=None if notice is None else notice_text(notice, session.side_to_move),
        game_over=game_over_text(session.status) if session.is_active else None,
        copy_move=controller.last_oracle_san,
        status_line=status_line(controller),
        oracle_side=session.oracle_side,
        moves=move_rows(session.move_log),
        counter=navigator.counter_text(t().nav_counter),
        can_go_back=navigator.can_go_back,
        can_go_forward=navigator.can_go_forward,
    )
