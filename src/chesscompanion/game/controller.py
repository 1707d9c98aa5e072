"""GameController — the central orchestrator of a companion session.

Coordinates: SessionState, TurnCoordinator, ManualMoveValidator,
HistoryNavigator.  Emits events via simple callbacks so the UI / tests can
subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from chesscompanion.core.enums import Color, Direction
from chesscompanion.core.rules import ChessRules, GameStatus, IRulesEngine
from chesscompanion.core.types import Square
from chesscompanion.game.coordinator import DEFAULT_STRENGTH, TurnCoordinator
from chesscompanion.game.errors import (
    AnalysisInProgress,
    GameOver,
    NoActiveGame,
    SessionError,
    UndoUnavailable,
    WrongTurn,
)
from chesscompanion.game.interfaces import GamePhase, OracleRequest
from chesscompanion.game.navigator import HistoryNavigator
from chesscompanion.game.session import MoveRecord, SessionState
from chesscompanion.game.validator import ManualMoveValidator, SquareSelection

if TYPE_CHECKING:
    from chesscompanion.ui.surface import BoardSurface

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, SessionState], None]
NoticeCallback = Callable[[SessionError], None]
PhaseCallback = Callable[[GamePhase], None]
GameOverCallback = Callable[[GameStatus], None]
OracleRequestCallback = Callable[[OracleRequest], None]
SurfaceChangedCallback = Callable[[], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_notice: list[NoticeCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_oracle_request: list[OracleRequestCallback] = field(default_factory=list)
    on_surface_changed: list[SurfaceChangedCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Exposes the user-facing commands of a companion session.

    Commands never raise :class:`SessionError`.  A rejected command stores
    the error as the current notice, notifies ``on_notice`` and returns it;
    a successful command returns ``None``.

    Thread-safety: every method must be called from the thread that owns the
    controller.  Oracle results arrive through :meth:`on_oracle_result` /
    :meth:`on_oracle_error`, delivered by ``OracleSession`` on that thread.
    """

    __slots__ = (
        "_session",
        "_coordinator",
        "_validator",
        "_navigator",
        "_orientation",
        "_notice",
        "_last_oracle_san",
        "_game_over_reported",
        "events",
    )

    def __init__(
        self,
        rules: IRulesEngine | None = None,
        *,
        strength: int = DEFAULT_STRENGTH,
    ) -> None:
        self._session = SessionState(rules if rules is not None else ChessRules())
        self._coordinator = TurnCoordinator(
            self._session, self._emit_oracle_request, strength=strength
        )
        self._validator = ManualMoveValidator(self._session, self._coordinator)
        self._navigator = HistoryNavigator(self._session)
        self._orientation = Color.WHITE
        self._notice: SessionError | None = None
        self._last_oracle_san: str | None = None
        self._game_over_reported = False
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def session(self) -> SessionState:
        return self._session

    @property
    def coordinator(self) -> TurnCoordinator:
        return self._coordinator

    @property
    def navigator(self) -> HistoryNavigator:
        return self._navigator

    @property
    def selection(self) -> SquareSelection:
        return self._validator.selection

    @property
    def orientation(self) -> Color:
        """Side drawn at the bottom of the board."""
        return self._orientation

    @property
    def notice(self) -> SessionError | None:
        return self._notice

    @property
    def last_oracle_san(self) -> str | None:
        """Most recent oracle move, shown until the next manual move."""
        return self._last_oracle_san

    @property
    def phase(self) -> GamePhase:
        if not self._session.is_active:
            return GamePhase.NOT_STARTED
        if self._session.is_game_over:
            return GamePhase.GAME_OVER
        if self._coordinator.is_awaiting:
            return GamePhase.THINKING
        return GamePhase.AWAITING_MOVE

    def set_strength(self, strength: int) -> None:
        """Oracle strength for subsequent requests; an outstanding one keeps its own."""
        self._coordinator.strength = strength
        _LOGGER.info("Oracle strength set to %d", strength)
        self._emit_surface_changed()

    # ── Game lifecycle ───────────────────────────────────────────────────

    def start_new_game(self, oracle_side: Color) -> None:
        """Reset the session; the oracle plays *oracle_side*."""
        self._coordinator.invalidate()
        self._validator.clear_selection()
        self._session.reset(oracle_side)
        self._orientation = oracle_side
        self._notice = None
        self._last_oracle_san = None
        self._game_over_reported = False
        self._after_mutation()

    def change_side(self) -> None:
        """Abandon the game; a side must be picked again."""
        self._coordinator.invalidate()
        self._validator.clear_selection()
        self._session.clear()
        self._orientation = Color.WHITE
        self._notice = None
        self._last_oracle_san = None
        self._game_over_reported = False
        self._emit_phase()
        self._emit_surface_changed()

    def flip_orientation(self) -> None:
        self._orientation = self._orientation.opposite
        self._emit_surface_changed()

    # ── Manual input ─────────────────────────────────────────────────────

    def square_click(self, square: Square) -> SessionError | None:
        try:
            record = self._validator.click(square)
        except SessionError as exc:
            return self._report(exc)

        self._notice = None
        if record is not None:
            self._after_manual_move(record)
        else:
            self._emit_surface_changed()
        return None

    def piece_drop(self, origin: Square, destination: Square) -> SessionError | None:
        try:
            record = self._validator.drop(origin, destination)
        except SessionError as exc:
            return self._report(exc)

        self._notice = None
        self._after_manual_move(record)
        return None

    def undo_last_manual_move(self) -> SessionError | None:
        """Take back the latest move if the manual side played it."""
        session = self._session
        try:
            if not session.is_active:
                raise NoActiveGame()
            if self._coordinator.is_awaiting:
                raise AnalysisInProgress()
            if not session.move_log:
                raise UndoUnavailable("no moves played")
            if session.mover_of(len(session.move_log) - 1) != session.manual_side:
                raise UndoUnavailable("latest move was played by the oracle")
        except SessionError as exc:
            return self._report(exc)

        record = session.pop_last()
        _LOGGER.info("Undid manual move %s", record.san)
        self._validator.clear_selection()
        self._notice = None
        self._game_over_reported = False
        self._last_oracle_san = self._trailing_oracle_san()
        self._after_mutation()
        return None

    def navigate(self, direction: Direction) -> bool:
        moved = self._navigator.navigate(direction)
        if moved:
            self._emit_surface_changed()
        return moved

    # ── Oracle path ──────────────────────────────────────────────────────

    def retry_oracle(self) -> SessionError | None:
        """Ask the oracle again after a failed suggestion."""
        session = self._session
        try:
            if not session.is_active:
                raise NoActiveGame()
            if self._coordinator.is_awaiting:
                raise AnalysisInProgress()
            if session.is_game_over:
                raise GameOver()
            if session.side_to_move != session.oracle_side:
                raise WrongTurn()
        except SessionError as exc:
            return self._report(exc)

        self._notice = None
        self._coordinator.evaluate()
        self._emit_phase()
        self._emit_surface_changed()
        return None

    def on_oracle_result(self, request_id: int, text: str) -> SessionError | None:
        try:
            record = self._coordinator.resolve(request_id, text)
        except SessionError as exc:
            self._emit_phase()
            return self._report(exc)

        if record is None:
            return None

        self._last_oracle_san = record.san
        self._emit_move(record)
        self._after_mutation()
        return None

    def on_oracle_error(self, request_id: int, message: str) -> SessionError | None:
        try:
            self._coordinator.fail(request_id, message)
        except SessionError as exc:
            self._emit_phase()
            return self._report(exc)
        return None

    def dismiss_notice(self) -> None:
        if self._notice is None:
            return
        self._notice = None
        self._emit_surface_changed()

    def surface(self) -> BoardSurface:
        """Render snapshot of the current state, texts in the active language."""
        from chesscompanion.ui.surface import build_surface

        return build_surface(self)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _after_manual_move(self, record: MoveRecord) -> None:
        self._last_oracle_san = None
        self._emit_move(record)
        self._after_mutation()

    def _after_mutation(self) -> None:
        """Re-derive game end and let the coordinator decide who moves."""
        self._validator.clear_selection()
        session = self._session
        if session.is_game_over and not self._game_over_reported:
            self._game_over_reported = True
            _LOGGER.info("Game over: %s", session.status)
            self._emit_game_over(session.status)
        self._coordinator.evaluate()
        self._emit_phase()
        self._emit_surface_changed()

    def _trailing_oracle_san(self) -> str | None:
        session = self._session
        if not session.move_log:
            return None
        if session.mover_of(len(session.move_log) - 1) != session.oracle_side:
            return None
        return session.move_log[-1]

    def _report(self, error: SessionError) -> SessionError:
        self._notice = error
        _LOGGER.debug("Rejected: %s (%s)", error.kind, error)
        for cb in self.events.on_notice:
            cb(error)
        self._emit_surface_changed()
        return error

    def _emit_oracle_request(self, request: OracleRequest) -> None:
        for cb in self.events.on_oracle_request:
            cb(request)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._session)

    def _emit_game_over(self, status: GameStatus) -> None:
        for cb in self.events.on_game_over:
            cb(status)

    def _emit_phase(self) -> None:
        phase = self.phase
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_surface_changed(self) -> None:
        for cb in self.events.on_surface_changed:
            cb()
