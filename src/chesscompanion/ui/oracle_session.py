"""Oracle call orchestration for the owning (main) thread."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QThread, QTimer, pyqtSignal

from chesscompanion.game.controller import GameController
from chesscompanion.game.errors import SessionError
from chesscompanion.game.interfaces import OracleRequest
from chesscompanion.oracle.base import IMoveOracle
from chesscompanion.oracle.qt_bridge import OracleWorker

_LOGGER = logging.getLogger(__name__)


class _OracleCommandBus(QObject):
    """Signal bridge for issuing worker commands with queued delivery."""

    request_move = pyqtSignal(object, int, int)
    set_oracle_requested = pyqtSignal(object)


class OracleSession:
    """Owns the worker-thread lifecycle and hands oracle results to the controller.

    Requests issued by the turn coordinator are forwarded to an
    :class:`OracleWorker` living in a dedicated ``QThread``.  Results come
    back as queued signals and are passed to the controller on this thread,
    which is the only place session state changes.
    """

    _THREAD_STOP_TIMEOUT_MS = 2000

    __slots__ = (
        "__weakref__",
        "_controller",
        "_command_bus",
        "_notice_timer",
        "_notice_timeout_ms",
        "_thread",
        "_worker",
        "_is_shutting_down",
        "_is_started",
    )

    def __init__(
        self,
        *,
        controller: GameController,
        oracle: IMoveOracle,
        parent: QObject | None = None,
        notice_timeout_ms: int = 3000,
    ) -> None:
        self._controller = controller
        self._command_bus = _OracleCommandBus(parent)

        self._notice_timeout_ms = notice_timeout_ms
        self._notice_timer = QTimer(parent)
        self._notice_timer.setSingleShot(True)
        self._notice_timer.timeout.connect(self._on_notice_timeout)

        self._thread = QThread(parent)
        self._worker = OracleWorker(oracle)
        self._is_shutting_down = False
        self._is_started = False

    @property
    def is_started(self) -> bool:
        return self._is_started

    def setup(self) -> None:
        """Start the worker thread and subscribe to controller events."""
        if self._is_started:
            return
        self._is_shutting_down = False
        self._worker.moveToThread(self._thread)
        self._command_bus.request_move.connect(self._worker.request_move)
        self._command_bus.set_oracle_requested.connect(self._worker.set_oracle)
        self._worker.suggestion_ready.connect(self._on_suggestion_ready)
        self._worker.suggestion_failed.connect(self._on_suggestion_failed)

        events = self._controller.events
        events.on_oracle_request.append(self.request_move)
        events.on_notice.append(self._on_notice)

        self._thread.start()
        self._is_started = True
        _LOGGER.debug("Oracle worker thread started")

    def shutdown(self) -> None:
        """Detach from the controller and stop the worker thread.

        A call already running in the worker finishes on its own; its result
        is ignored.
        """
        if not self._is_started:
            return
        self._is_shutting_down = True
        self._notice_timer.stop()

        events = self._controller.events
        if self.request_move in events.on_oracle_request:
            events.on_oracle_request.remove(self.request_move)
        if self._on_notice in events.on_notice:
            events.on_notice.remove(self._on_notice)

        self._thread.quit()
        if not self._thread.wait(self._THREAD_STOP_TIMEOUT_MS):
            _LOGGER.warning("Oracle worker did not stop within %d ms", self._THREAD_STOP_TIMEOUT_MS)
        self._is_started = False

    def set_oracle(self, oracle: IMoveOracle) -> None:
        """Swap the oracle for subsequent requests."""
        if self._is_started:
            self._command_bus.set_oracle_requested.emit(oracle)
            return
        self._worker.set_oracle(oracle)

    def request_move(self, request: OracleRequest) -> None:
        """Forward *request* to the worker thread."""
        if not self._is_started or self._is_shutting_down:
            # Nobody will answer; release the coordinator instead of stalling.
            self._controller.on_oracle_error(request.request_id, "Oracle session is not running")
            return
        self._command_bus.request_move.emit(
            request.position, request.request_id, request.strength
        )

    # ── Worker callbacks ─────────────────────────────────────────────────

    def _on_suggestion_ready(self, request_id: int, text: str) -> None:
        if self._is_shutting_down:
            return
        self._controller.on_oracle_result(request_id, text)

    def _on_suggestion_failed(self, request_id: int, message: str) -> None:
        if self._is_shutting_down:
            return
        self._controller.on_oracle_error(request_id, message)

    def _on_notice(self, _error: SessionError) -> None:
        if self._notice_timeout_ms > 0:
            self._notice_timer.start(self._notice_timeout_ms)

    def _on_notice_timeout(self) -> None:
        self._controller.dismiss_notice()
