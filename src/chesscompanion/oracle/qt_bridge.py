"""Qt bridge to run oracle calls in a worker thread."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chesscompanion.core.position import Position
from chesscompanion.oracle.base import IMoveOracle, OracleError

_LOGGER = logging.getLogger(__name__)


class OracleWorker(QObject):
    """Thread-affine worker that asks the oracle for moves on demand.

    Results carry the request id they answer; matching them against the
    live game is the receiver's job.
    """

    suggestion_ready = pyqtSignal(int, str)
    suggestion_failed = pyqtSignal(int, str)

    __slots__ = ("_oracle",)

    def __init__(self, oracle: IMoveOracle) -> None:
        super().__init__()
        self._oracle = oracle

    @pyqtSlot(object, int, int)
    def request_move(self, position_obj: object, request_id: int, strength: int) -> None:
        """Ask the oracle about *position_obj* and emit the outcome."""
        if not isinstance(position_obj, Position):
            self.suggestion_failed.emit(request_id, "Oracle received invalid position")
            return

        try:
            text = self._oracle.suggest(position_obj, strength)
        except OracleError as exc:
            self.suggestion_failed.emit(request_id, str(exc))
            return
        except Exception as exc:
            _LOGGER.exception("Oracle crashed on request %d", request_id)
            self.suggestion_failed.emit(request_id, str(exc) or type(exc).__name__)
            return

        if not text or not text.strip():
            self.suggestion_failed.emit(request_id, "Oracle returned no move")
            return
        self.suggestion_ready.emit(request_id, text.strip())

    @pyqtSlot(object)
    def set_oracle(self, oracle: object) -> None:
        """Swap the oracle (takes effect on the next request)."""
        self._oracle = oracle  # type: ignore[assignment]
