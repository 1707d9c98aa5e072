"""Tests for the Qt oracle bridge worker."""

from __future__ import annotations

from PyQt6.QtTest import QSignalSpy

from chesscompanion.core.position import Position
from chesscompanion.oracle.base import OracleError
from chesscompanion.oracle.qt_bridge import OracleWorker


class _ReplyOracle:
    def __init__(self, reply: str) -> None:
        self.reply = reply
        self.calls: list[tuple[str, int]] = []

    def suggest(self, position: Position, strength: int) -> str:
        self.calls.append((position.fen, strength))
        return self.reply


class _FailingOracle:
    def __init__(self, exc: Exception) -> None:
        self._exc = exc

    def suggest(self, _position: Position, _strength: int) -> str:
        raise self._exc


class TestOracleWorker:
    def test_emits_ready_with_request_id(self, qapp: object) -> None:
        oracle = _ReplyOracle(" e4\n")
        worker = OracleWorker(oracle)
        ready = QSignalSpy(worker.suggestion_ready)
        failed = QSignalSpy(worker.suggestion_failed)

        worker.request_move(Position.initial(), 7, 12)

        assert len(ready) == 1
        assert ready[0][0] == 7
        assert ready[0][1] == "e4"
        assert len(failed) == 0
        assert oracle.calls == [(Position.initial().fen, 12)]

    def test_oracle_error_emits_failure(self, qapp: object) -> None:
        worker = OracleWorker(_FailingOracle(OracleError("HTTP 500")))
        ready = QSignalSpy(worker.suggestion_ready)
        failed = QSignalSpy(worker.suggestion_failed)

        worker.request_move(Position.initial(), 3, 15)

        assert len(ready) == 0
        assert len(failed) == 1
        assert failed[0][0] == 3
        assert failed[0][1] == "HTTP 500"

    def test_unexpected_exception_emits_failure(self, qapp: object) -> None:
        worker = OracleWorker(_FailingOracle(KeyError("bestmove")))
        failed = QSignalSpy(worker.suggestion_failed)

        worker.request_move(Position.initial(), 4, 15)

        assert len(failed) == 1
        assert failed[0][0] == 4

    def test_blank_reply_is_failure(self, qapp: object) -> None:
        worker = OracleWorker(_ReplyOracle("   "))
        ready = QSignalSpy(worker.suggestion_ready)
        failed = QSignalSpy(worker.suggestion_failed)

        worker.request_move(Position.initial(), 5, 15)

        assert len(ready) == 0
        assert len(failed) == 1

    def test_invalid_position_rejected(self, qapp: object) -> None:
        oracle = _ReplyOracle("e4")
        worker = OracleWorker(oracle)
        failed = QSignalSpy(worker.suggestion_failed)

        worker.request_move("not a position", 6, 15)

        assert len(failed) == 1
        assert oracle.calls == []

    def test_set_oracle_swaps_backend(self, qapp: object) -> None:
        worker = OracleWorker(_ReplyOracle("e4"))
        ready = QSignalSpy(worker.suggestion_ready)

        worker.set_oracle(_ReplyOracle("d4"))
        worker.request_move(Position.initial(), 8, 15)

        assert ready[0][1] == "d4"
