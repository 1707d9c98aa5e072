"""Tests for TurnCoordinator — oracle request lifecycle."""

import pytest

from chesscompanion.core.enums import Color
from chesscompanion.core.move import Move
from chesscompanion.core.position import Position
from chesscompanion.core.rules import ChessRules
from chesscompanion.core.types import E2, E4
from chesscompanion.game.coordinator import TurnCoordinator
from chesscompanion.game.errors import OracleFailure
from chesscompanion.game.interfaces import CoordinatorState, OracleRequest
from chesscompanion.game.session import SessionState


def _make(oracle_side: Color) -> tuple[SessionState, TurnCoordinator, list[OracleRequest]]:
    session = SessionState()
    session.reset(oracle_side)
    requests: list[OracleRequest] = []
    coordinator = TurnCoordinator(session, requests.append, strength=7)
    return session, coordinator, requests


class _WhiteAlwaysToMove(ChessRules):
    """Rules stub under which the oracle (white) moves twice in a row."""

    def turn_to_move(self, position: Position) -> Color:
        return Color.WHITE


class TestEvaluate:
    def test_requests_when_oracle_to_move(self) -> None:
        session, coordinator, requests = _make(Color.WHITE)
        assert coordinator.evaluate()
        assert coordinator.state == CoordinatorState.AWAITING_ORACLE
        assert len(requests) == 1
        assert requests[0].position is session.live_position
        assert requests[0].strength == 7

    def test_second_trigger_issues_nothing(self) -> None:
        _, coordinator, requests = _make(Color.WHITE)
        coordinator.evaluate()
        assert not coordinator.evaluate()
        assert len(requests) == 1

    def test_idle_when_manual_side_to_move(self) -> None:
        _, coordinator, requests = _make(Color.BLACK)
        assert not coordinator.evaluate()
        assert coordinator.state == CoordinatorState.IDLE
        assert requests == []

    def test_no_request_without_game(self) -> None:
        session = SessionState()
        coordinator = TurnCoordinator(session, lambda _r: pytest.fail("dispatched"))
        assert not coordinator.evaluate()

    def test_no_request_after_game_over(self) -> None:
        session, coordinator, requests = _make(Color.WHITE)
        for uci in ("f2f3", "e7e5", "g2g4", "d8h4"):
            session.apply_move(Move.from_uci(uci))
        assert session.side_to_move == Color.WHITE
        assert not coordinator.evaluate()
        assert requests == []

    def test_request_ids_increase(self) -> None:
        session, coordinator, requests = _make(Color.WHITE)
        coordinator.evaluate()
        coordinator.invalidate()
        coordinator.evaluate()
        assert [r.request_id for r in requests] == [1, 2]

    def test_dispatch_error_leaves_idle(self) -> None:
        session = SessionState()
        session.reset(Color.WHITE)

        def dispatch(_request: OracleRequest) -> None:
            raise RuntimeError("worker gone")

        coordinator = TurnCoordinator(session, dispatch)
        with pytest.raises(RuntimeError, match="worker gone"):
            coordinator.evaluate()
        assert coordinator.state == CoordinatorState.IDLE
        assert coordinator.pending is None


class TestResolve:
    def test_oracle_move_applied(self) -> None:
        session, coordinator, requests = _make(Color.WHITE)
        coordinator.evaluate()
        record = coordinator.resolve(requests[0].request_id, "e4")
        assert record is not None
        assert record.move == Move(E2, E4)
        assert len(session.history) == 2
        assert session.move_log == ["e4"]
        assert session.cursor == 1
        assert coordinator.state == CoordinatorState.IDLE

    def test_uci_reply_accepted(self) -> None:
        session, coordinator, requests = _make(Color.WHITE)
        coordinator.evaluate()
        coordinator.resolve(requests[0].request_id, "e2e4")
        assert session.move_log == ["e4"]

    def test_illegal_text_fails(self) -> None:
        session, coordinator, requests = _make(Color.WHITE)
        coordinator.evaluate()
        with pytest.raises(OracleFailure):
            coordinator.resolve(requests[0].request_id, "Qh5")
        assert coordinator.state == CoordinatorState.IDLE
        assert len(session.history) == 1
        assert session.side_to_move == Color.WHITE

    def test_failure_is_not_retried(self) -> None:
        _, coordinator, requests = _make(Color.WHITE)
        coordinator.evaluate()
        with pytest.raises(OracleFailure):
            coordinator.resolve(requests[0].request_id, "garbage")
        assert len(requests) == 1

    def test_unknown_request_id_is_stale(self) -> None:
        session, coordinator, requests = _make(Color.WHITE)
        coordinator.evaluate()
        assert coordinator.resolve(requests[0].request_id + 1, "e4") is None
        assert coordinator.is_awaiting
        assert len(session.history) == 1

    def test_invalidated_request_is_stale(self) -> None:
        session, coordinator, requests = _make(Color.WHITE)
        coordinator.evaluate()
        coordinator.invalidate()
        assert coordinator.resolve(requests[0].request_id, "e4") is None
        assert len(session.history) == 1

    def test_changed_position_is_stale(self) -> None:
        session, coordinator, requests = _make(Color.WHITE)
        coordinator.evaluate()
        session.reset(Color.WHITE)
        assert coordinator.resolve(requests[0].request_id, "e4") is None
        assert len(session.history) == 1
        assert coordinator.state == CoordinatorState.IDLE


class TestFail:
    def test_raises_oracle_failure(self) -> None:
        session, coordinator, requests = _make(Color.WHITE)
        coordinator.evaluate()
        with pytest.raises(OracleFailure, match="timeout"):
            coordinator.fail(requests[0].request_id, "timeout")
        assert coordinator.state == CoordinatorState.IDLE
        assert len(session.history) == 1

    def test_stale_failure_ignored(self) -> None:
        _, coordinator, requests = _make(Color.WHITE)
        coordinator.evaluate()
        coordinator.invalidate()
        coordinator.fail(requests[0].request_id, "late")
        assert coordinator.state == CoordinatorState.IDLE


class TestResolveDoesNotReEvaluate:
    def test_next_request_left_to_host(self) -> None:
        session = SessionState(rules=_WhiteAlwaysToMove())
        session.reset(Color.WHITE)
        requests: list[OracleRequest] = []
        coordinator = TurnCoordinator(session, requests.append)
        coordinator.evaluate()

        assert coordinator.resolve(requests[0].request_id, "e4") is not None
        assert len(requests) == 1
        assert coordinator.state == CoordinatorState.IDLE

        assert coordinator.evaluate()
        assert len(requests) == 2
        assert requests[1].position is session.live_position
