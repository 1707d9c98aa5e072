"""Tests for HistoryNavigator — cursor-only traversal."""

from chesscompanion.core.enums import Color, Direction
from chesscompanion.core.move import Move
from chesscompanion.game.navigator import HistoryNavigator
from chesscompanion.game.session import SessionState


def _session_with_moves(*ucis: str) -> SessionState:
    session = SessionState()
    session.reset(Color.BLACK)
    for uci in ucis:
        session.apply_move(Move.from_uci(uci))
    return session


class TestNavigate:
    def test_back_and_forward(self) -> None:
        session = _session_with_moves("e2e4", "e7e5", "g1f3")
        nav = HistoryNavigator(session)
        assert nav.navigate(Direction.BACK)
        assert session.cursor == 2
        assert nav.position is session.history[2]
        assert nav.navigate(Direction.FORWARD)
        assert nav.is_at_live

    def test_round_trip_restores_display(self) -> None:
        session = _session_with_moves("e2e4", "e7e5", "g1f3", "b8c6")
        nav = HistoryNavigator(session)
        history = list(session.history)
        shown = nav.position
        for _ in range(3):
            nav.navigate(Direction.BACK)
        for _ in range(3):
            nav.navigate(Direction.FORWARD)
        assert session.cursor == 4
        assert nav.position is shown
        assert session.history == history

    def test_clamped_at_start(self) -> None:
        session = _session_with_moves("e2e4")
        nav = HistoryNavigator(session)
        nav.navigate(Direction.BACK)
        assert not nav.can_go_back
        assert not nav.navigate(Direction.BACK)
        assert session.cursor == 0

    def test_clamped_at_live(self) -> None:
        session = _session_with_moves("e2e4")
        nav = HistoryNavigator(session)
        assert not nav.can_go_forward
        assert not nav.navigate(Direction.FORWARD)
        assert session.cursor == 1

    def test_single_entry_history(self) -> None:
        session = SessionState()
        nav = HistoryNavigator(session)
        assert not nav.navigate(Direction.BACK)
        assert not nav.navigate(Direction.FORWARD)
        assert session.cursor == 0

    def test_live_position_unaffected(self) -> None:
        session = _session_with_moves("e2e4", "e7e5")
        live = session.live_position
        HistoryNavigator(session).navigate(Direction.BACK)
        assert session.live_position is live
        assert session.displayed_position is session.history[1]


class TestCounterText:
    def test_live_position(self) -> None:
        session = _session_with_moves("e2e4", "e7e5")
        assert HistoryNavigator(session).counter_text() == "Move 3 of 3"

    def test_follows_cursor(self) -> None:
        session = _session_with_moves("e2e4", "e7e5")
        nav = HistoryNavigator(session)
        nav.navigate(Direction.BACK)
        nav.navigate(Direction.BACK)
        assert nav.counter_text() == "Move 1 of 3"

    def test_custom_template(self) -> None:
        nav = HistoryNavigator(SessionState())
        assert nav.counter_text("{index}/{total}") == "1/1"
