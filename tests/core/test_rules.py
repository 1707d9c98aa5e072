"""Tests for ChessRules — the python-chess backed rules seam."""

import pytest

from chesscompanion.core.enums import Color, DrawReason, PieceType, StatusKind
from chesscompanion.core.move import Move
from chesscompanion.core.position import Position
from chesscompanion.core.rules import ChessRules, GameStatus, IllegalMoveError
from chesscompanion.core.types import E2, E3, E4, E5, E7, E8, G1, parse_square

STALEMATE_FEN = "7k/5Q2/6K1/8/8/8/8/8 b - - 0 1"
BARE_KINGS_FEN = "8/8/8/8/8/8/8/k6K w - - 0 1"
PROMOTION_FEN = "8/4P3/8/8/8/8/k7/4K3 w - - 0 1"
HALFMOVE_99_FEN = "4k3/8/8/8/8/8/8/R3K3 w - - 99 80"


def _play(rules: ChessRules, position: Position, *ucis: str) -> Position:
    for uci in ucis:
        position, _ = rules.apply(position, Move.from_uci(uci))
    return position


class TestLegalMoves:
    def test_twenty_moves_from_start(self) -> None:
        assert len(ChessRules().legal_moves(Position.initial())) == 20

    def test_filtered_by_origin(self) -> None:
        moves = ChessRules().legal_moves(Position.initial(), E2)
        assert {m.destination for m in moves} == {E3, E4}

    def test_knight_origin(self) -> None:
        moves = ChessRules().legal_moves(Position.initial(), G1)
        names = {str(m) for m in moves}
        assert names == {"g1f3", "g1h3"}

    def test_empty_origin_has_no_moves(self) -> None:
        assert ChessRules().legal_moves(Position.initial(), E4) == frozenset()

    def test_promotion_variants_listed(self) -> None:
        moves = ChessRules().legal_moves(Position.from_fen(PROMOTION_FEN), E7)
        promotions = {m.promotion for m in moves if m.destination == E8}
        assert promotions == {
            PieceType.QUEEN,
            PieceType.ROOK,
            PieceType.BISHOP,
            PieceType.KNIGHT,
        }


class TestApply:
    def test_returns_new_position_and_san(self) -> None:
        rules = ChessRules()
        start = Position.initial()
        after, san = rules.apply(start, Move(E2, E4))
        assert san == "e4"
        assert after is not start
        assert rules.turn_to_move(after) == Color.BLACK

    def test_original_position_untouched(self) -> None:
        rules = ChessRules()
        start = Position.initial()
        fen_before = start.fen
        rules.apply(start, Move(E2, E4))
        assert start.fen == fen_before

    def test_illegal_move_raises(self) -> None:
        with pytest.raises(IllegalMoveError):
            ChessRules().apply(Position.initial(), Move(E2, E5))

    def test_check_san_suffix(self) -> None:
        rules = ChessRules()
        position = _play(rules, Position.initial(), "e2e4", "f7f6")
        _, san = rules.apply(position, Move.from_uci("d1h5"))
        assert san == "Qh5+"


class TestStatus:
    def test_start_in_progress(self) -> None:
        status = ChessRules().status(Position.initial())
        assert status == GameStatus.in_progress()
        assert not status.is_over

    def test_fools_mate(self) -> None:
        rules = ChessRules()
        position = _play(rules, Position.initial(), "f2f3", "e7e5", "g2g4", "d8h4")
        status = rules.status(position)
        assert status.kind == StatusKind.CHECKMATE
        assert status.winner == Color.BLACK
        assert status.is_over
        assert rules.is_in_check(position)

    def test_stalemate(self) -> None:
        status = ChessRules().status(Position.from_fen(STALEMATE_FEN))
        assert status == GameStatus.draw(DrawReason.STALEMATE)

    def test_insufficient_material(self) -> None:
        status = ChessRules().status(Position.from_fen(BARE_KINGS_FEN))
        assert status.kind == StatusKind.DRAW
        assert status.draw_reason == DrawReason.INSUFFICIENT_MATERIAL

    def test_threefold_repetition_ends_game(self) -> None:
        rules = ChessRules()
        shuffle = ("g1f3", "g8f6", "f3g1", "f6g8")
        position = _play(rules, Position.initial(), *shuffle, *shuffle)
        status = rules.status(position)
        assert status.kind == StatusKind.DRAW
        assert status.draw_reason == DrawReason.REPETITION

    def test_repetition_one_move_away_is_not_a_draw(self) -> None:
        rules = ChessRules()
        shuffle = ("g1f3", "g8f6", "f3g1", "f6g8")
        position = _play(rules, Position.initial(), *shuffle, *shuffle[:3])
        assert rules.status(position) == GameStatus.in_progress()
        assert Move.from_uci("e7e5") in rules.legal_moves(position)

    def test_halfmove_clock_below_fifty_moves(self) -> None:
        status = ChessRules().status(Position.from_fen(HALFMOVE_99_FEN))
        assert status == GameStatus.in_progress()

    def test_fifty_move_rule(self) -> None:
        rules = ChessRules()
        position = _play(rules, Position.from_fen(HALFMOVE_99_FEN), "a1a2")
        status = rules.status(position)
        assert status.kind == StatusKind.DRAW
        assert status.draw_reason == DrawReason.OTHER


class TestParseMove:
    def test_san(self) -> None:
        assert ChessRules().parse_move(Position.initial(), "e4") == Move(E2, E4)

    def test_uci(self) -> None:
        assert ChessRules().parse_move(Position.initial(), "e2e4") == Move(E2, E4)

    def test_piece_san(self) -> None:
        move = ChessRules().parse_move(Position.initial(), "Nf3")
        assert move == Move(G1, parse_square("f3"))

    def test_surrounding_whitespace(self) -> None:
        assert ChessRules().parse_move(Position.initial(), "  e4\n") == Move(E2, E4)

    def test_promotion_uci(self) -> None:
        move = ChessRules().parse_move(Position.from_fen(PROMOTION_FEN), "e7e8q")
        assert move == Move(E7, E8, PieceType.QUEEN)

    @pytest.mark.parametrize("text", ["", "xyz", "e5", "e7e5", "0000", "Qh5"])
    def test_rejected(self, text: str) -> None:
        assert ChessRules().parse_move(Position.initial(), text) is None
