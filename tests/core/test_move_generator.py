"""Tests for pseudo-legal move generation."""

import pytest

from xadrez.core.board import Board
from xadrez.core.enums import Color, PieceType
from xadrez.core.move_generator import MoveGenerator
from xadrez.core.piece import Piece
from xadrez.core.types import (
    A1, A2, A3, A8, B1, B3, C3, D4, D5, D6, D7, E2, E3, E4, E5, E6, E8, F3,
    G1, H8, Square, make_square, parse_square,
)


def _targets(board: Board, sq: Square) -> set[Square]:
    return MoveGenerator(board).pseudo_legal_targets(sq)


def _sq(*names: str) -> set[Square]:
    return {parse_square(n) for n in names}


class TestPawn:
    def test_initial_white_pawn(self) -> None:
        board = Board.initial()
        assert _targets(board, E2) == {E3, E4}

    def test_initial_black_pawn(self) -> None:
        board = Board.initial()
        assert _targets(board, D7) == {D6, D5}

    def test_every_initial_pawn_has_only_advances(self) -> None:
        board = Board.initial()
        for col in range(8):
            assert _targets(board, make_square(6, col)) == {
                make_square(5, col),
                make_square(4, col),
            }
            assert _targets(board, make_square(1, col)) == {
                make_square(2, col),
                make_square(3, col),
            }

    def test_no_double_step_off_start_row(self) -> None:
        board = Board()
        board[E3] = Piece(Color.WHITE, PieceType.PAWN)
        assert _targets(board, E3) == {E4}

    def test_double_step_blocked_by_intermediate(self) -> None:
        board = Board()
        board[E2] = Piece(Color.WHITE, PieceType.PAWN)
        board[E3] = Piece(Color.BLACK, PieceType.KNIGHT)
        assert _targets(board, E2) == set()

    def test_double_step_blocked_on_destination(self) -> None:
        board = Board()
        board[E2] = Piece(Color.WHITE, PieceType.PAWN)
        board[E4] = Piece(Color.BLACK, PieceType.KNIGHT)
        assert _targets(board, E2) == {E3}

    def test_diagonal_capture_only_opponent(self) -> None:
        board = Board()
        board[E4] = Piece(Color.WHITE, PieceType.PAWN)
        board[D5] = Piece(Color.BLACK, PieceType.ROOK)
        board[parse_square("f5")] = Piece(Color.WHITE, PieceType.ROOK)
        assert _targets(board, E4) == {E5, D5}

    def test_black_pawn_captures_downwards(self) -> None:
        board = Board()
        board[E5] = Piece(Color.BLACK, PieceType.PAWN)
        board[D4] = Piece(Color.WHITE, PieceType.BISHOP)
        assert _targets(board, E5) == {E4, D4}

    def test_pawn_on_last_row_has_no_forward_move(self) -> None:
        board = Board()
        board[E8] = Piece(Color.WHITE, PieceType.PAWN)
        assert _targets(board, E8) == set()


class TestKnight:
    def test_initial_knight(self) -> None:
        board = Board.initial()
        assert _targets(board, G1) == _sq("f3", "h3")

    def test_center_knight_has_eight(self) -> None:
        board = Board()
        board[D4] = Piece(Color.WHITE, PieceType.KNIGHT)
        assert len(_targets(board, D4)) == 8

    @pytest.mark.parametrize(
        ("sq", "expected"),
        [(A1, 2), (B1, 3), (A3, 4), (C3, 8), (B3, 6), (H8, 2)],
    )
    def test_edge_counts(self, sq: Square, expected: int) -> None:
        board = Board()
        board[sq] = Piece(Color.BLACK, PieceType.KNIGHT)
        assert len(_targets(board, sq)) == expected

    def test_every_square_count_is_possible(self) -> None:
        total = 0
        for row in range(8):
            for col in range(8):
                board = Board()
                sq = make_square(row, col)
                board[sq] = Piece(Color.WHITE, PieceType.KNIGHT)
                count = len(_targets(board, sq))
                assert count in {2, 3, 4, 6, 8}
                total += count
        assert total == 336

    def test_own_piece_excluded_enemy_included(self) -> None:
        board = Board()
        board[D4] = Piece(Color.WHITE, PieceType.KNIGHT)
        board[E6] = Piece(Color.WHITE, PieceType.PAWN)
        board[F3] = Piece(Color.BLACK, PieceType.PAWN)
        targets = _targets(board, D4)
        assert E6 not in targets
        assert F3 in targets


class TestKing:
    def test_center_king(self) -> None:
        board = Board()
        board[D4] = Piece(Color.WHITE, PieceType.KING)
        assert len(_targets(board, D4)) == 8

    def test_corner_king(self) -> None:
        board = Board()
        board[A1] = Piece(Color.WHITE, PieceType.KING)
        assert _targets(board, A1) == _sq("a2", "b2", "b1")

    def test_initial_king_boxed_in(self) -> None:
        board = Board.initial()
        assert _targets(board, parse_square("e1")) == set()


class TestSliding:
    def test_rook_empty_board(self) -> None:
        board = Board()
        board[A1] = Piece(Color.WHITE, PieceType.ROOK)
        assert len(_targets(board, A1)) == 14

    def test_bishop_center(self) -> None:
        board = Board()
        board[D4] = Piece(Color.WHITE, PieceType.BISHOP)
        assert len(_targets(board, D4)) == 13

    def test_queen_center(self) -> None:
        board = Board()
        board[D4] = Piece(Color.WHITE, PieceType.QUEEN)
        assert len(_targets(board, D4)) == 27

    def test_ray_stops_before_own_piece(self) -> None:
        board = Board()
        board[A1] = Piece(Color.WHITE, PieceType.ROOK)
        board[A3] = Piece(Color.WHITE, PieceType.PAWN)
        targets = _targets(board, A1)
        assert A2 in targets
        assert A3 not in targets
        assert len(targets) == 8

    def test_ray_includes_capture_then_stops(self) -> None:
        board = Board()
        board[A1] = Piece(Color.WHITE, PieceType.ROOK)
        board[A3] = Piece(Color.BLACK, PieceType.PAWN)
        targets = _targets(board, A1)
        assert A3 in targets
        assert parse_square("a4") not in targets

    def test_initial_sliders_have_no_moves(self) -> None:
        board = Board.initial()
        for name in ("a1", "c1", "d1", "f1", "h1", "a8", "c8", "d8"):
            assert _targets(board, parse_square(name)) == set()

    def test_enemy_king_is_pseudo_legal_target(self) -> None:
        board = Board()
        board[A1] = Piece(Color.WHITE, PieceType.ROOK)
        board[A8] = Piece(Color.BLACK, PieceType.KING)
        assert A8 in _targets(board, A1)


class TestDispatch:
    def test_empty_square(self) -> None:
        assert _targets(Board.initial(), D4) == set()
