"""Tests for Rules: check, checkmate, promotion."""

from xadrez.core.board import Board
from xadrez.core.enums import Color, PieceType
from xadrez.core.move import Move
from xadrez.core.piece import Piece
from xadrez.core.rules import Rules
from xadrez.core.types import A8, E1, E7, E8, G1, G8, Square, parse_square

W = Color.WHITE
B = Color.BLACK


def _board(*placements: tuple[Square, Color, PieceType]) -> Board:
    board = Board()
    for sq, color, pt in placements:
        board[sq] = Piece(color, pt)
    return board


def _back_rank_mate() -> Board:
    # White R a8 checks black K g8 boxed in by its own f7/g7/h7 pawns.
    return _board(
        (G8, B, PieceType.KING),
        (parse_square("f7"), B, PieceType.PAWN),
        (parse_square("g7"), B, PieceType.PAWN),
        (parse_square("h7"), B, PieceType.PAWN),
        (A8, W, PieceType.ROOK),
        (G1, W, PieceType.KING),
    )


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        board = Board.initial()
        assert not Rules.is_in_check(board, W)
        assert not Rules.is_in_check(board, B)

    def test_back_rank_in_check(self) -> None:
        assert Rules.is_in_check(_back_rank_mate(), B)


class TestCheckmate:
    def test_back_rank_mate(self) -> None:
        board = _back_rank_mate()
        assert Rules.is_checkmate(board, B)
        assert Rules.legal_moves(board, B) == []

    def test_removing_attacker_lifts_mate(self) -> None:
        board = _back_rank_mate()
        board[A8] = None
        assert not Rules.is_checkmate(board, B)
        assert Rules.has_legal_move(board, B)

    def test_blocker_available_is_not_mate(self) -> None:
        board = _back_rank_mate()
        board[parse_square("c1")] = Piece(B, PieceType.ROOK)
        # The c1 rook can interpose on c8.
        assert not Rules.is_checkmate(board, B)
        assert Rules.legal_moves(board, B) == [Move(parse_square("c1"), parse_square("c8"))]

    def test_not_checkmate_when_can_escape(self) -> None:
        board = _board(
            (E1, W, PieceType.KING),
            (parse_square("a1"), B, PieceType.ROOK),
            (E8, B, PieceType.KING),
        )
        assert Rules.is_in_check(board, W)
        assert not Rules.is_checkmate(board, W)

    def test_stalemate_is_not_checkmate(self) -> None:
        board = _board(
            (parse_square("h8"), B, PieceType.KING),
            (parse_square("f7"), W, PieceType.KING),
            (parse_square("g6"), W, PieceType.QUEEN),
        )
        assert not Rules.has_legal_move(board, B)
        assert not Rules.is_checkmate(board, B)


class TestLegalMoves:
    def test_starting_position_has_twenty(self) -> None:
        moves = Rules.legal_moves(Board.initial(), W)
        assert len(moves) == 20
        assert Move(parse_square("g1"), parse_square("f3")) in moves

    def test_ordering_is_stable(self) -> None:
        board = Board.initial()
        assert Rules.legal_moves(board, B) == Rules.legal_moves(board, B)


class TestPromotion:
    def test_white_pawn_on_row_zero(self) -> None:
        assert Rules.is_promotion(Piece(W, PieceType.PAWN), E8)
        assert not Rules.is_promotion(Piece(W, PieceType.PAWN), E7)

    def test_black_pawn_on_row_seven(self) -> None:
        assert Rules.is_promotion(Piece(B, PieceType.PAWN), E1)
        assert not Rules.is_promotion(Piece(B, PieceType.PAWN), E8)

    def test_other_pieces_never_promote(self) -> None:
        assert not Rules.is_promotion(Piece(W, PieceType.ROOK), E8)
