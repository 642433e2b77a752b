"""Pseudo-legal move generation.

Geometry only: targets may leave the mover's own king attacked and may
land on the enemy king. :mod:`xadrez.core.legality` prunes both.
"""

from __future__ import annotations

from typing import assert_never

from xadrez.core.board import Board
from xadrez.core.enums import Color, PieceType
from xadrez.core.types import BOARD_SIZE, Square, in_bounds, make_square

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# Row delta of a pawn step, and the row a pawn may double-step from.
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


# -- Precomputed lookup tables ---------------------------------------------

_ALL_SQUARES: tuple[Square, ...] = tuple(
    make_square(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)
)


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for row, col in _ALL_SQUARES:
        targets[(row, col)] = tuple(
            make_square(row + dr, col + dc)
            for dr, dc in offsets
            if in_bounds(row + dr, col + dc)
        )
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays_per_square: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for row, col in _ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for dr, dc in directions:
            r = row + dr
            c = col + dc
            ray: list[Square] = []
            while in_bounds(r, c):
                ray.append(make_square(r, c))
                r += dr
                c += dc
            square_rays.append(tuple(ray))
        rays_per_square[(row, col)] = tuple(square_rays)
    return rays_per_square


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)

BISHOP_RAYS = _build_rays(BISHOP_DIRS)
ROOK_RAYS = _build_rays(ROOK_DIRS)
QUEEN_RAYS = _build_rays(QUEEN_DIRS)


class MoveGenerator:
    """Generates pseudo-legal destination squares on a given :class:`Board`.

    The board is only read, never mutated.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def pseudo_legal_targets(self, sq: Square) -> set[Square]:
        """Destinations for the piece on *sq*; empty if the square is empty."""
        piece = self._board[sq]
        if piece is None:
            return set()

        color = piece.color
        match piece.piece_type:
            case PieceType.PAWN:
                return self._gen_pawn(sq, color)
            case PieceType.KNIGHT:
                return self._gen_stepper(KNIGHT_TARGETS[sq], color)
            case PieceType.BISHOP:
                return self._gen_sliding(BISHOP_RAYS[sq], color)
            case PieceType.ROOK:
                return self._gen_sliding(ROOK_RAYS[sq], color)
            case PieceType.QUEEN:
                return self._gen_sliding(QUEEN_RAYS[sq], color)
            case PieceType.KING:
                return self._gen_stepper(KING_TARGETS[sq], color)
            case _:
                assert_never(piece.piece_type)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color) -> set[Square]:
        board = self._board
        row, col = sq
        step = PAWN_DIRECTION[color]
        targets: set[Square] = set()

        one_row = row + step
        if in_bounds(one_row, col) and board.is_empty((one_row, col)):
            targets.add(make_square(one_row, col))
            two_row = row + 2 * step
            if (
                row == PAWN_START_ROW[color]
                and in_bounds(two_row, col)
                and board.is_empty((two_row, col))
            ):
                targets.add(make_square(two_row, col))

        for dc in (-1, 1):
            cap_col = col + dc
            if not in_bounds(one_row, cap_col):
                continue
            target = board[(one_row, cap_col)]
            if target is not None and target.color != color:
                targets.add(make_square(one_row, cap_col))
        return targets

    def _gen_stepper(
        self, candidates: tuple[Square, ...], color: Color
    ) -> set[Square]:
        board = self._board
        targets: set[Square] = set()
        for to_sq in candidates:
            target = board[to_sq]
            if target is None or target.color != color:
                targets.add(to_sq)
        return targets

    def _gen_sliding(
        self,
        rays: tuple[tuple[Square, ...], ...],
        color: Color,
    ) -> set[Square]:
        board = self._board
        targets: set[Square] = set()
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    targets.add(to_sq)
                    continue
                if target.color != color:
                    targets.add(to_sq)
                break
        return targets
