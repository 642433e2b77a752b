"""Square type alias and coordinate helpers.

Board layout (row-major, Black at the top):
    row 0 = rank 8 (Black's back rank), row 7 = rank 1 (White's back rank)
    col 0 = file a, ..., col 7 = file h

    a8=(0, 0), b8=(0, 1), ..., h8=(0, 7)
    ...
    a1=(7, 0), b1=(7, 1), ..., h1=(7, 7)
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = tuple[int, int]  # (row, col), each 0–7

BOARD_SIZE = 8


def row_of(sq: Square) -> int:
    """Row index 0–7 (0 = rank 8)."""
    return sq[0]


def col_of(sq: Square) -> int:
    """Column index 0–7 (a–h)."""
    return sq[1]


def make_square(row: int, col: int) -> Square:
    """Create square from row (0–7) and column (0–7)."""
    return (row, col)


def in_bounds(row: int, col: int) -> bool:
    """Whether (row, col) lies on the board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_valid_square(sq: object) -> bool:
    """Check whether *sq* is a well-formed on-board square."""
    if not isinstance(sq, tuple) or len(sq) != 2:
        return False
    row, col = sq
    return isinstance(row, int) and isinstance(col, int) and in_bounds(row, col)


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (7, 4) → 'e1', (0, 0) → 'a8'."""
    return chr(ord("a") + col_of(sq)) + str(BOARD_SIZE - row_of(sq))


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → (4, 4)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a"))


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = ((0, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = ((1, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = ((2, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = ((3, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = ((4, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = ((5, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = ((6, c) for c in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = ((7, c) for c in range(8))
