"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from xadrez.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable (from, to) pair.

    Promotion is not stored here; it is inferred when the move is applied.
    """

    from_sq: Square
    to_sq: Square

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
