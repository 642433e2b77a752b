"""Shared engine models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from xadrez.core.board import Board
    from xadrez.core.enums import Color
    from xadrez.core.move import Move


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Move chosen by an engine and how many legal moves it chose from."""

    best_move: Move | None
    candidates: int


class IEngine(Protocol):
    """Protocol for move choosers used by the game layer."""

    def search(self, board: Board, color: Color) -> SearchResult: ...
