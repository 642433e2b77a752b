"""Engine that plays a uniformly random legal move."""

from __future__ import annotations

import logging
import random

from xadrez.core.board import Board
from xadrez.core.enums import Color
from xadrez.core.rules import Rules
from xadrez.engine.search import SearchResult

_LOGGER = logging.getLogger(__name__)


class RandomEngine:
    """Picks among :meth:`Rules.legal_moves` with equal probability.

    Args:
        seed: Optional seed for a private RNG, for reproducible games.
    """

    __slots__ = ("_rng",)

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def search(self, board: Board, color: Color) -> SearchResult:
        moves = Rules.legal_moves(board, color)
        if not moves:
            _LOGGER.debug("No legal move for %s", color)
            return SearchResult(best_move=None, candidates=0)
        return SearchResult(best_move=self._rng.choice(moves), candidates=len(moves))
