"""Move-choosing engines consuming the core's public move generation."""

from xadrez.engine.random_engine import RandomEngine
from xadrez.engine.search import IEngine, SearchResult

DefaultEngine: type[IEngine] = RandomEngine

__all__ = [
    "DefaultEngine",
    "IEngine",
    "RandomEngine",
    "SearchResult",
]
