"""xadrez — a small chess rules engine with a click-driven game layer."""

__version__ = "1.0.0"
