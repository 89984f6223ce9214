"""Search algorithms and the transposition table."""

from .minimax_policy import (
    DIFFICULTY_DEPTHS,
    MinimaxConfig,
    MinimaxPolicy,
    SearchResult,
    choose_depth,
)
from .transposition import TranspositionTable

__all__ = [
    "DIFFICULTY_DEPTHS",
    "MinimaxConfig",
    "MinimaxPolicy",
    "SearchResult",
    "TranspositionTable",
    "choose_depth",
]
