"""Othello evaluation functions for search algorithms."""

from __future__ import annotations

from functools import lru_cache

import numpy as np

from reversi.games.state_evaluator import StateEvaluator
from .utils import validate_size

CORNER_WEIGHT = 120
X_SQUARE_WEIGHT = -20
EDGE_WEIGHT = 20
INTERIOR_WEIGHT = 1


@lru_cache(maxsize=None)
def _weights(size: int) -> np.ndarray:
    last = size - 1
    weights = np.full((size, size), INTERIOR_WEIGHT, dtype=np.int32)

    weights[0, :] = EDGE_WEIGHT
    weights[last, :] = EDGE_WEIGHT
    weights[:, 0] = EDGE_WEIGHT
    weights[:, last] = EDGE_WEIGHT

    for r in (1, last - 1):
        for c in (1, last - 1):
            weights[r, c] = X_SQUARE_WEIGHT

    for r in (0, last):
        for c in (0, last):
            weights[r, c] = CORNER_WEIGHT

    weights.setflags(write=False)
    return weights


def position_weights(size: int) -> np.ndarray:
    """
    Static weight matrix for a board size.

    Corners 120, the cells diagonally adjacent to corners -20, other edge
    cells 20, interior 1. The returned array is read-only and shared
    between callers for the same size.
    """
    return _weights(validate_size(size))


class PositionWeightEvaluator(StateEvaluator):
    """Sum of weights under the player's discs minus the opponent's."""

    def __init__(self, size: int) -> None:
        self.size = size
        self.weights = position_weights(size)

    def evaluate(self, board: np.ndarray, for_player: int) -> int:
        if board.shape != self.weights.shape:
            raise ValueError(
                f"Board shape {board.shape} does not match evaluator size {self.size}"
            )
        own = int(self.weights[board == for_player].sum())
        opp = int(self.weights[board == -for_player].sum())
        return own - opp

    def weight(self, row: int, col: int) -> int:
        return int(self.weights[row, col])
