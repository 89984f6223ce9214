from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np


class StateEvaluator(ABC):
    """
    Static evaluation of a board from the point of view of one player.
    """

    @abstractmethod
    def evaluate(self, board: np.ndarray, for_player: int) -> int:
        """
        Higher is better for ``for_player``.
        """
