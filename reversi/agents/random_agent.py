"""Random agent implementation."""

from __future__ import annotations

from typing import Optional

import numpy as np

from reversi.games.turn_based_game import TurnBasedGame
from reversi.othello.state import Move, OthelloState
from .base_agent import BaseAgent


class RandomAgent(BaseAgent):
    """Agent that selects moves uniformly from the legal moves."""

    def __init__(self, seed: Optional[int] = None) -> None:
        """
        Initialize random agent.

        Args:
            seed: Random seed for reproducibility
        """
        self.rng = np.random.default_rng(seed)

    def act(self, game: TurnBasedGame[OthelloState], state: OthelloState) -> Optional[Move]:
        legal = list(game.legal_actions(state))
        if not legal:
            return None
        return legal[int(self.rng.integers(len(legal)))]
