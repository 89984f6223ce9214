"""Agent backed by the minimax search policy."""

from __future__ import annotations

from typing import Optional

from reversi.games.turn_based_game import TurnBasedGame
from reversi.othello.state import Move, OthelloState
from reversi.search import MinimaxConfig, MinimaxPolicy, SearchResult
from .base_agent import BaseAgent


class MinimaxAgent(BaseAgent):
    """
    Plays the move chosen by :class:`MinimaxPolicy`.

    The policy is built lazily for the board size of the first state it
    sees and rebuilt if the size changes.
    """

    def __init__(
        self,
        depth: int = 2,
        difficulty: Optional[str] = None,
        dynamic_depth: bool = False,
    ) -> None:
        """
        Args:
            depth: Fixed search depth, ignored when ``difficulty`` is given
            difficulty: 'easy', 'medium' or 'hard'
            dynamic_depth: Pick the depth from how full the board is
        """
        if difficulty is not None:
            self.config = MinimaxConfig.for_difficulty(difficulty, dynamic_depth=dynamic_depth)
        else:
            if depth <= 0:
                raise ValueError("Minimax depth must be >= 1")
            self.config = MinimaxConfig(depth=depth, dynamic_depth=dynamic_depth)
        self._policy: Optional[MinimaxPolicy] = None
        self.last_result: Optional[SearchResult] = None

    def policy_for(self, size: int) -> MinimaxPolicy:
        if self._policy is None or self._policy.size != size:
            self._policy = MinimaxPolicy(size, config=self.config)
        return self._policy

    def act(self, game: TurnBasedGame[OthelloState], state: OthelloState) -> Optional[Move]:
        if game.is_terminal(state):
            return None
        policy = self.policy_for(state.board.shape[0])
        self.last_result = policy.search(state.board, state.current_player)
        return self.last_result.move

    def reset(self) -> None:
        if self._policy is not None:
            self._policy.reset()
        self.last_result = None
