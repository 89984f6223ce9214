"""Base agent interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from reversi.games.turn_based_game import TurnBasedGame
from reversi.othello.state import Move, OthelloState


class BaseAgent(ABC):
    """Base class for all agents."""

    @abstractmethod
    def act(self, game: TurnBasedGame[OthelloState], state: OthelloState) -> Optional[Move]:
        """Return a move for the player to move in ``state``, or None to pass."""

    def reset(self) -> None:
        """Forget per-game state before a new game starts."""
