from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, Sequence, Tuple, TypeVar

S = TypeVar("S")  # state type
Action = Tuple[int, int]  # (row, col) of the placed disc


class TurnBasedGame(ABC, Generic[S]):
    """
    Common interface for a deterministic two-player perfect-information game.
    Rules only: no rendering, no input handling.
    """

    @abstractmethod
    def initial_state(self) -> S:
        """State at the start of a game."""

    @abstractmethod
    def legal_actions(self, state: S) -> Sequence[Action]:
        """All actions available to the player to move."""

    @abstractmethod
    def apply_action(self, state: S, action: Action) -> S:
        """Return the new state after the move."""

    @abstractmethod
    def current_player(self, state: S) -> int:
        """
        Token of the player to move: 1 for the first player, -1 for the second.
        """

    @abstractmethod
    def is_terminal(self, state: S) -> bool:
        """Whether the game has ended."""

    @abstractmethod
    def winner(self, state: S) -> Optional[int]:
        """
        Who won:

        * 1  - the player with token +1
        * -1 - the player with token -1
        * 0  - draw
        * None - not finished yet
        """
