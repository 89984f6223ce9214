"""Othello cell values, moves and game state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple, Optional

import numpy as np

EMPTY = 0


class Player(IntEnum):
    BLACK = 1
    WHITE = -1

    @property
    def opponent(self) -> "Player":
        return Player(-self.value)

    @property
    def label(self) -> str:
        return self.name.capitalize()


class Move(NamedTuple):
    row: int
    col: int
    player: Player


@dataclass
class OthelloState:
    board: np.ndarray
    current_player: Player
    done: bool = False
    last_move: Optional[Move] = None

    def copy(self) -> "OthelloState":
        return OthelloState(
            board=self.board.copy(),
            current_player=self.current_player,
            done=self.done,
            last_move=self.last_move,
        )
