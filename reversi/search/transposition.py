"""Transposition table for the minimax search.

Entries are keyed by the exact board content, the side to move and the
remaining depth, so a value computed with a shallow budget is never reused
for a deeper one. Each entry records whether the stored value is exact or
only a bound produced by an alpha-beta cutoff.

Usage:

    tt = TranspositionTable()
    entry = tt.get(board, side_to_move, depth)
    if entry is not None:
        print(entry.value, entry.flag)
    tt.store(board, side_to_move, depth, value=12, flag=EXACT)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np

EXACT = 0
LOWER_BOUND = 1  # fail-high: true value >= stored value
UPPER_BOUND = 2  # fail-low: true value <= stored value

Key = Tuple[bytes, int, int]


@dataclass
class TTEntry:
    value: int
    flag: int


class TranspositionTable:
    """Dictionary-backed cache with hit/miss counters."""

    def __init__(self) -> None:
        self._table: Dict[Key, TTEntry] = {}
        self.hits = 0
        self.misses = 0

    @staticmethod
    def key(board: np.ndarray, side_to_move: int, depth: int) -> Key:
        return board.tobytes(), int(side_to_move), depth

    def get(self, board: np.ndarray, side_to_move: int, depth: int) -> Optional[TTEntry]:
        entry = self._table.get(self.key(board, side_to_move, depth))
        if entry is None:
            self.misses += 1
        else:
            self.hits += 1
        return entry

    def store(self, board: np.ndarray, side_to_move: int, depth: int, value: int, flag: int) -> None:
        self._table[self.key(board, side_to_move, depth)] = TTEntry(value, flag)

    def clear(self) -> None:
        self._table.clear()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._table)
