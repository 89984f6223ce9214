"""Minimax search policy with alpha-beta pruning and a transposition table."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import numpy as np

from reversi.othello.eval import PositionWeightEvaluator, position_weights
from reversi.othello.state import EMPTY, Move, Player
from reversi.othello.utils import (
    format_move,
    has_legal_move,
    legal_moves,
    place_disc,
    validate_board,
)
from .transposition import EXACT, LOWER_BOUND, UPPER_BOUND, TranspositionTable

DIFFICULTY_DEPTHS = {"easy": 2, "medium": 4, "hard": 6}


@dataclass
class MinimaxConfig:
    depth: int = 2
    dynamic_depth: bool = False
    use_alpha_beta: bool = True
    use_transposition: bool = True

    @classmethod
    def for_difficulty(cls, difficulty: str, dynamic_depth: bool = False) -> "MinimaxConfig":
        if difficulty not in DIFFICULTY_DEPTHS:
            raise ValueError(
                f"Unknown difficulty '{difficulty}', expected one of {sorted(DIFFICULTY_DEPTHS)}"
            )
        return cls(depth=DIFFICULTY_DEPTHS[difficulty], dynamic_depth=dynamic_depth)


@dataclass
class SearchResult:
    move: Optional[Move]
    score: Optional[int]
    depth: int
    nodes: int
    cache_hits: int
    elapsed: float

    def as_metrics(self) -> Dict[str, Any]:
        return {
            "depth": self.depth,
            "score": self.score,
            "nodes": self.nodes,
            "cache_hits": self.cache_hits,
            "elapsed_s": round(self.elapsed, 6),
            "move": format_move(self.move.row, self.move.col) if self.move else "pass",
        }


def choose_depth(board: np.ndarray, configured_depth: int, dynamic: bool) -> int:
    """
    Search depth for a position.

    With ``dynamic`` off this is ``configured_depth``. With it on the depth
    follows the fill ratio of the board: below 25% -> 2, below 75% -> 4,
    otherwise 6.
    """
    if not dynamic:
        return configured_depth

    fill_ratio = np.count_nonzero(board != EMPTY) / board.size
    if fill_ratio < 0.25:
        return 2
    if fill_ratio < 0.75:
        return 4
    return 6


class MinimaxPolicy:
    """
    Depth-limited minimax over Othello boards.

    Scores are always from the root player's point of view; the root player
    maximizes. A side with no legal move passes implicitly: the search
    recurses one ply deeper with the other side to move, consuming a depth
    unit. The transposition table belongs to this policy and is cleared at
    the start of every :meth:`search`.
    """

    def __init__(
        self,
        size: int,
        config: Optional[MinimaxConfig] = None,
        evaluator: Optional[PositionWeightEvaluator] = None,
    ) -> None:
        self.size = size
        self.config = config or MinimaxConfig()
        self.evaluator = evaluator or PositionWeightEvaluator(size)
        self.weights = position_weights(size)
        self.tt = TranspositionTable()
        self.nodes = 0

    def reset(self) -> None:
        self.tt.clear()
        self.nodes = 0

    def best_move(self, board: np.ndarray, player: int) -> Optional[Move]:
        """Best move for ``player``, or None when it has to pass."""
        return self.search(board, player).move

    def search(self, board: np.ndarray, player: int) -> SearchResult:
        validate_board(board)
        if board.shape[0] != self.size:
            raise ValueError(f"Board size {board.shape[0]} does not match policy size {self.size}")

        depth = choose_depth(board, self.config.depth, self.config.dynamic_depth)
        if depth <= 0:
            raise ValueError("Minimax depth must be >= 1")

        player = Player(player)
        self.reset()
        start = time.perf_counter()

        candidates = self._order(legal_moves(board, player), descending=True)

        best_move: Optional[Move] = None
        best_score: Optional[int] = None
        alpha = -math.inf

        for move in candidates:
            child = board.copy()
            place_disc(child, move.row, move.col, player)
            score = self.minimax(child, depth - 1, False, alpha, math.inf, player)

            if best_score is None or score > best_score:
                best_score = score
                best_move = move

            if self.config.use_alpha_beta:
                alpha = max(alpha, best_score)

        return SearchResult(
            move=best_move,
            score=best_score,
            depth=depth,
            nodes=self.nodes,
            cache_hits=self.tt.hits,
            elapsed=time.perf_counter() - start,
        )

    def minimax(
        self,
        board: np.ndarray,
        depth: int,
        maximizing: bool,
        alpha: float,
        beta: float,
        root_player: int,
    ) -> int:
        self.nodes += 1
        mover = root_player if maximizing else -root_player
        # table values are stored from the mover's point of view
        sign = 1 if maximizing else -1
        alpha_orig, beta_orig = alpha, beta

        if self.config.use_transposition:
            entry = self.tt.get(board, mover, depth)
            if entry is not None:
                value = entry.value * sign
                flag = entry.flag if sign > 0 else _swap_bound(entry.flag)
                if flag == EXACT:
                    return value
                if flag == LOWER_BOUND:
                    alpha = max(alpha, value)
                elif flag == UPPER_BOUND:
                    beta = min(beta, value)
                if alpha >= beta:
                    return value

        if depth == 0:
            value = self.evaluator.evaluate(board, root_player)
            self._store(board, mover, depth, value, EXACT, sign)
            return value

        moves = legal_moves(board, mover)
        if not moves:
            if not has_legal_move(board, -mover):
                value = self.evaluator.evaluate(board, root_player)
                self._store(board, mover, depth, value, EXACT, sign)
                return value
            value = self.minimax(board, depth - 1, not maximizing, alpha, beta, root_player)
        elif maximizing:
            value = -math.inf
            for move in self._order(moves, descending=True):
                child = board.copy()
                place_disc(child, move.row, move.col, mover)
                child_value = self.minimax(child, depth - 1, False, alpha, beta, root_player)
                value = max(value, child_value)
                if self.config.use_alpha_beta:
                    alpha = max(alpha, child_value)
                    if beta <= alpha:
                        break
        else:
            value = math.inf
            for move in self._order(moves, descending=False):
                child = board.copy()
                place_disc(child, move.row, move.col, mover)
                child_value = self.minimax(child, depth - 1, True, alpha, beta, root_player)
                value = min(value, child_value)
                if self.config.use_alpha_beta:
                    beta = min(beta, child_value)
                    if beta <= alpha:
                        break

        if value <= alpha_orig:
            flag = UPPER_BOUND
        elif value >= beta_orig:
            flag = LOWER_BOUND
        else:
            flag = EXACT
        self._store(board, mover, depth, value, flag, sign)
        return value

    def _store(self, board: np.ndarray, mover: int, depth: int, value: int, flag: int, sign: int) -> None:
        if not self.config.use_transposition:
            return
        if sign < 0:
            flag = _swap_bound(flag)
        self.tt.store(board, mover, depth, value * sign, flag)

    def _order(self, moves: List[Move], descending: bool) -> List[Move]:
        # stable: equal weights keep row-major order
        weights = self.weights
        if descending:
            return sorted(moves, key=lambda m: -weights[m.row, m.col])
        return sorted(moves, key=lambda m: weights[m.row, m.col])


def _swap_bound(flag: int) -> int:
    if flag == LOWER_BOUND:
        return UPPER_BOUND
    if flag == UPPER_BOUND:
        return LOWER_BOUND
    return flag
