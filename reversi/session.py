"""Authoritative game session: board, turn order, history and undo."""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional, Tuple

import numpy as np

from reversi.config import GameConfig
from reversi.othello.game import OthelloGame
from reversi.othello.state import Move, OthelloState, Player
from reversi.othello.utils import (
    count_discs,
    format_move,
    in_bounds,
    is_valid_move,
    legal_moves,
    render_board,
    validate_size,
)
from reversi.search import MinimaxPolicy, SearchResult
from reversi.utils.metrics import MetricsLogger


class GameSession:
    """
    One game of Othello as seen by a front end.

    The session owns the current state, the game record used for undo (one
    snapshot per applied move plus the initial one) and the move log. When
    the opponent is the AI it also owns the search policy and with it the
    transposition table. Passes are applied automatically after every move.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        metrics_logger: Optional[MetricsLogger] = None,
    ) -> None:
        self.config = (config or GameConfig()).validate()
        self.metrics_logger = metrics_logger
        self._start()

    def _start(self) -> None:
        self.game = OthelloGame(self.config.board_size)
        self._state = self.game.initial_state()
        self._record: List[OthelloState] = [self._state.copy()]
        self._move_log: List[Move] = []
        self.last_pass: Optional[Player] = None
        self.last_search: Optional[SearchResult] = None
        self.engine: Optional[MinimaxPolicy] = None
        if self.config.vs_ai:
            self.engine = MinimaxPolicy(self.config.board_size, config=self.config.search_config())

    # ------------------------------------------------------------------ #
    # Read-only view
    # ------------------------------------------------------------------ #
    @property
    def size(self) -> int:
        return self.config.board_size

    @property
    def board(self) -> np.ndarray:
        return self._state.board.copy()

    @property
    def state(self) -> OthelloState:
        return self._state.copy()

    @property
    def current_player(self) -> Player:
        return self._state.current_player

    @property
    def last_move(self) -> Optional[Move]:
        return self._state.last_move

    @property
    def game_over(self) -> bool:
        return self._state.done

    @property
    def counts(self) -> Tuple[int, int]:
        return count_discs(self._state.board)

    @property
    def move_log(self) -> Tuple[Move, ...]:
        return tuple(self._move_log)

    @property
    def winner(self) -> Optional[int]:
        return self.game.winner(self._state)

    @property
    def can_undo(self) -> bool:
        return len(self._record) > 1

    @property
    def is_ai_turn(self) -> bool:
        return self.config.vs_ai and not self.game_over and self.current_player == self.config.ai_player

    def legal_moves(self) -> List[Move]:
        if self.game_over:
            return []
        return legal_moves(self._state.board, self.current_player)

    # ------------------------------------------------------------------ #
    # Transitions
    # ------------------------------------------------------------------ #
    def apply_move(self, row: int, col: int) -> bool:
        """
        Play (row, col) for the player to move.

        Returns:
            False, with the state untouched, if the game is over, the
            coordinate is off the board or the move flips nothing.
        """
        if self.game_over or not in_bounds(self.size, row, col):
            return False

        mover = self.current_player
        if not is_valid_move(self._state.board, row, col, mover):
            return False

        self._state = self.game.apply_action(self._state, (row, col))
        self._record.append(self._state.copy())
        self._move_log.append(Move(row, col, mover))

        passed = not self._state.done and self._state.current_player == mover
        self.last_pass = mover.opponent if passed else None
        return True

    def undo(self) -> bool:
        """Step back one move. Returns False when there is nothing to undo."""
        if not self.can_undo:
            return False
        self._record.pop()
        self._state = self._record[-1].copy()
        if self._move_log:
            self._move_log.pop()
        self.last_pass = None
        return True

    def restart(self, board_size: Optional[int] = None) -> None:
        """Start a new game, optionally on a board of a different size."""
        if board_size is not None:
            validate_size(board_size)
            self.config = replace(self.config, board_size=board_size)
        self._start()

    def play_ai_move(self) -> Optional[Move]:
        """
        Let the search choose and play the AI's move.

        Returns:
            The move played, or None if the AI had to pass.
        """
        if self.engine is None:
            raise RuntimeError("play_ai_move() requires a session against the AI")
        if not self.is_ai_turn:
            raise RuntimeError("play_ai_move() called when it is not the AI's turn")

        result = self.engine.search(self._state.board.copy(), self.config.ai_player)
        self.last_search = result
        if self.metrics_logger is not None:
            self.metrics_logger.log_dict(result.as_metrics())
            self.metrics_logger.increment_step()

        if result.move is None:
            return None
        if not self.apply_move(result.move.row, result.move.col):
            raise RuntimeError(f"Search returned an illegal move: {result.move}")
        return result.move

    # ------------------------------------------------------------------ #
    # Text rendering
    # ------------------------------------------------------------------ #
    def status_line(self) -> str:
        black, white = self.counts
        if self.game_over:
            winner = self.winner
            if winner == Player.BLACK:
                text = "Black"
            elif winner == Player.WHITE:
                text = "White"
            else:
                text = "Tie"
            return f"Game Over! Winner: {text} (Black: {black}, White: {white})"
        return f"Current Player: {self.current_player.label} | Black: {black}, White: {white}"

    def move_log_lines(self) -> List[str]:
        return [f"{m.player.label}: {format_move(m.row, m.col)}" for m in self._move_log]

    def render(self) -> str:
        highlights = [(m.row, m.col) for m in self.legal_moves()]
        return render_board(self._state.board, highlights, self.last_move) + "\n" + self.status_line()
