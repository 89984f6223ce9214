"""Othello game rules (immutable state, for search algorithms and agents)."""

from __future__ import annotations

from typing import List, Optional

from reversi.games.turn_based_game import Action, TurnBasedGame
from .state import Move, OthelloState, Player
from .utils import (
    OTHELLO_SIZE,
    count_discs,
    has_legal_move,
    in_bounds,
    legal_moves,
    new_board,
    place_disc,
    validate_size,
)


class OthelloGame(TurnBasedGame[OthelloState]):
    """
    Pure Othello rules without a session: only state transitions.

    Passes are resolved inside :meth:`apply_action`: when the opponent has
    no legal move the mover keeps the turn, and when neither side can move
    the returned state is done.
    """

    def __init__(self, size: int = OTHELLO_SIZE) -> None:
        self.size = validate_size(size)

    def initial_state(self) -> OthelloState:
        return OthelloState(board=new_board(self.size), current_player=Player.BLACK)

    def legal_actions(self, state: OthelloState) -> List[Move]:
        if state.done:
            return []
        return legal_moves(state.board, state.current_player)

    def apply_action(self, state: OthelloState, action: Action) -> OthelloState:
        if state.done:
            raise ValueError("Cannot apply action in terminal state")

        row, col = action[0], action[1]
        if not in_bounds(self.size, row, col):
            raise ValueError(f"Illegal action: {action}")

        mover = state.current_player
        board = state.board.copy()
        place_disc(board, row, col, mover)

        next_player = mover.opponent
        done = False
        if not has_legal_move(board, next_player):
            if has_legal_move(board, mover):
                next_player = mover
            else:
                done = True

        return OthelloState(
            board=board,
            current_player=next_player,
            done=done,
            last_move=Move(row, col, mover),
        )

    def current_player(self, state: OthelloState) -> int:
        return int(state.current_player)

    def is_terminal(self, state: OthelloState) -> bool:
        return state.done

    def winner(self, state: OthelloState) -> Optional[int]:
        if not state.done:
            return None
        black, white = count_discs(state.board)
        if black > white:
            return int(Player.BLACK)
        if white > black:
            return int(Player.WHITE)
        return 0
