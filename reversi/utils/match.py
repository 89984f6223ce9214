"""Utilities for playing matches between agents."""

from typing import List, Optional, Tuple, Union

from reversi.agents.base_agent import BaseAgent
from reversi.othello.state import Player
from reversi.othello.utils import OTHELLO_SIZE
from reversi.registry import make_game


def play_match(
    agent1: BaseAgent,
    agent2: BaseAgent,
    num_games: int = 10,
    board_size: int = OTHELLO_SIZE,
    alternate_colors: bool = True,
    collect_move_counts: bool = False,
    game_id: str = "othello",
) -> Union[Tuple[int, int, int], Tuple[int, int, int, List[int]]]:
    """
    Play a match between two agents.

    Args:
        agent1: First agent, plays Black in even-numbered games
        agent2: Second agent
        num_games: Number of games to play
        board_size: Board size passed to the game factory
        alternate_colors: If True, agents swap colors every game.
                          If False, agent1 always plays Black.
        collect_move_counts: If True, also return the number of moves of each game.
        game_id: Registered game to play

    Returns:
        Tuple of (agent1_wins, draws, agent2_wins). If ``collect_move_counts`` is True,
        also returns a list with the number of placed discs for every game played.
    """
    game = make_game(game_id, size=board_size)

    agent1_wins = 0
    draws = 0
    agent2_wins = 0
    move_counts: Optional[List[int]] = [] if collect_move_counts else None

    for game_idx in range(num_games):
        agent1_is_black = not (alternate_colors and game_idx % 2 == 1)
        black, white = (agent1, agent2) if agent1_is_black else (agent2, agent1)
        black.reset()
        white.reset()

        state = game.initial_state()
        moves = 0
        while not game.is_terminal(state):
            agent = black if state.current_player == Player.BLACK else white
            move = agent.act(game, state)
            if move is None:
                raise RuntimeError("Agent passed although a legal move exists")
            state = game.apply_action(state, (move.row, move.col))
            moves += 1

        winner = game.winner(state)
        if winner == 0:
            draws += 1
        elif (winner == Player.BLACK) == agent1_is_black:
            agent1_wins += 1
        else:
            agent2_wins += 1
        if move_counts is not None:
            move_counts.append(moves)

    if move_counts is not None:
        return agent1_wins, draws, agent2_wins, move_counts
    return agent1_wins, draws, agent2_wins
