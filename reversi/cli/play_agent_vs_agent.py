"""CLI for playing agent vs agent."""

from typing import Literal

import tyro

import reversi.agents  # noqa: F401  registers the built-in agents
from reversi.registry import configure_agent
from reversi.utils.match import play_match

AgentType = Literal["random", "minimax"]


def play_agent_vs_agent(
    agent1_type: AgentType = "minimax",
    agent2_type: AgentType = "random",
    agent1_depth: int = 2,
    agent2_depth: int = 2,
    dynamic_depth: bool = False,
    num_games: int = 4,
    board_size: int = 8,
    seed: int = 42,
):
    """
    Play agent vs agent games and print the result.

    Args:
        agent1_type: Type of agent1 ('random' or 'minimax')
        agent2_type: Type of agent2 ('random' or 'minimax')
        agent1_depth: Search depth of agent1 if it is a minimax agent
        agent2_depth: Search depth of agent2 if it is a minimax agent
        dynamic_depth: Minimax agents pick their depth from the fill ratio
        num_games: Number of games; colors alternate every game
        board_size: Even board size between 6 and 20
        seed: Random seed
    """
    agent1 = configure_agent(agent1_type, depth=agent1_depth, dynamic_depth=dynamic_depth, seed=seed)
    agent2 = configure_agent(agent2_type, depth=agent2_depth, dynamic_depth=dynamic_depth, seed=seed + 1)

    wins1, draws, wins2, lengths = play_match(
        agent1,
        agent2,
        num_games=num_games,
        board_size=board_size,
        collect_move_counts=True,
    )

    print("=" * 50)
    print(f"{agent1_type} (agent1) vs {agent2_type} (agent2), {num_games} games on {board_size}x{board_size}")
    print("=" * 50)
    print(f"Agent1 wins: {wins1}")
    print(f"Draws:       {draws}")
    print(f"Agent2 wins: {wins2}")
    if lengths:
        print(f"Average moves per game: {sum(lengths) / len(lengths):.1f}")


def main() -> None:
    tyro.cli(play_agent_vs_agent)


if __name__ == "__main__":
    main()
