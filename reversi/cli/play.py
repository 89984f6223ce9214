"""CLI for playing Othello: human vs human or human vs AI."""

import sys
from typing import Literal, Optional

import tyro

from reversi.config import GameConfig, load_config
from reversi.othello.utils import format_move, parse_move
from reversi.session import GameSession
from reversi.utils.metrics import MetricsLogger

HELP = "Enter a move such as d3, or: undo, restart [size], log, quit"


def _undo(session: GameSession) -> bool:
    """Undo one move; against the AI keep undoing until it is the human's turn."""
    if not session.undo():
        return False
    while session.is_ai_turn and session.can_undo:
        session.undo()
    return True


def _report_pass(session: GameSession) -> None:
    if session.last_pass is not None:
        print(f"No valid moves for {session.last_pass.label}, turn passes.")


def run(session: GameSession) -> None:
    """Interactive loop on stdin/stdout."""
    print(HELP)
    while True:
        print()
        print(session.render())

        if session.is_ai_turn:
            print("AI is thinking...")
            move = session.play_ai_move()
            if move is None:
                print("AI has no valid moves and passes its turn.")
            else:
                search = session.last_search
                print(f"AI plays {format_move(move.row, move.col)} "
                      f"(depth {search.depth}, {search.nodes} nodes, {search.elapsed:.2f}s)")
                _report_pass(session)
            continue

        try:
            command = input("> ").strip()
        except EOFError:
            print()
            return

        if not command:
            continue
        word, *args = command.lower().split()

        if word in ("quit", "exit", "q"):
            return
        if word == "undo":
            if not _undo(session):
                print("Nothing to undo.")
            continue
        if word == "restart":
            if args:
                try:
                    session.restart(int(args[0]))
                except ValueError as e:
                    print(f"Cannot restart: {e}")
                    continue
            else:
                session.restart()
            print(f"New game on a {session.size}x{session.size} board.")
            continue
        if word == "log":
            print("\n".join(session.move_log_lines()) or "No moves yet.")
            continue

        if session.game_over:
            print("The game is over. Use undo, restart or quit.")
            continue
        try:
            row, col = parse_move(word, session.size)
        except ValueError as e:
            print(f"{e}. {HELP}")
            continue
        if not session.apply_move(row, col):
            print("Invalid Move!")
            continue
        _report_pass(session)


def play(
    board_size: int = 8,
    opponent: Literal["human", "ai"] = "ai",
    difficulty: Literal["easy", "medium", "hard"] = "easy",
    human_color: Literal["black", "white"] = "black",
    dynamic_depth: bool = False,
    config: Optional[str] = None,
    metrics_dir: Optional[str] = None,
):
    """
    Play Othello in the terminal.

    Args:
        board_size: Even board size between 6 and 20
        opponent: 'human' for two players at one keyboard, 'ai' for the computer
        difficulty: AI search depth: easy=2, medium=4, hard=6
        human_color: Color of the human player against the AI; Black moves first
        dynamic_depth: Let the AI pick its depth from how full the board is
        config: YAML file with the same keys; overrides the options above
        metrics_dir: Directory for a CSV log of AI search statistics
    """
    try:
        if config is not None:
            game_config = load_config(config)
        else:
            game_config = GameConfig(
                board_size=board_size,
                opponent=opponent,
                difficulty=difficulty,
                human_color=human_color,
                dynamic_depth=dynamic_depth,
            ).validate()
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    print("=" * 50)
    print("Othello")
    print("=" * 50)
    if game_config.vs_ai:
        print(f"Difficulty: {game_config.difficulty}"
              f"{' (dynamic depth)' if game_config.dynamic_depth else ''}")
        print(f"You play: {game_config.human_color}")
    else:
        print("Two players, Black moves first")
    print("=" * 50)

    logger = MetricsLogger(log_dir=metrics_dir) if metrics_dir else None
    try:
        run(GameSession(game_config, metrics_logger=logger))
    finally:
        if logger is not None:
            logger.close()
            print(f"Search statistics written to {logger.csv_path}")


def main() -> None:
    tyro.cli(play)


if __name__ == "__main__":
    main()
