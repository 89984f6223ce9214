"""Tests for the evaluator, depth selection and minimax search."""

import math

import numpy as np
import pytest

from reversi.agents import RandomAgent
from reversi.othello import (
    OthelloGame,
    Player,
    PositionWeightEvaluator,
    is_terminal,
    legal_moves,
    new_board,
    place_disc,
    position_weights,
)
from reversi.search import MinimaxConfig, MinimaxPolicy, TranspositionTable, choose_depth
from reversi.search.transposition import EXACT, LOWER_BOUND

BLACK, WHITE = Player.BLACK, Player.WHITE


def _brute_force(evaluator, board, depth, maximizing, root):
    """Plain minimax without pruning or caching."""
    mover = root if maximizing else -root
    if depth == 0 or is_terminal(board):
        return evaluator.evaluate(board, root)
    moves = legal_moves(board, mover)
    if not moves:
        return _brute_force(evaluator, board, depth - 1, not maximizing, root)
    values = []
    for move in moves:
        child = board.copy()
        place_disc(child, move.row, move.col, mover)
        values.append(_brute_force(evaluator, child, depth - 1, not maximizing, root))
    return max(values) if maximizing else min(values)


def _positions(size=6, plies=(0, 3, 6, 10, 16), seed=7):
    """Boards reached after a number of random plies, with the side to move."""
    game = OthelloGame(size)
    agent = RandomAgent(seed=seed)
    positions = []
    for n in plies:
        state = game.initial_state()
        for _ in range(n):
            if game.is_terminal(state):
                break
            move = agent.act(game, state)
            state = game.apply_action(state, (move.row, move.col))
        positions.append((state.board, state.current_player))
    return positions


def _fill(size, count):
    board = np.zeros((size, size), dtype=np.int8)
    board.flat[:count] = 1
    return board


def test_position_weights_8x8():
    weights = position_weights(8)
    assert weights.shape == (8, 8)
    for r, c in [(0, 0), (0, 7), (7, 0), (7, 7)]:
        assert weights[r, c] == 120
    for r, c in [(1, 1), (1, 6), (6, 1), (6, 6)]:
        assert weights[r, c] == -20
    assert weights[0, 1] == 20
    assert weights[3, 0] == 20
    assert weights[7, 4] == 20
    assert weights[3, 3] == 1
    assert weights[1, 2] == 1
    assert not weights.flags.writeable


def test_position_weights_are_symmetric_for_every_size():
    for size in range(6, 21, 2):
        weights = position_weights(size)
        assert np.array_equal(weights, weights.T)
        assert np.array_equal(weights, weights[::-1, ::-1])


def test_evaluate_initial_board_is_zero():
    evaluator = PositionWeightEvaluator(8)
    assert evaluator.evaluate(new_board(8), BLACK) == 0


def test_evaluate_is_antisymmetric():
    evaluator = PositionWeightEvaluator(6)
    for board, _ in _positions():
        assert evaluator.evaluate(board, BLACK) == -evaluator.evaluate(board, WHITE)


def test_evaluate_counts_weights():
    evaluator = PositionWeightEvaluator(6)
    board = np.zeros((6, 6), dtype=np.int8)
    board[0, 0] = BLACK
    board[1, 1] = WHITE
    board[2, 2] = WHITE
    assert evaluator.evaluate(board, BLACK) == 120 - (-20 + 1)


def test_choose_depth_static():
    board = _fill(8, 60)
    for depth in (2, 4, 6):
        assert choose_depth(board, depth, dynamic=False) == depth


@pytest.mark.parametrize(
    "count, expected",
    [(4, 2), (15, 2), (16, 4), (40, 4), (47, 4), (48, 6), (64, 6)],
)
def test_choose_depth_dynamic_thresholds(count, expected):
    assert choose_depth(_fill(8, count), 2, dynamic=True) == expected


def test_difficulty_depths():
    assert MinimaxConfig.for_difficulty("easy").depth == 2
    assert MinimaxConfig.for_difficulty("medium").depth == 4
    assert MinimaxConfig.for_difficulty("hard", dynamic_depth=True).dynamic_depth
    with pytest.raises(ValueError):
        MinimaxConfig.for_difficulty("impossible")


@pytest.mark.parametrize("depth", [1, 2, 3])
def test_alpha_beta_matches_brute_force(depth):
    for board, player in _positions():
        evaluator = PositionWeightEvaluator(6)
        expected = _brute_force(evaluator, board, depth, True, player)

        for use_alpha_beta in (True, False):
            for use_transposition in (True, False):
                policy = MinimaxPolicy(
                    6,
                    config=MinimaxConfig(
                        depth=depth,
                        use_alpha_beta=use_alpha_beta,
                        use_transposition=use_transposition,
                    ),
                )
                value = policy.minimax(board, depth, True, -math.inf, math.inf, player)
                assert value == expected


@pytest.mark.parametrize("depth", [1, 2, 3])
def test_search_score_matches_brute_force(depth):
    evaluator = PositionWeightEvaluator(6)
    policy = MinimaxPolicy(6, config=MinimaxConfig(depth=depth))
    for board, player in _positions():
        moves = legal_moves(board, player)
        if not moves:
            continue
        scores = {}
        for move in moves:
            child = board.copy()
            place_disc(child, move.row, move.col, player)
            scores[move] = _brute_force(evaluator, child, depth - 1, False, player)

        result = policy.search(board, player)
        assert result.score == max(scores.values())
        assert scores[result.move] == result.score


def test_best_move_is_always_legal():
    policy = MinimaxPolicy(6, config=MinimaxConfig(depth=2))
    for board, player in _positions(plies=range(0, 20, 2), seed=11):
        move = policy.best_move(board, player)
        legal = legal_moves(board, player)
        if legal:
            assert move in legal
        else:
            assert move is None


def test_best_move_returns_none_without_legal_moves():
    board = np.zeros((6, 6), dtype=np.int8)
    board[0, 0] = BLACK
    board[0, 1] = WHITE
    policy = MinimaxPolicy(6)
    result = policy.search(board, WHITE)
    assert result.move is None
    assert result.score is None


def test_tie_break_prefers_first_in_weight_order():
    # all four openings score the same at depth 1; row-major order decides
    policy = MinimaxPolicy(8, config=MinimaxConfig(depth=1))
    move = policy.best_move(new_board(8), BLACK)
    assert (move.row, move.col) == (2, 3)


def test_prefers_corner_capture():
    board = np.zeros((6, 6), dtype=np.int8)
    board[0, 1] = WHITE
    board[0, 2] = BLACK
    board[3, 3] = WHITE
    board[3, 4] = BLACK
    policy = MinimaxPolicy(6, config=MinimaxConfig(depth=1))
    move = policy.best_move(board, BLACK)
    assert (move.row, move.col) == (0, 0)


def test_pass_consumes_one_depth_unit():
    # Black to move cannot play, White can: depth 1 ends right after the pass
    board = np.zeros((6, 6), dtype=np.int8)
    board[0, 0] = WHITE
    board[0, 1] = BLACK
    evaluator = PositionWeightEvaluator(6)
    policy = MinimaxPolicy(6, config=MinimaxConfig(depth=1))

    assert not legal_moves(board, BLACK)
    value = policy.minimax(board, 1, True, -math.inf, math.inf, BLACK)
    assert value == evaluator.evaluate(board, BLACK)
    assert value == _brute_force(evaluator, board, 1, True, BLACK)


def test_double_pass_stops_search():
    board = np.zeros((6, 6), dtype=np.int8)
    board[2, 2] = BLACK
    board[4, 4] = WHITE
    evaluator = PositionWeightEvaluator(6)
    policy = MinimaxPolicy(6, config=MinimaxConfig(depth=4))

    for depth in (0, 1, 4):
        policy.reset()
        value = policy.minimax(board, depth, True, -math.inf, math.inf, BLACK)
        assert value == evaluator.evaluate(board, BLACK)
    assert policy.nodes == 1


def test_search_clears_transposition_table():
    policy = MinimaxPolicy(6, config=MinimaxConfig(depth=3))
    board, player = _positions(plies=(4,))[0]

    first = policy.search(board, player)
    assert len(policy.tt) > 0
    second = policy.search(board, player)

    assert first.move == second.move
    assert first.score == second.score
    assert first.nodes == second.nodes


def test_no_caching_when_disabled():
    policy = MinimaxPolicy(6, config=MinimaxConfig(depth=2, use_transposition=False))
    policy.search(new_board(6), BLACK)
    assert len(policy.tt) == 0


def test_dynamic_depth_is_reported():
    policy = MinimaxPolicy(6, config=MinimaxConfig(depth=6, dynamic_depth=True))
    result = policy.search(new_board(6), BLACK)
    assert result.depth == 2
    assert result.nodes > 0
    assert result.as_metrics()["move"] == "C2"


def test_transposition_keys_include_depth_and_side():
    tt = TranspositionTable()
    board = new_board(6)
    tt.store(board, BLACK, 2, value=5, flag=EXACT)

    assert tt.get(board, BLACK, 2).value == 5
    assert tt.get(board, BLACK, 3) is None
    assert tt.get(board, WHITE, 2) is None
    assert tt.hits == 1
    assert tt.misses == 2

    tt.store(board, BLACK, 2, value=7, flag=LOWER_BOUND)
    assert tt.get(board, BLACK, 2).flag == LOWER_BOUND
    assert len(tt) == 1

    tt.clear()
    assert len(tt) == 0
    assert tt.hits == 0


def test_invalid_search_input_fails_loudly():
    policy = MinimaxPolicy(6)
    with pytest.raises(ValueError):
        policy.search(new_board(8), BLACK)

    corrupted = new_board(6)
    corrupted[0, 0] = 5
    with pytest.raises(ValueError):
        policy.search(corrupted, BLACK)

    with pytest.raises(ValueError):
        MinimaxPolicy(6, config=MinimaxConfig(depth=0)).search(new_board(6), BLACK)
