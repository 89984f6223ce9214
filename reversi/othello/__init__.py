"""Othello rules package."""

from .eval import PositionWeightEvaluator, position_weights
from .game import OthelloGame
from .state import EMPTY, Move, OthelloState, Player
from .utils import (
    OTHELLO_SIZE,
    count_discs,
    format_move,
    get_flips,
    has_legal_move,
    is_terminal,
    legal_moves,
    new_board,
    parse_move,
    place_disc,
)
from ..registry import list_games, register_game

if "othello" not in list_games():
    register_game("othello", OthelloGame, size=OTHELLO_SIZE)

__all__ = [
    "EMPTY",
    "Move",
    "OTHELLO_SIZE",
    "OthelloGame",
    "OthelloState",
    "Player",
    "PositionWeightEvaluator",
    "count_discs",
    "format_move",
    "get_flips",
    "has_legal_move",
    "is_terminal",
    "legal_moves",
    "new_board",
    "parse_move",
    "place_disc",
    "position_weights",
]
