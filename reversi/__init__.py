"""Othello/Reversi game engine with minimax search."""

__version__ = "0.1.0"
