"""Shared utilities for Othello game logic.

All functions here are pure with respect to their inputs except
:func:`place_disc`, which mutates the board it is given. They accept any
board array, the authoritative one or a scratch copy used during search.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

import numpy as np

from .state import EMPTY, Move, Player

OTHELLO_SIZE = 8
MIN_SIZE = 6
MAX_SIZE = 20

DIRECTIONS = [(-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1)]


def validate_size(size: int) -> int:
    """Return ``size`` if it is an even integer in [MIN_SIZE, MAX_SIZE]."""
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise ValueError(f"Board size must be an integer, got {size!r}")
    if size < MIN_SIZE or size > MAX_SIZE or size % 2 != 0:
        raise ValueError(
            f"Board size must be an even number between {MIN_SIZE} and {MAX_SIZE}, got {size}"
        )
    return int(size)


def new_board(size: int = OTHELLO_SIZE) -> np.ndarray:
    """Empty board with the four central discs in the standard placement."""
    size = validate_size(size)
    board = np.zeros((size, size), dtype=np.int8)

    mid = size // 2
    board[mid - 1, mid - 1] = Player.WHITE
    board[mid - 1, mid] = Player.BLACK
    board[mid, mid - 1] = Player.BLACK
    board[mid, mid] = Player.WHITE
    return board


def validate_board(board: np.ndarray) -> None:
    """Raise ValueError if ``board`` is not a square grid of cell values."""
    if not isinstance(board, np.ndarray) or board.ndim != 2 or board.shape[0] != board.shape[1]:
        raise ValueError(f"Board must be a square 2-D array, got {getattr(board, 'shape', type(board))}")
    validate_size(board.shape[0])
    if not np.isin(board, (EMPTY, Player.BLACK, Player.WHITE)).all():
        raise ValueError("Board contains values other than EMPTY, BLACK and WHITE")


def in_bounds(size: int, row: int, col: int) -> bool:
    return 0 <= row < size and 0 <= col < size


def _check_bounds(board: np.ndarray, row: int, col: int) -> None:
    if not in_bounds(board.shape[0], row, col):
        raise ValueError(f"Coordinate ({row}, {col}) is outside a {board.shape[0]}x{board.shape[0]} board")


def get_flips(board: np.ndarray, row: int, col: int, player: int) -> List[Tuple[int, int]]:
    """
    Get all discs that would be flipped by ``player`` placing at (row, col).

    Args:
        board: Game board array.
        row: Row position.
        col: Column position.
        player: Player token (1 or -1).

    Returns:
        List of (row, col) positions that would be flipped; empty if the
        cell is occupied or nothing is bracketed.
    """
    _check_bounds(board, row, col)
    if board[row, col] != EMPTY:
        return []

    size = board.shape[0]
    opponent = -player
    flips = []

    for dr, dc in DIRECTIONS:
        run = []
        r, c = row + dr, col + dc

        while 0 <= r < size and 0 <= c < size and board[r, c] == opponent:
            run.append((r, c))
            r += dr
            c += dc

        if run and 0 <= r < size and 0 <= c < size and board[r, c] == player:
            flips.extend(run)

    return flips


def is_valid_move(board: np.ndarray, row: int, col: int, player: int) -> bool:
    """True if placing at (row, col) flips at least one opposing disc."""
    _check_bounds(board, row, col)
    if board[row, col] != EMPTY:
        return False

    size = board.shape[0]
    opponent = -player

    for dr, dc in DIRECTIONS:
        r, c = row + dr, col + dc
        seen_opponent = False
        while 0 <= r < size and 0 <= c < size and board[r, c] == opponent:
            seen_opponent = True
            r += dr
            c += dc
        if seen_opponent and 0 <= r < size and 0 <= c < size and board[r, c] == player:
            return True

    return False


def legal_moves(board: np.ndarray, player: int) -> List[Move]:
    """All legal moves for ``player`` in row-major order."""
    player = Player(player)
    size = board.shape[0]
    return [
        Move(row, col, player)
        for row in range(size)
        for col in range(size)
        if is_valid_move(board, row, col, player)
    ]


def has_legal_move(board: np.ndarray, player: int) -> bool:
    size = board.shape[0]
    return any(
        is_valid_move(board, row, col, player)
        for row in range(size)
        for col in range(size)
    )


def is_terminal(board: np.ndarray) -> bool:
    """True iff neither player has a legal move."""
    return not has_legal_move(board, Player.BLACK) and not has_legal_move(board, Player.WHITE)


def place_disc(board: np.ndarray, row: int, col: int, player: int) -> int:
    """
    Place a disc in-place and flip every bracketed opposing run.

    Returns:
        Number of flipped discs.
    """
    flips = get_flips(board, row, col, player)
    if not flips:
        raise ValueError(f"Invalid move at ({row}, {col}) for player {int(player)}")

    board[row, col] = player
    for flip_row, flip_col in flips:
        board[flip_row, flip_col] = player
    return len(flips)


def count_discs(board: np.ndarray) -> Tuple[int, int]:
    """
    Count discs for each player.

    Returns:
        Tuple of (black_count, white_count).
    """
    black = np.sum(board == Player.BLACK)
    white = np.sum(board == Player.WHITE)
    return int(black), int(white)


def format_move(row: int, col: int) -> str:
    """Column letter plus 1-based row number, e.g. (2, 3) -> 'D3'."""
    return f"{chr(ord('A') + col)}{row + 1}"


def parse_move(text: str, size: int) -> Tuple[int, int]:
    """
    Parse a coordinate such as ``d3`` or ``D3`` into (row, col).

    Raises:
        ValueError: if the text is not a coordinate on a ``size`` board.
    """
    text = text.strip().upper()
    if len(text) < 2 or not text[0].isalpha() or not text[1:].isdigit():
        raise ValueError(f"Not a coordinate: {text!r}")
    col = ord(text[0]) - ord("A")
    row = int(text[1:]) - 1
    if not in_bounds(size, row, col):
        raise ValueError(f"Coordinate {text} is off the {size}x{size} board")
    return row, col


def render_board(
    board: np.ndarray,
    highlights: Iterable[Tuple[int, int]] = (),
    last_move: Optional[Tuple[int, int]] = None,
) -> str:
    """ASCII board with column letters and row numbers.

    Black discs are ``X``, white ``O``, highlighted empty cells ``*``. The
    last placed disc is shown in lower case.
    """
    size = board.shape[0]
    marks = set(highlights)
    last = (last_move[0], last_move[1]) if last_move is not None else None

    lines = ["    " + " ".join(chr(ord("A") + c) for c in range(size))]
    for row in range(size):
        cells = []
        for col in range(size):
            value = board[row, col]
            if value == Player.BLACK:
                cell = "X"
            elif value == Player.WHITE:
                cell = "O"
            elif (row, col) in marks:
                cell = "*"
            else:
                cell = "."
            if (row, col) == last:
                cell = cell.lower()
            cells.append(cell)
        lines.append(f"{row + 1:>3} " + " ".join(cells))
    return "\n".join(lines)
