"""Backtracking searches on square boards: the knight's tour and N queens."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

Board = list[list[int]]

_KNIGHT_MOVES = ((2, 1), (1, 2), (-1, 2), (-2, 1), (-2, -1), (-1, -2), (1, -2), (2, -1))


def _check_size(size: int) -> None:
    if size < 1:
        raise ValueError(f"board size must be at least 1, got {size}")


def knight_tour(size: int = 8) -> Optional[Board]:
    """Find a knight's tour starting in the top-left corner.

    Returns a ``size`` x ``size`` board holding the move number of each square
    (the start square is 0), or None when no tour exists from that corner.
    Moves are tried in a fixed order, so the result is deterministic.
    """
    _check_size(size)
    board = [[-1] * size for _ in range(size)]
    board[0][0] = 0
    last_move = size * size

    def is_free(x: int, y: int) -> bool:
        return 0 <= x < size and 0 <= y < size and board[x][y] == -1

    def extend(x: int, y: int, move: int) -> bool:
        if move == last_move:
            return True
        for dx, dy in _KNIGHT_MOVES:
            nx, ny = x + dx, y + dy
            if is_free(nx, ny):
                board[nx][ny] = move
                if extend(nx, ny, move + 1):
                    return True
                board[nx][ny] = -1
        return False

    return board if extend(0, 0, 1) else None


def n_queens(size: int) -> Optional[Board]:
    """Place ``size`` non-attacking queens, filling the board column by column.

    Returns a board with 1 where a queen stands and 0 elsewhere, or None when
    no placement exists.
    """
    _check_size(size)
    board = [[0] * size for _ in range(size)]

    def is_safe(row: int, col: int) -> bool:
        if any(board[row][c] for c in range(col)):
            return False
        if any(board[r][c] for r, c in zip(range(row, -1, -1), range(col, -1, -1))):
            return False
        if any(board[r][c] for r, c in zip(range(row, size), range(col, -1, -1))):
            return False
        return True

    def place(col: int) -> bool:
        if col >= size:
            return True
        for row in range(size):
            if is_safe(row, col):
                board[row][col] = 1
                if place(col + 1):
                    return True
                board[row][col] = 0
        return False

    return board if place(0) else None


def format_board(board: Sequence[Sequence[int]], width: Optional[int] = None) -> str:
    """Render a board as text, one row per line, cells right-aligned to ``width``.

    Without a width, the widest cell sets it.
    """
    cells = [[str(cell) for cell in row] for row in board]
    if width is None:
        width = max((len(cell) for row in cells for cell in row), default=0)
    return "".join(
        " ".join(cell.rjust(width) for cell in row) + "\n" for row in cells
    )