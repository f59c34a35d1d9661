"""Sudoku constraint checks shared by the solver, generator and API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List


Board = List[List[int]]


@dataclass(frozen=True)
class Conflict:
    """A cell whose value breaks the Sudoku rules."""

    row: int
    col: int


def is_valid_placement(board: Board, row: int, col: int, value: int) -> bool:
    """
    Check if ``value`` at (row, col) is unique in its row, column and box.

    The cell itself is ignored, so this works both for a candidate value and
    for a value that is already placed.

    Args:
        board: Current board state
        row: Row index (0-8)
        col: Column index (0-8)
        value: Digit to check (1-9)

    Returns:
        True if no other cell in the same unit holds ``value``
    """
    # Check row
    for c in range(9):
        if c != col and board[row][c] == value:
            return False

    # Check column
    for r in range(9):
        if r != row and board[r][col] == value:
            return False

    # Check 3x3 box
    box_row = (row // 3) * 3
    box_col = (col // 3) * 3

    for r in range(box_row, box_row + 3):
        for c in range(box_col, box_col + 3):
            if (r != row or c != col) and board[r][c] == value:
                return False

    return True


def validate_board(board: Board) -> list[Conflict]:
    """Return conflicting cells in row-major order."""
    conflicts: list[Conflict] = []
    for r in range(9):
        for c in range(9):
            value = board[r][c]
            if value == 0:
                continue
            if value < 1 or value > 9:
                conflicts.append(Conflict(r, c))
            elif not is_valid_placement(board, r, c, value):
                conflicts.append(Conflict(r, c))
    return conflicts


def is_board_complete(board: Board) -> bool:
    return all(cell != 0 for row in board for cell in row)


def is_board_solved(board: Board) -> bool:
    return is_board_complete(board) and not validate_board(board)


def clone_board(board: Board) -> Board:
    """Deep copy a 9x9 board."""
    return [list(row) for row in board]


def is_valid_grid(grid: Board) -> bool:
    """
    Validate that a grid has the 9x9 integer structure the engine expects.

    Value ranges are not checked here; out-of-range digits are reported by
    ``validate_board`` as conflicts.
    """
    if not isinstance(grid, list) or len(grid) != 9:
        return False

    for row in grid:
        if not isinstance(row, list) or len(row) != 9:
            return False
        for cell in row:
            if not isinstance(cell, int) or isinstance(cell, bool):
                return False

    return True
