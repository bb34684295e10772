"""Backtracking problems: grid paths, queens, permutations, subsets and sudoku."""

from __future__ import annotations

import math
from collections.abc import Sequence

SUDOKU_SIZE = 9
BOX_SIZE = 3


def grid_ways(rows: int, cols: int) -> int:
    """Paths from the top-left to the bottom-right cell moving only right or down."""
    if rows < 1 or cols < 1:
        return 0
    return math.comb(rows + cols - 2, rows - 1)


def n_queens(n: int) -> list[list[str]]:
    """Every placement of n non-attacking queens, each board as rows of 'Q' and '.'."""
    if n < 0:
        raise ValueError("board size must not be negative")
    solutions: list[list[str]] = []
    queens: list[int] = []
    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> None:
        if row == n:
            solutions.append(
                ["".join("Q" if c == col else "." for c in range(n)) for col in queens]
            )
            return
        for col in range(n):
            if col in columns or row - col in diagonals or row + col in anti_diagonals:
                continue
            queens.append(col)
            columns.add(col)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            place(row + 1)
            queens.pop()
            columns.discard(col)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)

    place(0)
    return solutions


def format_board(board: Sequence[Sequence[str]]) -> str:
    """Render a board with cells separated by spaces, one row per line."""
    return "\n".join(" ".join(row) for row in board)


def permutations(text: str) -> list[str]:
    """Every ordering of the characters of text, picking characters left to right."""
    if not text:
        return [""]
    return [
        char + rest
        for index, char in enumerate(text)
        for rest in permutations(text[:index] + text[index + 1 :])
    ]


def subsets(text: str) -> list[str]:
    """Every subsequence of text, those containing the first character first."""
    if not text:
        return [""]
    rest = subsets(text[1:])
    return [text[0] + tail for tail in rest] + rest


def _is_safe(board: list[list[int]], row: int, col: int, digit: int) -> bool:
    if any(board[row][c] == digit for c in range(SUDOKU_SIZE) if c != col):
        return False
    if any(board[r][col] == digit for r in range(SUDOKU_SIZE) if r != row):
        return False
    top = row // BOX_SIZE * BOX_SIZE
    left = col // BOX_SIZE * BOX_SIZE
    return not any(
        board[r][c] == digit
        for r in range(top, top + BOX_SIZE)
        for c in range(left, left + BOX_SIZE)
        if (r, c) != (row, col)
    )


def solve_sudoku(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    """Solve a 9x9 sudoku where 0 marks an empty cell; the input is left untouched."""
    board = [list(row) for row in grid]
    if len(board) != SUDOKU_SIZE or any(len(row) != SUDOKU_SIZE for row in board):
        raise ValueError("a sudoku grid must be 9 by 9")
    for r, row in enumerate(board):
        for c, value in enumerate(row):
            if not 0 <= value <= SUDOKU_SIZE:
                raise ValueError(f"cell ({r}, {c}) holds {value}, outside 0..9")
            if value and not _is_safe(board, r, c, value):
                raise ValueError(f"cell ({r}, {c}) conflicts with another given")

    empty = [
        (r, c) for r in range(SUDOKU_SIZE) for c in range(SUDOKU_SIZE) if board[r][c] == 0
    ]

    def fill(index: int) -> bool:
        if index == len(empty):
            return True
        r, c = empty[index]
        for digit in range(1, SUDOKU_SIZE + 1):
            if _is_safe(board, r, c, digit):
                board[r][c] = digit
                if fill(index + 1):
                    return True
                board[r][c] = 0
        return False

    if not fill(0):
        raise ValueError("the sudoku has no solution")
    return board