import itertools

import pytest

from dsakit.backtracking import (
    format_board,
    grid_ways,
    n_queens,
    permutations,
    solve_sudoku,
    subsets,
)

SOLVED = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]

DIGITS = list(range(1, 10))


def _queens_ok(board):
    positions = [(r, row.index("Q")) for r, row in enumerate(board)]
    if any(row.count("Q") != 1 for row in board):
        return False
    for (r1, c1), (r2, c2) in itertools.combinations(positions, 2):
        if c1 == c2 or abs(r1 - r2) == abs(c1 - c2):
            return False
    return True


def test_grid_ways_source_case():
    assert grid_ways(3, 3) == 6


def test_grid_ways_single_cell_and_empty():
    assert grid_ways(1, 1) == 1
    assert grid_ways(0, 3) == 0
    assert grid_ways(3, 0) == 0


@pytest.mark.parametrize("rows,cols", [(2, 5), (4, 4), (6, 3), (7, 9)])
def test_grid_ways_recurrence_and_symmetry(rows, cols):
    assert grid_ways(rows, cols) == grid_ways(cols, rows)
    assert grid_ways(rows, cols) == grid_ways(rows - 1, cols) + grid_ways(rows, cols - 1)


def test_n_queens_four():
    boards = n_queens(4)
    assert len(boards) == 2
    assert all(_queens_ok(board) for board in boards)
    assert all(len(board) == 4 and all(len(row) == 4 for row in board) for board in boards)


@pytest.mark.parametrize("n", [5, 6])
def test_n_queens_boards_are_distinct_and_safe(n):
    boards = n_queens(n)
    assert boards
    assert all(_queens_ok(board) for board in boards)
    assert len({tuple(board) for board in boards}) == len(boards)


def test_n_queens_small_sizes():
    assert n_queens(1) == [["Q"]]
    assert n_queens(2) == []
    assert n_queens(3) == []


def test_n_queens_negative():
    with pytest.raises(ValueError):
        n_queens(-1)


def test_format_board():
    assert format_board(["Q.", ".Q"]) == "Q .\n. Q"


def test_permutations_order_and_content():
    result = permutations("abc")
    assert result == ["".join(p) for p in itertools.permutations("abc")]
    assert len(set(result)) == len(result)


def test_permutations_empty():
    assert permutations("") == [""]


def test_subsets_source_case():
    result = subsets("xyz")
    assert len(result) == 8
    assert result[0] == "xyz"
    assert result[-1] == ""
    expected = {
        "".join(combo)
        for size in range(4)
        for combo in itertools.combinations("xyz", size)
    }
    assert set(result) == expected


def test_subsets_keep_character_order():
    for subset in subsets("abcd"):
        assert subset == "".join(sorted(subset))


def test_solve_already_solved():
    assert solve_sudoku(SOLVED) == SOLVED


def test_solve_with_blanks_restores_solution():
    puzzle = [list(row) for row in SOLVED]
    for r, c in [(0, 0), (1, 4), (4, 4), (8, 8), (3, 6), (6, 2), (2, 1)]:
        puzzle[r][c] = 0
    solution = solve_sudoku(puzzle)
    assert solution == SOLVED
    assert puzzle[0][0] == 0


def test_solve_empty_grid_is_valid():
    solution = solve_sudoku([[0] * 9 for _ in range(9)])
    assert len(solution) == 9
    for row in solution:
        assert sorted(row) == DIGITS
    for col in zip(*solution):
        assert sorted(col) == DIGITS
    for br in range(0, 9, 3):
        for bc in range(0, 9, 3):
            box = [solution[r][c] for r in range(br, br + 3) for c in range(bc, bc + 3)]
            assert sorted(box) == DIGITS


def test_conflicting_givens_rejected():
    puzzle = [[0] * 9 for _ in range(9)]
    puzzle[0][0] = 5
    puzzle[0][8] = 5
    with pytest.raises(ValueError):
        solve_sudoku(puzzle)


def test_unsolvable_puzzle_rejected():
    puzzle = [[0] * 9 for _ in range(9)]
    puzzle[0] = [1, 2, 3, 4, 5, 6, 7, 8, 0]
    puzzle[1][8] = 9
    with pytest.raises(ValueError):
        solve_sudoku(puzzle)


def test_wrong_shape_rejected():
    with pytest.raises(ValueError):
        solve_sudoku([[0] * 9 for _ in range(8)])