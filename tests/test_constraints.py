"""Tests for Sudoku constraint checks."""

from backend.solver.constraints import (
    Conflict,
    clone_board,
    is_board_complete,
    is_board_solved,
    is_valid_grid,
    is_valid_placement,
    validate_board,
)


def _empty() -> list[list[int]]:
    return [[0] * 9 for _ in range(9)]


def test_is_valid_placement_checks_row_col_box():
    grid = _empty()
    grid[0][0] = 7
    grid[1][1] = 7

    assert is_valid_placement(grid, 0, 2, 7) is False  # row conflict
    assert is_valid_placement(grid, 2, 0, 7) is False  # col conflict
    assert is_valid_placement(grid, 2, 2, 7) is False  # box conflict
    assert is_valid_placement(grid, 4, 4, 7) is True


def test_is_valid_placement_ignores_the_cell_itself():
    grid = _empty()
    grid[4][4] = 3

    assert is_valid_placement(grid, 4, 4, 3) is True


def test_is_valid_placement_does_not_mutate(classic_puzzle):
    before = clone_board(classic_puzzle)
    is_valid_placement(classic_puzzle, 0, 2, 4)

    assert classic_puzzle == before


def test_valid_placement_means_value_is_unique_in_its_units(classic_solution):
    for r in range(9):
        for c in range(9):
            value = classic_solution[r][c]
            assert is_valid_placement(classic_solution, r, c, value)

            box_r, box_c = (r // 3) * 3, (c // 3) * 3
            box = [
                classic_solution[i][j]
                for i in range(box_r, box_r + 3)
                for j in range(box_c, box_c + 3)
            ]
            column = [classic_solution[i][c] for i in range(9)]
            assert classic_solution[r].count(value) == 1
            assert column.count(value) == 1
            assert box.count(value) == 1


def test_validate_empty_board_has_no_conflicts():
    assert validate_board(_empty()) == []


def test_validate_reports_both_row_duplicates_in_row_major_order():
    grid = _empty()
    grid[2][1] = 4
    grid[2][7] = 4

    assert validate_board(grid) == [Conflict(2, 1), Conflict(2, 7)]


def test_validate_reports_column_and_box_duplicates():
    grid = _empty()
    grid[0][5] = 9
    grid[6][5] = 9
    grid[3][3] = 2
    grid[5][4] = 2

    assert validate_board(grid) == [
        Conflict(0, 5),
        Conflict(3, 3),
        Conflict(5, 4),
        Conflict(6, 5),
    ]


def test_validate_flags_out_of_range_values():
    grid = _empty()
    grid[0][0] = 10
    grid[8][8] = -1

    assert validate_board(grid) == [Conflict(0, 0), Conflict(8, 8)]


def test_out_of_range_cell_is_not_counted_as_duplicate_twice():
    grid = _empty()
    grid[0][0] = 12
    grid[0][1] = 12

    conflicts = validate_board(grid)
    assert conflicts == [Conflict(0, 0), Conflict(0, 1)]


def test_complete_and_solved(classic_puzzle, classic_solution):
    assert is_board_complete(classic_puzzle) is False
    assert is_board_solved(classic_puzzle) is False

    assert is_board_complete(classic_solution) is True
    assert is_board_solved(classic_solution) is True

    broken = clone_board(classic_solution)
    broken[0][0], broken[0][1] = broken[0][1], broken[0][0]
    assert is_board_complete(broken) is True
    assert is_board_solved(broken) is False


def test_clone_board_is_independent(classic_puzzle):
    clone = clone_board(classic_puzzle)
    assert clone == classic_puzzle

    clone[0][2] = 4
    assert classic_puzzle[0][2] == 0


def test_is_valid_grid_checks_structure_only():
    grid = _empty()
    assert is_valid_grid(grid) is True

    grid[0][0] = 11
    assert is_valid_grid(grid) is True

    assert is_valid_grid(grid[:8]) is False
    assert is_valid_grid([[0] * 8 for _ in range(9)]) is False
    assert is_valid_grid([[0.5] * 9 for _ in range(9)]) is False
    assert is_valid_grid("not a grid") is False
