"""Unit tests for the Grid model: construction, queries, and guarded mutation."""

import dataclasses

import pytest

from helpers import EASY_SOLUTION, mask_of
from src.sudoku.codec import from_strings
from src.sudoku.errors import OutOfBounds, ShapeError
from src.sudoku.grid import Grid, SIZE
from src.sudoku.seeds import EASY


def _make_empty_values():
    return [[0] * SIZE for _ in range(SIZE)]


def _make_easy_grid() -> Grid:
    return from_strings(EASY)


def test_nonzero_values_become_givens_when_mask_omitted():
    values = _make_empty_values()
    values[4][4] = 7
    grid = Grid(values)
    assert grid.is_given(4, 4)
    assert not grid.is_given(0, 0)
    assert grid.given_count() == 1


def test_explicit_givens_are_taken_verbatim():
    values = _make_empty_values()
    values[0][0] = 5
    givens = [[False] * SIZE for _ in range(SIZE)]
    grid = Grid(values, givens)
    assert grid.get(0, 0) == 5
    assert not grid.is_given(0, 0)


@pytest.mark.parametrize(
    "values",
    [
        [[0] * SIZE for _ in range(SIZE - 1)],
        [[0] * (SIZE + 1)] + [[0] * SIZE for _ in range(SIZE - 1)],
        [[10] + [0] * (SIZE - 1)] + [[0] * SIZE for _ in range(SIZE - 1)],
        [[-1] + [0] * (SIZE - 1)] + [[0] * SIZE for _ in range(SIZE - 1)],
        [["1"] + [0] * (SIZE - 1)] + [[0] * SIZE for _ in range(SIZE - 1)],
        [[True] + [0] * (SIZE - 1)] + [[0] * SIZE for _ in range(SIZE - 1)],
        [5] * SIZE,
        5,
        "0" * SIZE,
        [[0] * SIZE for _ in range(SIZE - 1)] + ["0" * SIZE],
    ],
)
def test_bad_shapes_and_values_raise_shape_error(values):
    with pytest.raises(ShapeError):
        Grid(values)


def test_given_flag_on_empty_cell_is_rejected():
    givens = [[False] * SIZE for _ in range(SIZE)]
    givens[3][3] = True
    with pytest.raises(ShapeError):
        Grid(_make_empty_values(), givens)


def test_given_mask_shape_is_checked():
    with pytest.raises(ShapeError):
        Grid(_make_empty_values(), [[False] * SIZE])


@pytest.mark.parametrize("givens", [True, [True] * SIZE])
def test_given_mask_must_be_rows_of_flags(givens):
    with pytest.raises(ShapeError):
        Grid(_make_empty_values(), givens)


@pytest.mark.parametrize("flag", ["0", "1", 1, 0, None])
def test_given_mask_rejects_non_bool_flags(flag):
    values = _make_empty_values()
    values[0][0] = 5
    givens = [[False] * SIZE for _ in range(SIZE)]
    givens[0][0] = flag
    with pytest.raises(ShapeError, match="not a bool"):
        Grid(values, givens)


@pytest.mark.parametrize("r,c", [(SIZE, 0), (0, SIZE), (-1, 0), (0, -1)])
def test_out_of_bounds_queries_raise(r, c):
    grid = Grid.empty()
    assert not grid.in_bounds(r, c)
    with pytest.raises(OutOfBounds):
        grid.get(r, c)
    with pytest.raises(OutOfBounds):
        grid.is_given(r, c)


def test_try_set_never_touches_given_cells():
    grid = _make_easy_grid()
    before = grid.values()
    for r, c in grid.coords():
        if not grid.is_given(r, c):
            continue
        for v in range(0, SIZE + 2):
            assert grid.try_set(r, c, v) is False
    assert grid.values() == before


def test_try_set_accepts_legal_and_rejects_conflicting_digits():
    grid = _make_easy_grid()
    assert grid.try_set(0, 0, 4)
    assert grid.get(0, 0) == 4
    # 4 now sits in row 0 and box 0.
    assert not grid.try_set(0, 1, 4)
    assert grid.get(0, 1) == 0
    # 9 is already in column 0.
    assert not grid.try_set(0, 0, 9)
    assert grid.get(0, 0) == 4


@pytest.mark.parametrize("v", [0, SIZE + 1, -3])
def test_try_set_rejects_out_of_range_digits(v):
    grid = _make_easy_grid()
    assert not grid.try_set(0, 0, v)
    assert grid.get(0, 0) == 0


def test_try_set_out_of_bounds_returns_false():
    assert not Grid.empty().try_set(SIZE, 0, 1)


def test_try_set_may_overwrite_own_value():
    grid = _make_easy_grid()
    assert grid.try_set(0, 0, 4)
    assert grid.try_set(0, 0, 4)
    assert grid.try_set(0, 0, 5)
    assert grid.get(0, 0) == 5


def test_try_clear_refuses_givens_and_empties_editable_cells():
    grid = _make_easy_grid()
    assert grid.is_given(0, 2)
    assert not grid.try_clear(0, 2)
    assert grid.get(0, 2) == 3

    assert grid.try_set(0, 0, 4)
    assert grid.try_clear(0, 0)
    assert grid.get(0, 0) == 0


def test_all_zero_grid_is_not_solved():
    assert not Grid.empty().is_solved()


def test_completed_easy_puzzle_is_solved():
    grid = from_strings(EASY_SOLUTION, mask_of(EASY))
    assert grid.is_solved()


def test_filled_but_inconsistent_grid_is_not_solved():
    values = list(EASY_SOLUTION)
    values[0], values[1] = values[1], values[0]
    grid = from_strings("".join(values), mask_of(EASY))
    assert grid.empty_count() == 0
    assert not grid.is_solved()


def test_is_solved_leaves_values_untouched():
    grid = from_strings(EASY_SOLUTION, mask_of(EASY))
    before = grid.values()
    grid.is_solved()
    assert grid.values() == before


def test_copy_is_independent_and_equal():
    grid = _make_easy_grid()
    clone = grid.copy()
    assert clone == grid
    assert clone.try_set(0, 0, 4)
    assert grid.get(0, 0) == 0
    assert clone != grid


def test_values_and_givens_are_defensive_copies():
    grid = _make_easy_grid()
    grid.values()[0][0] = 9
    grid.givens()[0][0] = True
    assert grid.get(0, 0) == 0
    assert not grid.is_given(0, 0)


def test_cell_snapshot_is_immutable():
    grid = _make_easy_grid()
    cell = grid.cell(0, 2)
    assert cell.value == 3 and cell.given
    assert str(cell) == "3"
    assert str(grid.cell(0, 0)) == "."
    with pytest.raises(dataclasses.FrozenInstanceError):
        cell.value = 4


def test_str_is_row_major_values():
    assert str(_make_easy_grid()) == EASY
