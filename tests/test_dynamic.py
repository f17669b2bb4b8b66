from itertools import combinations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from contestkit.dynamic import (
    count_equal_partitions,
    min_digit_removals,
    minimal_grid_path,
    rectangle_cuts,
    removal_game_score,
)


@pytest.mark.parametrize("side", [1, 2, 7])
def test_square_needs_no_cuts(side):
    assert rectangle_cuts(side, side) == 0


@pytest.mark.parametrize("length", [1, 2, 5, 9])
def test_strip_needs_one_cut_per_extra_square(length):
    assert rectangle_cuts(1, length) == length - 1
    assert rectangle_cuts(length, 1) == length - 1


@pytest.mark.parametrize("side,multiple", [(2, 3), (3, 2), (4, 4)])
def test_multiple_of_side(side, multiple):
    assert rectangle_cuts(side, side * multiple) == multiple - 1


@given(st.integers(1, 12), st.integers(1, 12))
@settings(max_examples=30)
def test_rectangle_cuts_symmetric(a, b):
    assert rectangle_cuts(a, b) == rectangle_cuts(b, a)


def test_rectangle_cuts_rejects_empty_side():
    with pytest.raises(ValueError):
        rectangle_cuts(0, 3)


def test_removal_game_example():
    assert removal_game_score([4, 5, 1, 3]) == 8


def test_removal_game_small_cases():
    assert removal_game_score([]) == 0
    assert removal_game_score([7]) == 7
    assert removal_game_score([2, 9]) == 9


@given(st.lists(st.integers(-50, 50), min_size=1, max_size=12))
def test_removal_game_even_length_first_player_not_behind(values):
    if len(values) % 2:
        values = values + [0]
    score = removal_game_score(values)
    assert 2 * score >= sum(values)


def test_min_digit_removals_example():
    assert min_digit_removals(27) == 5


def test_min_digit_removals_small():
    assert min_digit_removals(0) == 0
    assert all(min_digit_removals(d) == 1 for d in range(1, 10))


@given(st.integers(1, 3000))
@settings(max_examples=30)
def test_min_digit_removals_bounds(n):
    steps = min_digit_removals(n)
    assert -(-n // 9) <= steps <= n


def test_min_digit_removals_rejects_negative():
    with pytest.raises(ValueError):
        min_digit_removals(-1)


@pytest.mark.parametrize("n", [1, 2, 5, 6, 9, 10])
def test_equal_partitions_impossible_when_sum_odd(n):
    assert count_equal_partitions(n) == 0


@pytest.mark.parametrize("n", range(1, 13))
def test_equal_partitions_matches_enumeration(n):
    numbers = range(1, n + 1)
    total = sum(numbers)
    subsets = sum(
        1
        for size in range(n + 1)
        for chosen in combinations(numbers, size)
        if 2 * sum(chosen) == total
    )
    assert count_equal_partitions(n) == subsets // 2


def test_equal_partitions_rejects_negative():
    with pytest.raises(ValueError):
        count_equal_partitions(-3)


def test_minimal_grid_path_example():
    grid = ["AACA", "BABC", "ABDA", "AACA"]
    assert minimal_grid_path(grid) == "AAABACA"


def test_minimal_grid_path_single_cell():
    assert minimal_grid_path(["Q"]) == "Q"


def _all_paths(grid):
    rows, cols = len(grid), len(grid[0])
    steps = rows + cols - 2
    for downs in combinations(range(steps), rows - 1):
        r = c = 0
        letters = [grid[0][0]]
        for step in range(steps):
            if step in downs:
                r += 1
            else:
                c += 1
            letters.append(grid[r][c])
        yield "".join(letters)


@given(
    st.integers(1, 4).flatmap(
        lambda n: st.lists(
            st.text(alphabet="ABC", min_size=n, max_size=n), min_size=n, max_size=n
        )
    )
)
@settings(max_examples=40)
def test_minimal_grid_path_is_smallest_path(grid):
    result = minimal_grid_path(grid)
    assert result == min(_all_paths(grid))
    assert len(result) == 2 * len(grid) - 1


def test_minimal_grid_path_rejects_bad_grids():
    with pytest.raises(ValueError):
        minimal_grid_path([])
    with pytest.raises(ValueError):
        minimal_grid_path(["AB", "C"])