import math
from itertools import combinations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from contestkit.mathematics import (
    hanoi_moves,
    split_two_sets,
    trailing_zeros,
    two_knights,
    weird_sequence,
)


def test_hanoi_two_disks():
    assert hanoi_moves(2) == [(1, 2), (1, 3), (2, 3)]


@pytest.mark.parametrize("n", range(1, 9))
def test_hanoi_moves_are_legal_and_complete(n):
    moves = hanoi_moves(n)
    assert len(moves) == 2**n - 1
    pegs = {1: list(range(n, 0, -1)), 2: [], 3: []}
    for source, target in moves:
        disk = pegs[source].pop()
        assert not pegs[target] or pegs[target][-1] > disk
        pegs[target].append(disk)
    assert pegs == {1: [], 2: [], 3: list(range(n, 0, -1))}


def test_hanoi_rejects_no_disks():
    with pytest.raises(ValueError):
        hanoi_moves(0)


def test_trailing_zeros_example():
    assert trailing_zeros(20) == 4


@given(st.integers(0, 400))
def test_trailing_zeros_matches_factorial(n):
    digits = str(math.factorial(n))
    assert trailing_zeros(n) == len(digits) - len(digits.rstrip("0"))


def test_weird_sequence_example():
    assert weird_sequence(3) == [3, 10, 5, 16, 8, 4, 2, 1]


@given(st.integers(1, 10_000))
def test_weird_sequence_follows_rule(n):
    sequence = weird_sequence(n)
    assert sequence[0] == n
    assert sequence[-1] == 1
    assert sequence.count(1) == 1
    for current, following in zip(sequence, sequence[1:]):
        assert following == (3 * current + 1 if current % 2 else current // 2)


def test_weird_sequence_rejects_non_positive():
    with pytest.raises(ValueError):
        weird_sequence(0)


def _peaceful_pairs(k):
    cells = [(r, c) for r in range(k) for c in range(k)]
    return sum(
        1
        for (r1, c1), (r2, c2) in combinations(cells, 2)
        if sorted((abs(r1 - r2), abs(c1 - c2))) != [1, 2]
    )


def test_two_knights_matches_enumeration():
    assert two_knights(6) == [_peaceful_pairs(k) for k in range(1, 7)]


def test_two_knights_empty():
    assert two_knights(0) == []


@pytest.mark.parametrize("n", [1, 2, 5, 6, 9, 10, 13])
def test_split_impossible_when_sum_odd(n):
    assert split_two_sets(n) is None


@pytest.mark.parametrize("n", [0, 3, 4, 7, 8, 11, 12, 15, 16, 100])
def test_split_is_a_fair_partition(n):
    result = split_two_sets(n)
    assert result is not None
    first, second = result
    assert sorted(first + second) == list(range(1, n + 1))
    assert sum(first) == sum(second)


def test_split_small_case():
    assert split_two_sets(3) == ([3], [1, 2])


def test_split_rejects_negative():
    with pytest.raises(ValueError):
        split_two_sets(-4)