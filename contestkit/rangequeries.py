"""Range queries over static and updatable integer arrays."""

from __future__ import annotations

import math
import operator
from bisect import bisect_left
from collections.abc import Callable, Iterable, Sequence
from itertools import accumulate
from typing import Generic, TypeVar

T = TypeVar("T")


class SegmentTree(Generic[T]):
    """Answers range queries for an associative operation over fixed values."""

    def __init__(self, values: Iterable[T], combine: Callable[[T, T], T], identity: T) -> None:
        items = list(values)
        self._size = len(items)
        self._combine = combine
        self._identity = identity
        self._tree: list[T] = [identity] * self._size + items
        for node in range(self._size - 1, 0, -1):
            self._tree[node] = combine(self._tree[2 * node], self._tree[2 * node + 1])

    def __len__(self) -> int:
        return self._size

    def query(self, a: int, b: int) -> T:
        """Combine the values at positions ``a`` to ``b`` inclusive, counted from 0.

        An empty range (``a > b``) gives the identity.
        """
        if a > b:
            return self._identity
        if a < 0 or b >= self._size:
            raise IndexError(f"range [{a}, {b}] outside 0..{self._size - 1}")
        left = right = self._identity
        lo, hi = a + self._size, b + self._size + 1
        while lo < hi:
            if lo & 1:
                left = self._combine(left, self._tree[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                right = self._combine(self._tree[hi], right)
            lo //= 2
            hi //= 2
        return self._combine(left, right)


class RangeUpdateArray:
    """An integer array supporting range additions and point reads."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        self._size = len(items)
        self._tree = [0] * (self._size + 1)
        previous = 0
        for index, value in enumerate(items):
            self._bump(index, value - previous)
            previous = value

    def __len__(self) -> int:
        return self._size

    def _bump(self, index: int, delta: int) -> None:
        node = index + 1
        while node <= self._size:
            self._tree[node] += delta
            node += node & -node

    def _check(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} outside 0..{self._size - 1}")

    def add(self, a: int, b: int, value: int) -> None:
        """Add ``value`` to every position from ``a`` to ``b`` inclusive, counted from 0."""
        self._check(a)
        self._check(b)
        if a > b:
            raise ValueError(f"range start {a} is after its end {b}")
        self._bump(a, value)
        if b + 1 < self._size:
            self._bump(b + 1, -value)

    def value_at(self, k: int) -> int:
        """Current value at position ``k``, counted from 0."""
        self._check(k)
        total = 0
        node = k + 1
        while node > 0:
            total += self._tree[node]
            node -= node & -node
        return total


class PrefixSums:
    """Constant-time sums over ranges of fixed values."""

    def __init__(self, values: Iterable[int]) -> None:
        self._prefix = [0, *accumulate(values)]

    def __len__(self) -> int:
        return len(self._prefix) - 1

    def sum(self, a: int, b: int) -> int:
        """Sum of positions ``a`` to ``b`` inclusive, counted from 0; empty ranges sum to 0."""
        if a > b:
            return 0
        if a < 0 or b >= len(self):
            raise IndexError(f"range [{a}, {b}] outside 0..{len(self) - 1}")
        return self._prefix[b + 1] - self._prefix[a]


def xor_range_queries(values: Sequence[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """XOR of each range; query bounds are counted from 1 and inclusive."""
    tree = SegmentTree(values, operator.xor, 0)
    return [tree.query(a - 1, b - 1) for a, b in queries]


def min_range_queries(values: Sequence[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """Minimum of each range; query bounds are counted from 1 and inclusive."""
    tree: SegmentTree = SegmentTree(values, min, math.inf)
    return [tree.query(a - 1, b - 1) for a, b in queries]


def _locate(prefix: list[int], worm: int) -> int:
    total = prefix[-1] if prefix else 0
    if not 1 <= worm <= total:
        raise ValueError(f"worm {worm} outside 1..{total}")
    return bisect_left(prefix, worm) + 1


def find_pile(piles: Sequence[int], worm: int) -> int:
    """Pile (counted from 1) holding worm number ``worm`` when worms are labelled in order."""
    return _locate(list(accumulate(piles)), worm)


def worm_piles(piles: Sequence[int], worms: Iterable[int]) -> list[int]:
    """Pile (counted from 1) holding each of ``worms``."""
    prefix = list(accumulate(piles))
    return [_locate(prefix, worm) for worm in worms]