"""Counting subarrays with given sum, divisibility or distinctness properties."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Sequence


def count_at_most_k_distinct(values: Sequence[Hashable], k: int) -> int:
    """Number of subarrays holding at most ``k`` distinct values."""
    counts: Counter[Hashable] = Counter()
    left = 0
    total = 0
    for right, value in enumerate(values):
        counts[value] += 1
        while left <= right and len(counts) > k:
            leaving = values[left]
            counts[leaving] -= 1
            if counts[leaving] == 0:
                del counts[leaving]
            left += 1
        total += right - left + 1
    return total


def count_divisible_subarrays(values: Sequence[int]) -> int:
    """Number of subarrays whose sum is divisible by the length of ``values``."""
    n = len(values)
    if n == 0:
        return 0
    seen: Counter[int] = Counter({0: 1})
    prefix = 0
    total = 0
    for value in values:
        prefix += value
        remainder = prefix % n
        total += seen[remainder]
        seen[remainder] += 1
    return total


def count_positive_sum_subarrays(values: Sequence[int], target: int) -> int:
    """Number of subarrays summing to ``target``; values are expected to be positive."""
    n = len(values)
    left = 0
    window = 0
    total = 0
    for value in values:
        window += value
        while left < n and window > target:
            window -= values[left]
            left += 1
        if window == target:
            total += 1
    return total


def count_sum_subarrays(values: Sequence[int], target: int) -> int:
    """Number of subarrays summing to ``target``; values may be negative."""
    seen: Counter[int] = Counter({0: 1})
    prefix = 0
    total = 0
    for value in values:
        prefix += value
        total += seen[prefix - target]
        seen[prefix] += 1
    return total