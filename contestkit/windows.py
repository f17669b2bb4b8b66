"""Sliding-window computations over integer sequences."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Hashable, Iterable, Sequence


def _check_window(k: int) -> None:
    if k < 1:
        raise ValueError(f"window size must be positive, got {k}")


def longest_unique_run(values: Iterable[Hashable]) -> int:
    """Length of the longest contiguous run in which no value repeats."""
    last_seen: dict[Hashable, int] = {}
    start = 0
    best = 0
    for end, value in enumerate(values):
        previous = last_seen.get(value)
        if previous is not None and previous >= start:
            start = previous + 1
        last_seen[value] = end
        best = max(best, end - start + 1)
    return best


def generate_sequence(n: int, x: int, a: int, b: int, c: int) -> list[int]:
    """Return ``n`` values starting at ``x`` with ``v[i] = (a * v[i-1] + b) % c``."""
    if n < 0:
        raise ValueError(f"sequence length must not be negative, got {n}")
    if c == 0:
        raise ZeroDivisionError("modulus must not be zero")
    sequence: list[int] = []
    current = x
    for _ in range(n):
        sequence.append(current)
        current = (a * current + b) % c
    return sequence


def sliding_minimum_xor(values: Sequence[int], k: int) -> int:
    """XOR of the minimum of every window of size ``k``."""
    _check_window(k)
    indices: deque[int] = deque()
    result = 0
    for i, value in enumerate(values):
        while indices and values[indices[-1]] >= value:
            indices.pop()
        indices.append(i)
        if indices[0] <= i - k:
            indices.popleft()
        if i >= k - 1:
            result ^= values[indices[0]]
    return result


def sliding_xor_xor(values: Sequence[int], k: int) -> int:
    """XOR of the XOR of every window of size ``k``.

    When the sequence is shorter than the window, the XOR of all values is returned.
    """
    _check_window(k)
    window = 0
    result = 0
    for i, value in enumerate(values):
        window ^= value
        if i >= k:
            window ^= values[i - k]
            result ^= window
        else:
            result = window
    return result


def sliding_sum_xor(values: Sequence[int], k: int) -> int:
    """XOR of the sum of every window of size ``k``.

    When the sequence is shorter than the window, the sum of all values is returned.
    """
    _check_window(k)
    window = 0
    result = 0
    for i, value in enumerate(values):
        window += value
        if i >= k:
            window -= values[i - k]
            result ^= window
        else:
            result = window
    return result


def sliding_distinct_counts(values: Sequence[Hashable], k: int) -> list[int]:
    """Number of distinct values in each window of size ``k``, left to right."""
    _check_window(k)
    counts: Counter[Hashable] = Counter()
    result: list[int] = []
    for i, value in enumerate(values):
        counts[value] += 1
        if i >= k:
            leaving = values[i - k]
            counts[leaving] -= 1
            if counts[leaving] == 0:
                del counts[leaving]
        if i >= k - 1:
            result.append(len(counts))
    return result