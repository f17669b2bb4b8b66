"""Closed-form and constructive answers to small counting problems."""

from __future__ import annotations

from collections.abc import Iterator

Move = tuple[int, int]


def _hanoi(disks: int, source: int, spare: int, target: int) -> Iterator[Move]:
    if disks == 1:
        yield source, target
        return
    yield from _hanoi(disks - 1, source, target, spare)
    yield source, target
    yield from _hanoi(disks - 1, spare, source, target)


def hanoi_moves(n: int) -> list[Move]:
    """Moves ``(from, to)`` carrying ``n`` disks from peg 1 to peg 3 in the fewest steps."""
    if n < 1:
        raise ValueError(f"at least one disk is required, got {n}")
    return list(_hanoi(n, 1, 2, 3))


def trailing_zeros(n: int) -> int:
    """Number of trailing zeros of ``n!``."""
    zeros = 0
    power = 5
    while n // power >= 1:
        zeros += n // power
        power *= 5
    return zeros


def weird_sequence(n: int) -> list[int]:
    """Values visited from ``n`` to 1, halving even values and mapping odd ``v`` to ``3v + 1``."""
    if n < 1:
        raise ValueError(f"start must be positive, got {n}")
    sequence = [n]
    while n != 1:
        n = 3 * n + 1 if n & 1 else n // 2
        sequence.append(n)
    return sequence


def two_knights(n: int) -> list[int]:
    """For each board side 1..n, the ways to place two knights that do not attack each other."""
    return [
        k * k * (k * k - 1) // 2 - 4 * (k - 1) * (k - 2)
        for k in range(1, n + 1)
    ]


def split_two_sets(n: int) -> tuple[list[int], list[int]] | None:
    """Split 1..n into two sets of equal sum, or ``None`` when that is impossible."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    if (n * (n + 1) // 2) % 2:
        return None
    first: list[int] = []
    second: list[int] = []
    if n % 2:
        first.append(n)
        n -= 1
        for i in range(1, n // 2 + 1, 2):
            second.extend((i, n - i + 1))
        for i in range(2, n // 2, 2):
            first.extend((i, n - i + 1))
    else:
        for i in range(1, n // 2, 2):
            first.extend((i, n - i + 1))
        for i in range(2, n // 2 + 1, 2):
            second.extend((i, n - i + 1))
    return first, second