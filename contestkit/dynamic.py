"""Dynamic-programming routines: cutting, games, digit removal, partitions and grid paths."""

from __future__ import annotations

from collections.abc import Sequence

MODULUS = 10**9 + 7


def rectangle_cuts(a: int, b: int) -> int:
    """Fewest straight cuts that split an ``a`` by ``b`` rectangle into squares."""
    if a < 1 or b < 1:
        raise ValueError(f"rectangle sides must be positive, got {a} x {b}")
    cuts = [[0] * (b + 1) for _ in range(a + 1)]
    for width in range(1, a + 1):
        row = cuts[width]
        for height in range(1, b + 1):
            if width == height:
                continue
            best = min(
                (row[i] + row[height - i] + 1 for i in range(1, height)),
                default=float("inf"),
            )
            best = min(
                best,
                min(
                    (cuts[i][height] + cuts[width - i][height] + 1 for i in range(1, width)),
                    default=float("inf"),
                ),
            )
            row[height] = int(best)
    return cuts[a][b]


def removal_game_score(values: Sequence[int]) -> int:
    """Highest score the first player can secure when both take from either end in turn."""
    items = list(values)
    if not items:
        return 0
    # lead[r] holds, for the current left end l, the best lead over items[l..r]
    lead = list(items)
    n = len(items)
    for left in range(n - 2, -1, -1):
        for right in range(left + 1, n):
            take_left = items[left] - lead[right]
            take_right = items[right] - lead[right - 1]
            lead[right] = max(take_left, take_right)
    return (sum(items) + lead[-1]) // 2


def min_digit_removals(n: int) -> int:
    """Fewest steps to reach 0, each step subtracting one nonzero digit of the number."""
    if n < 0:
        raise ValueError(f"number must not be negative, got {n}")
    steps = [0] * (n + 1)
    for number in range(1, n + 1):
        digits = {int(d) for d in str(number)} - {0}
        steps[number] = 1 + min(steps[number - d] for d in digits)
    return steps[n]


def count_equal_partitions(n: int) -> int:
    """Ways to split 1..n into two sets of equal sum, modulo 1e9+7."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    total = n * (n + 1) // 2
    if total % 2:
        return 0
    half = total // 2
    ways = [1] + [0] * half
    for number in range(1, n + 1):
        for target in range(half, number - 1, -1):
            ways[target] = (ways[target] + ways[target - number]) % MODULUS
    return (ways[half] // 2) % MODULUS


def minimal_grid_path(grid: Sequence[str]) -> str:
    """Lexicographically smallest string read along a path from the top-left to the
    bottom-right cell, moving only down or right."""
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    rows, cols = len(grid), len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("grid rows must all have the same length")

    letters = [grid[0][0]]
    frontier = {(0, 0)}
    for _ in range(rows + cols - 2):
        candidates = {
            (r, c)
            for row, col in frontier
            for r, c in ((row + 1, col), (row, col + 1))
            if r < rows and c < cols
        }
        best = min(grid[r][c] for r, c in candidates)
        letters.append(best)
        frontier = {(r, c) for r, c in candidates if grid[r][c] == best}
    return "".join(letters)