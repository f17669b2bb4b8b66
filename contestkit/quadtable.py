"""Numbering of a 2^n by 2^n table filled by recursive quadrant order.

Within every block the quadrants are filled top-left, bottom-right,
bottom-left, then top-right.
"""

from __future__ import annotations

# quadrant index -> (row offset, column offset) in units of the half side
_OFFSETS = ((0, 0), (1, 1), (1, 0), (0, 1))


def _check_order(n: int) -> None:
    if n < 0:
        raise ValueError(f"table order must not be negative, got {n}")


def cell_number(n: int, row: int, col: int) -> int:
    """Number written in the cell at ``row``, ``col`` (both counted from 1)."""
    _check_order(n)
    side = 1 << n
    if not (1 <= row <= side and 1 <= col <= side):
        raise ValueError(f"cell ({row}, {col}) outside a table of side {side}")
    r, c = row - 1, col - 1
    number = 0
    for level in range(n, 0, -1):
        half = 1 << (level - 1)
        quadrant = _OFFSETS.index((int(r >= half), int(c >= half)))
        r %= half
        c %= half
        number += quadrant * half * half
    return number + 1


def cell_position(n: int, number: int) -> tuple[int, int]:
    """Row and column (both counted from 1) of the cell holding ``number``."""
    _check_order(n)
    cells = 1 << (2 * n)
    if not 1 <= number <= cells:
        raise ValueError(f"number {number} outside 1..{cells}")
    remaining = number - 1
    row = col = 0
    for level in range(n, 0, -1):
        half = 1 << (level - 1)
        quadrant, remaining = divmod(remaining, half * half)
        dr, dc = _OFFSETS[quadrant]
        row += dr * half
        col += dc * half
    return row + 1, col + 1