"""Searching for value pairs and triples, and tracking gaps between traffic lights."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence

from sortedcontainers import SortedList


def two_sum_positions(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Positions (counted from 1) of two values summing to ``target``, or ``None``.

    Values are scanned left to right. The first value whose complement was
    already seen ends the search. If the complement occurred more than once,
    its latest earlier position is used.
    """
    seen: dict[Hashable, int] = {}
    for position, value in enumerate(values, start=1):
        partner = seen.get(target - value)
        if partner is not None:
            return partner, position
        seen[value] = position
    return None


def three_sum_positions(
    values: Sequence[int], target: int
) -> tuple[int, int, int] | None:
    """Positions (counted from 1) of three values summing to ``target``, or ``None``."""
    ordered = sorted((value, position) for position, value in enumerate(values, start=1))
    count = len(ordered)
    for first, (value, position) in enumerate(ordered):
        wanted = target - value
        low, high = first + 1, count - 1
        while low < high:
            pair = ordered[low][0] + ordered[high][0]
            if pair == wanted:
                return position, ordered[low][1], ordered[high][1]
            if pair < wanted:
                low += 1
            else:
                high -= 1
    return None


def traffic_light_gaps(length: int, positions: Iterable[int]) -> list[int]:
    """Longest stretch without a light after each light is added to a street ``[0, length]``."""
    if length < 1:
        raise ValueError(f"street length must be positive, got {length}")
    lights = SortedList([0, length])
    gaps = SortedList([length])
    result: list[int] = []
    for position in positions:
        if not 0 < position < length:
            raise ValueError(f"light position {position} outside 1..{length - 1}")
        index = lights.bisect_left(position)
        right = lights[index]
        if right == position:
            raise ValueError(f"a light already stands at {position}")
        left = lights[index - 1]
        gaps.remove(right - left)
        gaps.add(position - left)
        gaps.add(right - position)
        lights.add(position)
        result.append(gaps[-1])
    return result