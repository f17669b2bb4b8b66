"""Greedy answers to scheduling, covering and stacking problems."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence

from sortedcontainers import SortedList

Interval = tuple[int, int]


def reading_time(times: Iterable[int]) -> int:
    """Least time for two readers to each read every book, one reader per book at a time."""
    items = list(times)
    if not items:
        raise ValueError("at least one book is required")
    longest = max(items)
    rest = sum(items) - longest
    if longest > rest:
        return 2 * longest
    return longest + rest


def max_customers(intervals: Iterable[Interval]) -> int:
    """Largest number of guests present at once; each stays from arrival to departure inclusive."""
    events: list[tuple[int, int]] = []
    for arrival, departure in intervals:
        events.append((arrival, 1))
        events.append((departure + 1, -1))
    events.sort()
    present = 0
    best = 0
    for _, change in events:
        present += change
        best = max(best, present)
    return best


def allocate_rooms(intervals: Sequence[Interval]) -> tuple[int, list[int]]:
    """Fewest rooms for the given stays, and the room (counted from 1) given to each stay.

    A room is free for a new guest only once its previous guest departed on an
    earlier day.
    """
    order = sorted((arrival, departure, index) for index, (arrival, departure) in enumerate(intervals))
    rooms: list[int] = [0] * len(order)
    occupied: list[tuple[int, int]] = []
    count = 0
    for arrival, departure, index in order:
        if not occupied or occupied[0][0] >= arrival:
            count += 1
            room = count
            heapq.heappush(occupied, (departure, room))
        else:
            _, room = heapq.heapreplace(occupied, (departure, occupied[0][1]))
            # heapreplace returned the old top; its room is reused
        rooms[index] = room
    return count, rooms


def smallest_missing_sum(coins: Iterable[int]) -> int:
    """Smallest positive sum that no selection of the coins adds up to."""
    reachable = 1
    for coin in sorted(coins):
        if coin > reachable:
            break
        reachable += coin
    return reachable


def stick_cost(lengths: Iterable[int]) -> int:
    """Least total change that makes every stick the same length."""
    ordered = sorted(lengths)
    if not ordered:
        raise ValueError("at least one stick is required")
    median = ordered[len(ordered) // 2]
    return sum(abs(length - median) for length in ordered)


def deadline_reward(tasks: Iterable[Interval]) -> int:
    """Best total reward for tasks ``(duration, deadline)`` done one after another.

    Each task earns its deadline minus its finishing time, which may be negative.
    """
    elapsed = 0
    reward = 0
    for duration, deadline in sorted(tasks):
        elapsed += duration
        reward += deadline - elapsed
    return reward


def count_towers(cubes: Iterable[int]) -> int:
    """Fewest towers when cubes arrive in order and each rests on a strictly larger cube."""
    tops: SortedList = SortedList()
    for cube in cubes:
        position = tops.bisect_right(cube)
        if position < len(tops):
            del tops[position]
        tops.add(cube)
    return len(tops)


def third_side(values: Iterable[int]) -> int:
    """Largest value left after repeatedly replacing two values ``x``, ``y`` by ``x + y - 1``."""
    heap = [-value for value in values]
    if not heap:
        raise ValueError("at least one value is required")
    if len(heap) == 1:
        return -heap[0]
    heapq.heapify(heap)
    while len(heap) > 1:
        x = -heapq.heappop(heap)
        y = -heapq.heappop(heap)
        heapq.heappush(heap, -(x + y - 1))
    return -heap[0]