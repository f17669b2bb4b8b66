"""Shortest paths on weighted graphs and dynamic programming on trees.

Nodes are numbered from 1.
"""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence

WeightedEdge = tuple[int, int, int]
Edge = tuple[int, int]


def _check_size(n: int) -> None:
    if n < 1:
        raise ValueError(f"graph needs at least one node, got {n}")


def _check_node(n: int, node: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} outside 1..{n}")


def shortest_paths(n: int, edges: Iterable[WeightedEdge]) -> list[int | None]:
    """Distances from node 1 over directed edges ``(a, b, weight)``.

    Entry ``i`` is the distance to node ``i + 1``, or ``None`` if it cannot be reached.
    """
    _check_size(n)
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for a, b, weight in edges:
        _check_node(n, a)
        _check_node(n, b)
        adjacency[a].append((b, weight))

    distance: list[int | None] = [None] * (n + 1)
    distance[1] = 0
    heap = [(0, 1)]
    while heap:
        current, node = heapq.heappop(heap)
        known = distance[node]
        if known is not None and current > known:
            continue
        for target, weight in adjacency[node]:
            candidate = current + weight
            best = distance[target]
            if best is None or candidate < best:
                distance[target] = candidate
                heapq.heappush(heap, (candidate, target))
    return distance[1:]


def all_pairs_shortest(n: int, edges: Iterable[WeightedEdge]) -> list[list[int | None]]:
    """Shortest distances between all pairs over two-way edges ``(a, b, weight)``.

    ``result[a - 1][b - 1]`` is the distance from ``a`` to ``b``, or ``None``.
    Of several edges between the same nodes the lightest counts.
    """
    _check_size(n)
    dist: list[list[float]] = [[0 if i == j else math.inf for j in range(n)] for i in range(n)]
    for a, b, weight in edges:
        _check_node(n, a)
        _check_node(n, b)
        dist[a - 1][b - 1] = min(dist[a - 1][b - 1], weight)
        dist[b - 1][a - 1] = min(dist[b - 1][a - 1], weight)

    for k in range(n):
        through_k = dist[k]
        for row in dist:
            to_k = row[k]
            if to_k == math.inf:
                continue
            for j, onward in enumerate(through_k):
                if to_k + onward < row[j]:
                    row[j] = to_k + onward

    return [[None if d == math.inf else int(d) for d in row] for row in dist]


def route_queries(
    n: int, edges: Iterable[WeightedEdge], queries: Iterable[Edge]
) -> list[int]:
    """Shortest distance for each ``(a, b)`` query over two-way edges; -1 when unreachable."""
    matrix = all_pairs_shortest(n, edges)
    answers: list[int] = []
    for a, b in queries:
        _check_node(n, a)
        _check_node(n, b)
        distance = matrix[a - 1][b - 1]
        answers.append(-1 if distance is None else distance)
    return answers


def subordinate_counts(bosses: Sequence[int]) -> list[int]:
    """Number of subordinates of each employee.

    ``bosses`` lists the direct boss of employees 2, 3, ..., n; employee 1 heads
    the company. Entry ``i`` of the result belongs to employee ``i + 1``.
    """
    n = len(bosses) + 1
    children: list[list[int]] = [[] for _ in range(n + 1)]
    for employee, boss in enumerate(bosses, start=2):
        _check_node(n, boss)
        children[boss].append(employee)

    order = [1]
    for node in order:
        order.extend(children[node])

    counts = [0] * (n + 1)
    for node in reversed(order):
        counts[node] = sum(1 + counts[child] for child in children[node])
    return counts[1:]


def _rooted_children(n: int, edges: Iterable[Edge]) -> tuple[list[int], list[list[int]]]:
    """Breadth-first order from node 1 and the children of every node."""
    _check_size(n)
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        _check_node(n, a)
        _check_node(n, b)
        adjacency[a].append(b)
        adjacency[b].append(a)

    children: list[list[int]] = [[] for _ in range(n + 1)]
    visited = {1}
    order = [1]
    for node in order:
        for neighbour in adjacency[node]:
            if neighbour not in visited:
                visited.add(neighbour)
                children[node].append(neighbour)
                order.append(neighbour)
    return order, children


def tree_diameter(n: int, edges: Iterable[Edge]) -> int:
    """Number of edges on the longest path in the tree."""
    order, children = _rooted_children(n, edges)
    height = [0] * (n + 1)
    best = 0
    for node in reversed(order):
        first = second = 0
        for child in children[node]:
            depth = height[child]
            if depth > first:
                first, second = depth, first
            elif depth > second:
                second = depth
        best = max(best, first + second)
        height[node] = first + 1
    return best


def max_tree_matching(n: int, edges: Iterable[Edge]) -> int:
    """Largest number of tree edges that share no node."""
    order, children = _rooted_children(n, edges)
    free = [0] * (n + 1)
    matched: list[int | None] = [None] * (n + 1)
    for node in reversed(order):
        kids = children[node]
        free[node] = sum(max(free[c], matched[c] if matched[c] is not None else free[c]) for c in kids)
        if kids:
            gain = max(
                0 if matched[c] is None else min(free[c] - matched[c], 0) for c in kids
            )
            matched[node] = free[node] + gain + 1
    root_matched = matched[1]
    return free[1] if root_matched is None else max(free[1], root_matched)