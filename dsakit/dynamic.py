"""Dynamic programming: Fibonacci numbers and multistage graph paths."""

from __future__ import annotations

import math
from collections.abc import Sequence

__all__ = ["fibonacci", "multistage_shortest_path"]


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, keeping only the last two terms."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n <= 1:
        return n
    prev2, prev1 = 0, 1
    for _ in range(2, n + 1):
        prev2, prev1 = prev1, prev2 + prev1
    return prev1


def multistage_shortest_path(
    graph: Sequence[Sequence[float]], stages: int
) -> list[int]:
    """Return the cheapest path through a multistage graph.

    ``graph`` is an adjacency matrix indexed from 1: row and column 0 are
    ignored, a weight of 0 means no edge, and edges only lead to higher
    numbered vertices. The path starts at vertex 1, ends at the last vertex
    and visits one vertex per stage.
    """
    n = len(graph) - 1
    if n < 1:
        raise ValueError("graph has no vertices")
    if stages < 2:
        raise ValueError("a multistage graph has at least two stages")

    cost = [math.inf] * (n + 1)
    choice: list[int | None] = [None] * (n + 1)
    cost[n] = 0
    for i in range(n - 1, 0, -1):
        for k in range(i + 1, n + 1):
            weight = graph[i][k]
            if weight != 0 and weight + cost[k] < cost[i]:
                cost[i] = weight + cost[k]
                choice[i] = k

    if math.isinf(cost[1]):
        raise ValueError("no path from the first vertex to the last")

    path = [1]
    for _ in range(2, stages):
        nxt = choice[path[-1]]
        if nxt is None:
            raise ValueError("graph has fewer stages than requested")
        path.append(nxt)
    path.append(n)
    return path