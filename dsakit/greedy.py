"""Greedy algorithms: fractional knapsack, job sequencing, optimal merge."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

__all__ = [
    "Item",
    "Job",
    "fractional_knapsack",
    "job_sequencing",
    "optimal_merge_cost",
]


@dataclass(frozen=True)
class Item:
    """An item that may be taken whole or in part."""

    profit: float
    weight: float

    @property
    def ratio(self) -> float:
        """Profit per unit of weight."""
        return self.profit / self.weight


@dataclass(frozen=True)
class Job:
    """A unit-time job earning profit if done by its deadline."""

    id: Any
    profit: float
    deadline: int


def fractional_knapsack(items: Iterable[Item], capacity: float) -> float:
    """Return the largest profit fitting in capacity when items may be split."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    pool = list(items)
    if any(item.weight <= 0 for item in pool):
        raise ValueError("item weights must be positive")
    remaining = capacity
    total = 0.0
    for item in sorted(pool, key=lambda item: item.ratio, reverse=True):
        if item.weight <= remaining:
            remaining -= item.weight
            total += item.profit
        else:
            total += item.profit * (remaining / item.weight)
            break
    return total


def job_sequencing(jobs: Sequence[Job]) -> list[Job]:
    """Schedule the most profitable jobs, one per time slot, by their deadlines.

    Each job, taken in order of falling profit, goes in the latest free
    slot before its deadline. Returns the scheduled jobs in slot order.
    """
    n = len(jobs)
    slots: list[Job | None] = [None] * n
    for job in sorted(jobs, key=lambda job: job.profit, reverse=True):
        for j in range(min(n, job.deadline) - 1, -1, -1):
            if slots[j] is None:
                slots[j] = job
                break
    return [job for job in slots if job is not None]


def optimal_merge_cost(sizes: Iterable[int]) -> int:
    """Return the least total cost of merging files two at a time.

    Merging two files costs the sum of their sizes.
    """
    heap = list(sizes)
    heapq.heapify(heap)
    total = 0
    while len(heap) > 1:
        merged = heapq.heappop(heap) + heapq.heappop(heap)
        total += merged
        heapq.heappush(heap, merged)
    return total