"""Whole-array scans: missing values, duplicates, pair sums, extremes."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from typing import Any

__all__ = [
    "missing_elements",
    "find_duplicates",
    "count_duplicates",
    "count_duplicates_hashed",
    "count_duplicates_unsorted",
    "two_sum",
    "two_sum_hashed",
    "two_sum_sorted",
    "min_max",
]


def missing_elements(values: Iterable[int]) -> list[int]:
    """Return the integers between the smallest and largest value not present.

    The values need not be sorted.
    """
    items = list(values)
    if not items:
        return []
    present = set(items)
    return [v for v in range(min(items), max(items) + 1) if v not in present]


def find_duplicates(values: Sequence[Any]) -> list[Any]:
    """Return each value that repeats in a sorted sequence, once."""
    duplicates: list[Any] = []
    for a, b in zip(values, values[1:]):
        if a == b and (not duplicates or duplicates[-1] != a):
            duplicates.append(a)
    return duplicates


def count_duplicates(values: Sequence[Any]) -> dict[Any, int]:
    """Map each repeated value of a sorted sequence to how often it appears."""
    counts: dict[Any, int] = {}
    i = 0
    n = len(values)
    while i < n:
        j = i + 1
        while j < n and values[j] == values[i]:
            j += 1
        if j - i > 1:
            counts[values[i]] = counts.get(values[i], 0) + j - i
        i = j
    return counts


def count_duplicates_hashed(values: Iterable[int]) -> dict[int, int]:
    """Count repeated non-negative integers with a table indexed by value.

    The result is ordered by value.
    """
    items = list(values)
    if any(v < 0 for v in items):
        raise ValueError("values must be non-negative integers")
    if not items:
        return {}
    table = [0] * (max(items) + 1)
    for v in items:
        table[v] += 1
    return {v: c for v, c in enumerate(table) if c > 1}


def count_duplicates_unsorted(values: Sequence[Any]) -> dict[Any, int]:
    """Count repeated values of an unsorted sequence by pairwise comparison.

    The result is ordered by each value's first appearance.
    """
    counted = [False] * len(values)
    counts: dict[Any, int] = {}
    for i, value in enumerate(values):
        if counted[i]:
            continue
        count = 1
        for j in range(i + 1, len(values)):
            if not counted[j] and values[j] == value:
                count += 1
                counted[j] = True
        if count > 1:
            counts[value] = count
    return counts


def two_sum(values: Sequence[Any], target: Any) -> list[tuple[Any, Any]]:
    """Return every pair of elements, in index order, that adds up to target."""
    return [
        (a, b)
        for i, a in enumerate(values)
        for b in values[i + 1 :]
        if a + b == target
    ]


def two_sum_hashed(values: Iterable[Any], target: Any) -> list[tuple[Any, Any]]:
    """Find pairs adding up to target in one pass, remembering values seen.

    For each element whose complement appeared earlier, yields
    ``(element, complement)``.
    """
    seen: Counter[Any] = Counter()
    pairs: list[tuple[Any, Any]] = []
    for v in values:
        complement = target - v
        if seen[complement]:
            pairs.append((v, complement))
        seen[v] += 1
    return pairs


def two_sum_sorted(values: Sequence[Any], target: Any) -> list[tuple[Any, Any]]:
    """Find pairs adding up to target in a sorted sequence from both ends."""
    pairs: list[tuple[Any, Any]] = []
    i, j = 0, len(values) - 1
    while i < j:
        s = values[i] + values[j]
        if s == target:
            pairs.append((values[i], values[j]))
            i += 1
            j -= 1
        elif s < target:
            i += 1
        else:
            j -= 1
    return pairs


def min_max(values: Iterable[Any]) -> tuple[Any, Any]:
    """Return the smallest and largest value found in a single scan."""
    iterator = iter(values)
    try:
        smallest = largest = next(iterator)
    except StopIteration:
        raise ValueError("min_max of an empty sequence") from None
    for v in iterator:
        if v < smallest:
            smallest = v
        elif v > largest:
            largest = v
    return smallest, largest