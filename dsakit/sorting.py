"""Classic comparison and distribution sorting algorithms.

Every function takes any iterable and returns a new sorted list, leaving
the input untouched.
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import chain
from typing import Any

__all__ = [
    "bubble_sort",
    "insertion_sort",
    "selection_sort",
    "quick_sort",
    "iterative_merge_sort",
    "merge_sort",
    "count_sort",
    "bin_sort",
    "radix_sort",
    "shell_sort",
]


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs.

    Stops early once a full pass makes no swap.
    """
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        x = items[i]
        j = i - 1
        while j >= 0 and items[j] > x:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = x
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by selecting the smallest remaining element for each position."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        k = min(range(i, n), key=items.__getitem__)
        items[i], items[k] = items[k], items[i]
    return items


def _partition(items: list[Any], low: int, high: int) -> int:
    """Partition items[low:high] around items[low]; return the pivot's index."""
    pivot = items[low]
    i = low
    j = high
    while True:
        i += 1
        while i < high and items[i] <= pivot:
            i += 1
        j -= 1
        while items[j] > pivot:
            j -= 1
        if i >= j:
            break
        items[i], items[j] = items[j], items[i]
    items[low], items[j] = items[j], items[low]
    return j


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Sort with quicksort, using the first element of each range as pivot."""
    items = list(values)
    ranges = [(0, len(items))]
    while ranges:
        low, high = ranges.pop()
        if high - low > 1:
            j = _partition(items, low, high)
            ranges.append((low, j))
            ranges.append((j + 1, high))
    return items


def _merge(items: list[Any], low: int, mid: int, high: int) -> None:
    """Merge the sorted runs items[low:mid] and items[mid:high] in place."""
    merged = []
    i, j = low, mid
    while i < mid and j < high:
        if items[j] < items[i]:
            merged.append(items[j])
            j += 1
        else:
            merged.append(items[i])
            i += 1
    merged.extend(items[i:mid])
    merged.extend(items[j:high])
    items[low:high] = merged


def iterative_merge_sort(values: Iterable[Any]) -> list[Any]:
    """Bottom-up merge sort: merge runs of width 1, 2, 4, ... in turn."""
    items = list(values)
    n = len(items)
    width = 1
    while width < n:
        for low in range(0, n, 2 * width):
            mid = min(low + width, n)
            high = min(low + 2 * width, n)
            if mid < high:
                _merge(items, low, mid, high)
        width *= 2
    return items


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Top-down recursive merge sort."""
    items = list(values)

    def sort_range(low: int, high: int) -> None:
        if high - low > 1:
            mid = (low + high) // 2
            sort_range(low, mid)
            sort_range(mid, high)
            _merge(items, low, mid, high)

    sort_range(0, len(items))
    return items


def _non_negative(values: Iterable[int], algorithm: str) -> list[int]:
    items = list(values)
    if any(v < 0 for v in items):
        raise ValueError(f"{algorithm} needs non-negative integers")
    return items


def count_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by counting occurrences of each value."""
    items = _non_negative(values, "count sort")
    if not items:
        return []
    counts = [0] * (max(items) + 1)
    for v in items:
        counts[v] += 1
    return [v for v, c in enumerate(counts) for _ in range(c)]


def bin_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by dropping each into a bin of its own value."""
    items = _non_negative(values, "bin sort")
    if not items:
        return []
    bins: list[list[int]] = [[] for _ in range(max(items) + 1)]
    for v in items:
        bins[v].append(v)
    return list(chain.from_iterable(bins))


def radix_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers digit by digit, least significant first."""
    items = _non_negative(values, "radix sort")
    if not items:
        return []
    largest = max(items)
    passes = len(str(largest)) if largest else 0
    for p in range(passes):
        divisor = 10**p
        buckets: list[list[int]] = [[] for _ in range(10)]
        for v in items:
            buckets[(v // divisor) % 10].append(v)
        items = list(chain.from_iterable(buckets))
    return items


def shell_sort(values: Iterable[Any]) -> list[Any]:
    """Shell sort with gaps n/2, n/4, ..., 1."""
    items = list(values)
    n = len(items)
    gap = n // 2
    while gap >= 1:
        for j in range(gap, n):
            temp = items[j]
            i = j - gap
            while i >= 0 and items[i] > temp:
                items[i + gap] = items[i]
                i -= gap
            items[i + gap] = temp
        gap //= 2
    return items