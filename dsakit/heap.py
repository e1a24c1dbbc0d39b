"""Array-backed binary max-heap operations, indexed from zero."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = ["heap_push", "create_heap", "heap_delete", "heap_sort", "heapify"]


def _sift_down(items: list[Any], i: int, end: int) -> None:
    """Move items[i] down until both children in items[:end] are no larger."""
    j = 2 * i + 1
    while j < end:
        if j + 1 < end and items[j + 1] > items[j]:
            j += 1
        if items[j] > items[i]:
            items[i], items[j] = items[j], items[i]
            i = j
            j = 2 * i + 1
        else:
            break


def heap_push(heap: list[Any], key: Any) -> None:
    """Add key to the max-heap held in heap, sifting it up into place."""
    heap.append(key)
    i = len(heap) - 1
    while i > 0:
        parent = (i - 1) // 2
        if not key > heap[parent]:
            break
        heap[i] = heap[parent]
        i = parent
    heap[i] = key


def create_heap(values: Iterable[Any]) -> list[Any]:
    """Build a max-heap by pushing the values one at a time."""
    heap: list[Any] = []
    for value in values:
        heap_push(heap, value)
    return heap


def heap_delete(heap: list[Any], last: int) -> Any:
    """Remove the maximum of heap[:last + 1] and return it.

    The maximum is swapped into position ``last`` and heap[:last] is
    restored to a max-heap, so repeated calls with a shrinking ``last``
    leave the list sorted in ascending order.
    """
    if not heap:
        raise IndexError("delete from an empty heap")
    if not 0 <= last < len(heap):
        raise IndexError(f"last index {last} outside heap of size {len(heap)}")
    top = heap[0]
    heap[0], heap[last] = heap[last], top
    _sift_down(heap, 0, last)
    return top


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order using heap sort."""
    heap = create_heap(values)
    for last in range(len(heap) - 1, 0, -1):
        heap_delete(heap, last)
    return heap


def heapify(values: Iterable[Any]) -> list[Any]:
    """Return a max-heap made from values by sifting down from the last parent."""
    items = list(values)
    n = len(items)
    for start in range(n // 2 - 1, -1, -1):
        _sift_down(items, start, n)
    return items