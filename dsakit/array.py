"""A fixed-capacity array with the classic array operations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

__all__ = ["BoundedArray"]


class BoundedArray:
    """An ordered collection that never grows past a fixed capacity.

    Indices run from 0 to ``len(array) - 1``; negative indices are not
    accepted. Operations that would exceed the capacity raise
    ``OverflowError``.
    """

    def __init__(self, capacity: int, values: Iterable[Any] = ()) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        items = list(values)
        if len(items) > capacity:
            raise ValueError(
                f"{len(items)} values do not fit in capacity {capacity}"
            )
        self._capacity = capacity
        self._items = items

    @property
    def capacity(self) -> int:
        """The largest number of elements the array can hold."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._capacity}, {self._items!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BoundedArray):
            return self._items == other._items
        return NotImplemented

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")

    def _check_room(self) -> None:
        if len(self._items) >= self._capacity:
            raise OverflowError(f"array is full (capacity {self._capacity})")

    def __getitem__(self, index: int) -> Any:
        self._check_index(index)
        return self._items[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._check_index(index)
        self._items[index] = value

    def insert(self, index: int, value: Any) -> None:
        """Insert value at index, shifting later elements right."""
        if not 0 <= index <= len(self._items):
            raise IndexError(f"index {index} out of range")
        self._check_room()
        self._items.insert(index, value)

    def delete(self, index: int) -> Any:
        """Remove and return the element at index, shifting later ones left."""
        self._check_index(index)
        return self._items.pop(index)

    def linear_search(self, key: Any) -> int | None:
        """Return the index of the first element equal to key, or None."""
        return next((i for i, v in enumerate(self._items) if v == key), None)

    def transposition_search(self, key: Any) -> int | None:
        """Find key and swap it one place towards the front.

        Returns the index where key was found, or None.
        """
        i = self.linear_search(key)
        if i is not None and i > 0:
            items = self._items
            items[i], items[i - 1] = items[i - 1], items[i]
        return i

    def move_to_front_search(self, key: Any) -> int | None:
        """Find key and swap it with the first element.

        Returns the index where key was found, or None.
        """
        i = self.linear_search(key)
        if i is not None:
            items = self._items
            items[0], items[i] = items[i], items[0]
        return i

    def binary_search(self, key: Any) -> int | None:
        """Search a sorted array iteratively; return an index of key or None."""
        low, high = 0, len(self._items) - 1
        while low <= high:
            mid = (low + high) // 2
            value = self._items[mid]
            if key == value:
                return mid
            if key < value:
                high = mid - 1
            else:
                low = mid + 1
        return None

    def recursive_binary_search(self, key: Any) -> int | None:
        """Search a sorted array recursively; return an index of key or None."""
        items = self._items

        def search(low: int, high: int) -> int | None:
            if low > high:
                return None
            mid = (low + high) // 2
            if key == items[mid]:
                return mid
            if key < items[mid]:
                return search(low, mid - 1)
            return search(mid + 1, high)

        return search(0, len(items) - 1)

    def _require_elements(self, operation: str) -> None:
        if not self._items:
            raise ValueError(f"{operation} of an empty array")

    def max(self) -> Any:
        """Return the largest element."""
        self._require_elements("max")
        largest = self._items[0]
        for v in self._items:
            if v > largest:
                largest = v
        return largest

    def min(self) -> Any:
        """Return the smallest element."""
        self._require_elements("min")
        smallest = self._items[0]
        for v in self._items:
            if v < smallest:
                smallest = v
        return smallest

    def sum(self) -> Any:
        """Return the sum of the elements."""
        total = 0
        for v in self._items:
            total += v
        return total

    def recursive_sum(self) -> Any:
        """Return the sum of the elements, computed recursively."""
        items = self._items

        def total(n: int) -> Any:
            if n < 0:
                return 0
            return items[n] + total(n - 1)

        return total(len(items) - 1)

    def average(self) -> float:
        """Return the arithmetic mean of the elements."""
        self._require_elements("average")
        return self.sum() / len(self._items)

    def reverse(self) -> None:
        """Reverse the elements by copying them through a second list."""
        self._items[:] = self._items[::-1]

    def reverse_by_swap(self) -> None:
        """Reverse the elements in place by swapping from both ends."""
        items = self._items
        i, j = 0, len(items) - 1
        while i < j:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1

    def insert_sorted(self, value: Any) -> None:
        """Insert value into a sorted array, keeping it sorted."""
        self._check_room()
        items = self._items
        items.append(value)
        i = len(items) - 2
        while i >= 0 and items[i] > value:
            items[i + 1] = items[i]
            i -= 1
        items[i + 1] = value

    def is_sorted(self) -> bool:
        """Return True if the elements are in non-decreasing order."""
        return all(a <= b for a, b in zip(self._items, self._items[1:]))

    def shift_negatives_left(self) -> None:
        """Move all negative elements before the non-negative ones."""
        items = self._items
        i, j = 0, len(items) - 1
        while i < j:
            while i < j and items[i] < 0:
                i += 1
            while i < j and items[j] >= 0:
                j -= 1
            if i < j:
                items[i], items[j] = items[j], items[i]

    def merge(self, other: BoundedArray) -> BoundedArray:
        """Merge two sorted arrays into a new sorted array."""
        a, b = self._items, other._items
        merged = []
        i = j = 0
        while i < len(a) and j < len(b):
            if a[i] < b[j]:
                merged.append(a[i])
                i += 1
            else:
                merged.append(b[j])
                j += 1
        merged.extend(a[i:])
        merged.extend(b[j:])
        return BoundedArray(len(a) + len(b), merged)

    def _result_capacity(self, size: int) -> int:
        return max(self._capacity, size)

    def union(self, other: BoundedArray) -> BoundedArray:
        """Return the sorted union of two sorted arrays."""
        a, b = self._items, other._items
        result = []
        i = j = 0
        while i < len(a) and j < len(b):
            if a[i] < b[j]:
                result.append(a[i])
                i += 1
            elif b[j] < a[i]:
                result.append(b[j])
                j += 1
            else:
                result.append(a[i])
                i += 1
                j += 1
        result.extend(a[i:])
        result.extend(b[j:])
        return BoundedArray(self._result_capacity(len(result)), result)

    def intersection(self, other: BoundedArray) -> BoundedArray:
        """Return the elements common to two sorted arrays."""
        a, b = self._items, other._items
        result = []
        i = j = 0
        while i < len(a) and j < len(b):
            if a[i] < b[j]:
                i += 1
            elif a[i] > b[j]:
                j += 1
            else:
                result.append(a[i])
                i += 1
                j += 1
        return BoundedArray(self._result_capacity(len(result)), result)

    def difference(self, other: BoundedArray) -> BoundedArray:
        """Return the elements of this sorted array not in the other."""
        a, b = self._items, other._items
        result = []
        i = j = 0
        while i < len(a) and j < len(b):
            if a[i] < b[j]:
                result.append(a[i])
                i += 1
            elif a[i] > b[j]:
                j += 1
            else:
                i += 1
                j += 1
        result.extend(a[i:])
        return BoundedArray(self._result_capacity(len(result)), result)

    def find_missing(self) -> int | None:
        """Return the first value missing from a sorted run of integers.

        Returns None if the run has no gap.
        """
        items = self._items
        if not items:
            return None
        difference = items[0]
        for i, v in enumerate(items):
            if v - i != difference:
                return i + difference
        return None

    def find_all_missing(self) -> list[int]:
        """Return every value missing from a sorted run of integers."""
        items = self._items
        missing: list[int] = []
        if not items:
            return missing
        difference = items[0]
        i = 0
        while i < len(items):
            if items[i] - i != difference:
                missing.append(difference + i)
                difference += 1
            else:
                i += 1
        return missing