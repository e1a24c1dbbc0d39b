"""Singly linked list with the classic list algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

__all__ = ["Node", "LinkedList", "has_loop", "intersection_node"]


@dataclass(eq=False, repr=False)
class Node:
    """One link of a singly linked list."""

    data: Any
    next: Node | None = field(default=None)

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


class LinkedList:
    """A singly linked list built from a sequence of values.

    Positions used by ``insert`` count from 0 (insert before the first
    node); positions used by ``delete`` count from 1, as in the classic
    textbook formulation.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        last: Node | None = None
        for value in values:
            node = Node(value)
            if last is None:
                self.head = node
            else:
                last.next = node
            last = node

    def _nodes(self) -> Iterator[Node]:
        p = self.head
        while p is not None:
            yield p
            p = p.next

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def reversed_values(self) -> list[Any]:
        """Return the values from last to first, collected recursively."""

        def collect(p: Node | None, out: list[Any]) -> list[Any]:
            if p is not None:
                collect(p.next, out)
                out.append(p.data)
            return out

        return collect(self.head, [])

    def recursive_count(self) -> int:
        """Count the nodes recursively."""

        def count(p: Node | None) -> int:
            return 0 if p is None else count(p.next) + 1

        return count(self.head)

    def total(self) -> Any:
        """Return the sum of the values."""
        result = 0
        for value in self:
            result += value
        return result

    def recursive_total(self) -> Any:
        """Return the sum of the values, computed recursively."""

        def total(p: Node | None) -> Any:
            return 0 if p is None else total(p.next) + p.data

        return total(self.head)

    def _require_elements(self, operation: str) -> Node:
        if self.head is None:
            raise ValueError(f"{operation} of an empty list")
        return self.head

    def maximum(self) -> Any:
        """Return the largest value."""
        head = self._require_elements("maximum")
        largest = head.data
        for value in self:
            if value > largest:
                largest = value
        return largest

    def recursive_maximum(self) -> Any:
        """Return the largest value, computed recursively."""
        head = self._require_elements("maximum")

        def largest(p: Node) -> Any:
            if p.next is None:
                return p.data
            rest = largest(p.next)
            return rest if rest > p.data else p.data

        return largest(head)

    def search(self, key: Any) -> Node | None:
        """Return the first node holding key, or None."""
        return next((node for node in self._nodes() if node.data == key), None)

    def recursive_search(self, key: Any) -> Node | None:
        """Return the first node holding key, searching recursively."""

        def find(p: Node | None) -> Node | None:
            if p is None:
                return None
            if p.data == key:
                return p
            return find(p.next)

        return find(self.head)

    def move_to_front_search(self, key: Any) -> Node | None:
        """Find key and move its node to the head of the list.

        Returns the node found, or None.
        """
        previous: Node | None = None
        p = self.head
        while p is not None:
            if p.data == key:
                if previous is not None:
                    previous.next = p.next
                    p.next = self.head
                    self.head = p
                return p
            previous = p
            p = p.next
        return None

    def insert(self, position: int, value: Any) -> None:
        """Insert value so that it has ``position`` nodes before it."""
        if position < 0:
            raise IndexError(f"position {position} out of range")
        if position == 0:
            self.head = Node(value, self.head)
            return
        p = self.head
        for _ in range(position - 1):
            if p is None:
                break
            p = p.next
        if p is None:
            raise IndexError(f"position {position} out of range")
        p.next = Node(value, p.next)

    def insert_sorted(self, value: Any) -> None:
        """Insert value into a sorted list, keeping it sorted."""
        node = Node(value)
        if self.head is None or not self.head.data < value:
            node.next = self.head
            self.head = node
            return
        q = self.head
        while q.next is not None and q.next.data < value:
            q = q.next
        node.next = q.next
        q.next = node

    def delete(self, position: int) -> Any:
        """Remove the node at 1-based position and return its value."""
        if position < 1 or position > len(self):
            raise IndexError(f"position {position} out of range")
        assert self.head is not None
        if position == 1:
            value = self.head.data
            self.head = self.head.next
            return value
        q = self.head
        for _ in range(position - 2):
            assert q.next is not None
            q = q.next
        p = q.next
        assert p is not None
        q.next = p.next
        return p.data

    def is_sorted(self) -> bool:
        """Return True if the values are in non-decreasing order."""
        previous: Node | None = None
        for node in self._nodes():
            if previous is not None and node.data < previous.data:
                return False
            previous = node
        return True

    def remove_duplicates(self) -> None:
        """Drop adjacent repeated values, leaving one of each run."""
        p = self.head
        if p is None:
            return
        q = p.next
        while q is not None:
            if p.data != q.data:
                p = q
            else:
                p.next = q.next
            q = p.next

    def reverse_by_copy(self) -> None:
        """Reverse the list by rewriting the node values in reverse order."""
        values = list(self)
        for node in self._nodes():
            node.data = values.pop()

    def reverse(self) -> None:
        """Reverse the list in place using three sliding references."""
        p = self.head
        q: Node | None = None
        while p is not None:
            r = q
            q = p
            p = p.next
            q.next = r
        self.head = q

    def recursive_reverse(self) -> None:
        """Reverse the list in place by relinking nodes recursively."""

        def relink(q: Node | None, p: Node | None) -> None:
            if p is not None:
                relink(p, p.next)
                p.next = q
            else:
                self.head = q

        relink(None, self.head)

    def concatenate(self, other: LinkedList) -> None:
        """Append the nodes of other to this list, leaving other empty."""
        if self.head is None:
            self.head = other.head
        else:
            p = self.head
            while p.next is not None:
                p = p.next
            p.next = other.head
        other.head = None

    def merge(self, other: LinkedList) -> None:
        """Merge sorted other into this sorted list, leaving other empty.

        On equal values the node from other comes first.
        """
        first, second = self.head, other.head
        other.head = None
        if first is None or second is None:
            self.head = first if first is not None else second
            return
        if first.data < second.data:
            head = last = first
            first = first.next
        else:
            head = last = second
            second = second.next
        while first is not None and second is not None:
            if first.data < second.data:
                last.next = first
                last = first
                first = first.next
            else:
                last.next = second
                last = second
                second = second.next
        last.next = first if first is not None else second
        self.head = head

    def middle(self) -> Any:
        """Return the middle value; for an even length, the lower middle."""
        q = self._require_elements("middle")
        p: Node | None = q
        while p is not None:
            p = p.next
            if p is not None:
                p = p.next
            if p is not None:
                assert q.next is not None
                q = q.next
        return q.data


def has_loop(head: Node | None) -> bool:
    """Return True if following ``next`` from head ever revisits a node."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        assert slow is not None
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def intersection_node(first: Node | None, second: Node | None) -> Node | None:
    """Return the first node shared by two chains, or None if they never meet."""
    stack1: list[Node] = []
    while first is not None:
        stack1.append(first)
        first = first.next
    stack2: list[Node] = []
    while second is not None:
        stack2.append(second)
        second = second.next
    shared: Node | None = None
    while stack1 and stack2 and stack1[-1] is stack2[-1]:
        shared = stack1.pop()
        stack2.pop()
    return shared