"""Doubly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

__all__ = ["DoublyLinkedList"]


class _Node:
    __slots__ = ("prev", "data", "next")

    def __init__(self, data: Any) -> None:
        self.prev: _Node | None = None
        self.data = data
        self.next: _Node | None = None


class DoublyLinkedList:
    """A linked list whose nodes link both forwards and backwards.

    Positions used by ``insert`` count from 0 (insert before the first
    node); positions used by ``delete`` count from 1.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        last: _Node | None = None
        for value in values:
            node = _Node(value)
            if last is None:
                self._head = node
            else:
                node.prev = last
                last.next = node
            last = node

    def _nodes(self) -> Iterator[_Node]:
        p = self._head
        while p is not None:
            yield p
            p = p.next

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def backwards(self) -> Iterator[Any]:
        """Yield the values from last to first by following ``prev`` links."""
        last: _Node | None = None
        for last in self._nodes():
            pass
        p = last
        while p is not None:
            yield p.data
            p = p.prev

    def insert(self, position: int, value: Any) -> None:
        """Insert value so that it has ``position`` nodes before it."""
        if not 0 <= position <= len(self):
            raise IndexError(f"position {position} out of range")
        node = _Node(value)
        if position == 0:
            node.next = self._head
            if self._head is not None:
                self._head.prev = node
            self._head = node
            return
        p = self._head
        for _ in range(position - 1):
            assert p is not None
            p = p.next
        assert p is not None
        node.next = p.next
        node.prev = p
        if p.next is not None:
            p.next.prev = node
        p.next = node

    def delete(self, position: int) -> Any:
        """Remove the node at 1-based position and return its value."""
        if not 1 <= position <= len(self):
            raise IndexError(f"position {position} out of range")
        p = self._head
        assert p is not None
        if position == 1:
            self._head = p.next
            if self._head is not None:
                self._head.prev = None
            return p.data
        for _ in range(position - 1):
            assert p.next is not None
            p = p.next
        assert p.prev is not None
        p.prev.next = p.next
        if p.next is not None:
            p.next.prev = p.prev
        return p.data

    def reverse(self) -> None:
        """Reverse the list in place by swapping each node's links."""
        p = self._head
        while p is not None:
            p.prev, p.next = p.next, p.prev
            if p.prev is None:
                self._head = p
            p = p.prev