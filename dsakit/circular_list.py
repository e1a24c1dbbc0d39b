"""Circular singly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

__all__ = ["CircularLinkedList"]


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.next: _Node = self


class CircularLinkedList:
    """A singly linked list whose last node links back to the first.

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
                node.next = last.next
                last.next = node
            last = node

    def _nodes(self) -> Iterator[_Node]:
        head = self._head
        if head is None:
            return
        p = head
        while True:
            yield p
            p = p.next
            if p is head:
                break

    def _tail(self) -> _Node:
        assert self._head is not None
        p = self._head
        while p.next is not self._head:
            p = p.next
        return p

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def insert(self, position: int, value: Any) -> None:
        """Insert value so that it has ``position`` nodes before it.

        Position 0 makes the new node the head of the list.
        """
        if not 0 <= position <= len(self):
            raise IndexError(f"position {position} out of range")
        node = _Node(value)
        if position == 0:
            if self._head is not None:
                self._tail().next = node
                node.next = self._head
            self._head = node
            return
        assert self._head is not None
        p = self._head
        for _ in range(position - 1):
            p = p.next
        node.next = p.next
        p.next = node

    def delete(self, position: int) -> Any:
        """Remove the node at 1-based position and return its value."""
        if not 1 <= position <= len(self):
            raise IndexError(f"position {position} out of range")
        head = self._head
        assert head is not None
        if position == 1:
            if head.next is head:
                self._head = None
            else:
                self._tail().next = head.next
                self._head = head.next
            return head.data
        p = head
        for _ in range(position - 2):
            p = p.next
        q = p.next
        p.next = q.next
        return q.data