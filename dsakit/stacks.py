"""Stack implementations: a fixed-capacity array stack and a linked stack."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

__all__ = [
    "StackOverflowError",
    "StackUnderflowError",
    "ArrayStack",
    "LinkedStack",
]


class StackOverflowError(Exception):
    """Raised when a value is pushed onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when a value is taken from an empty stack."""


class ArrayStack:
    """A stack held in a fixed-size array.

    Iteration runs from the top of the stack to the bottom. ``peek``
    positions count from 1, the top of the stack.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._top = -1

    def __iter__(self) -> Iterator[Any]:
        return (self._slots[i] for i in range(self._top, -1, -1))

    def __len__(self) -> int:
        return self._top + 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._capacity}, top-first={list(self)!r})"

    def push(self, value: Any) -> None:
        """Put value on top of the stack."""
        if self.is_full():
            raise StackOverflowError("stack overflow")
        self._top += 1
        self._slots[self._top] = value

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self.is_empty():
            raise StackUnderflowError("stack underflow")
        value = self._slots[self._top]
        self._slots[self._top] = None
        self._top -= 1
        return value

    def peek(self, position: int) -> Any:
        """Return the value ``position`` places down, 1 being the top."""
        index = self._top - position + 1
        if position < 1 or index < 0:
            raise IndexError(f"invalid position {position}")
        return self._slots[index]

    def top(self) -> Any:
        """Return the top value without removing it."""
        if self.is_empty():
            raise StackUnderflowError("stack is empty")
        return self._slots[self._top]

    def is_full(self) -> bool:
        return self._top == self._capacity - 1

    def is_empty(self) -> bool:
        return self._top == -1


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any, next_node: _Node | None) -> None:
        self.data = data
        self.next = next_node


class LinkedStack:
    """An unbounded stack of linked nodes.

    Iteration runs from the top of the stack to the bottom. ``peek``
    positions count from 1, the top of the stack.
    """

    def __init__(self) -> None:
        self._top: _Node | None = None

    def __iter__(self) -> Iterator[Any]:
        p = self._top
        while p is not None:
            yield p.data
            p = p.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(top-first={list(self)!r})"

    def push(self, value: Any) -> None:
        """Put value on top of the stack."""
        self._top = _Node(value, self._top)

    def pop(self) -> Any:
        """Remove and return the top value."""
        node = self._top
        if node is None:
            raise StackUnderflowError("stack underflow")
        self._top = node.next
        return node.data

    def peek(self, position: int) -> Any:
        """Return the value ``position`` places down, 1 being the top."""
        if position < 1:
            raise IndexError(f"invalid position {position}")
        p = self._top
        for _ in range(position - 1):
            if p is None:
                break
            p = p.next
        if p is None:
            raise IndexError(f"invalid position {position}")
        return p.data

    def top(self) -> Any:
        """Return the top value without removing it."""
        if self._top is None:
            raise StackUnderflowError("stack is empty")
        return self._top.data

    def is_empty(self) -> bool:
        return self._top is None