"""Queue implementations: array, circular, linked, double-ended, priority, two-stack."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import chain
from typing import Any

__all__ = [
    "QueueFullError",
    "QueueEmptyError",
    "ArrayQueue",
    "CircularQueue",
    "LinkedQueue",
    "DoubleEndedQueue",
    "PriorityQueue",
    "TwoStackQueue",
]


class QueueFullError(Exception):
    """Raised when a value is added to a queue with no room for it."""


class QueueEmptyError(Exception):
    """Raised when a value is taken from an empty queue."""


def _check_capacity(capacity: int, minimum: int) -> None:
    if capacity < minimum:
        raise ValueError(f"capacity must be at least {minimum}")


class ArrayQueue:
    """A queue in a fixed array whose front and rear only move forwards.

    Slots freed by ``dequeue`` are never reused: once the rear reaches the
    end of the array the queue stays full.
    """

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity, 1)
        self._capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = -1
        self._rear = -1

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[self._front + 1 : self._rear + 1])

    def is_full(self) -> bool:
        return self._rear == self._capacity - 1

    def is_empty(self) -> bool:
        return self._front == self._rear

    def enqueue(self, value: Any) -> None:
        if self.is_full():
            raise QueueFullError("queue is full")
        self._rear += 1
        self._slots[self._rear] = value

    def dequeue(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        self._front += 1
        value = self._slots[self._front]
        self._slots[self._front] = None
        return value


class CircularQueue:
    """A queue in a fixed array whose indices wrap around.

    One slot is always left free, so it holds at most ``capacity - 1`` values.
    """

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity, 2)
        self._capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._rear = 0

    def __iter__(self) -> Iterator[Any]:
        i = self._front
        while i != self._rear:
            i = (i + 1) % self._capacity
            yield self._slots[i]

    def is_full(self) -> bool:
        return (self._rear + 1) % self._capacity == self._front

    def is_empty(self) -> bool:
        return self._front == self._rear

    def enqueue(self, value: Any) -> None:
        if self.is_full():
            raise QueueFullError("queue is full")
        self._rear = (self._rear + 1) % self._capacity
        self._slots[self._rear] = value

    def dequeue(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        self._front = (self._front + 1) % self._capacity
        value = self._slots[self._front]
        self._slots[self._front] = None
        return value


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.next: _Node | None = None


class LinkedQueue:
    """An unbounded queue of linked nodes."""

    def __init__(self) -> None:
        self._front: _Node | None = None
        self._rear: _Node | None = None

    def __iter__(self) -> Iterator[Any]:
        p = self._front
        while p is not None:
            yield p.data
            p = p.next

    def is_empty(self) -> bool:
        return self._front is None

    def enqueue(self, value: Any) -> None:
        node = _Node(value)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node

    def dequeue(self) -> Any:
        node = self._front
        if node is None:
            raise QueueEmptyError("queue is empty")
        self._front = node.next
        if self._front is None:
            self._rear = None
        return node.data


class DoubleEndedQueue:
    """A fixed-array queue that can add and remove at both ends.

    Values occupy the slots just after the front index up to the rear
    index. Adding at the front needs a slot freed by removing from the
    front; adding at the rear stops at the end of the array.
    """

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity, 1)
        self._capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = -1
        self._rear = -1

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[self._front + 1 : self._rear + 1])

    def is_full(self) -> bool:
        return self._rear == self._capacity - 1

    def is_empty(self) -> bool:
        return self._front == self._rear

    def enqueue_front(self, value: Any) -> None:
        if self._front == -1:
            raise QueueFullError("no room at the front of the queue")
        self._slots[self._front] = value
        self._front -= 1

    def enqueue_rear(self, value: Any) -> None:
        if self.is_full():
            raise QueueFullError("no room at the rear of the queue")
        self._rear += 1
        self._slots[self._rear] = value

    def dequeue_front(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        self._front += 1
        value = self._slots[self._front]
        self._slots[self._front] = None
        return value

    def dequeue_rear(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        value = self._slots[self._rear]
        self._slots[self._rear] = None
        self._rear -= 1
        return value


class PriorityQueue:
    """A queue with three priority levels, 1 being the highest.

    Values leave highest priority first, and in arrival order within a level.
    """

    LEVELS = 3

    def __init__(self) -> None:
        self._queues = [LinkedQueue() for _ in range(self.LEVELS)]

    def __iter__(self) -> Iterator[Any]:
        return chain.from_iterable(self._queues)

    def enqueue(self, value: Any, priority: int) -> None:
        if not 1 <= priority <= self.LEVELS:
            raise ValueError(f"priority must be between 1 and {self.LEVELS}")
        self._queues[priority - 1].enqueue(value)

    def dequeue(self) -> Any:
        for queue in self._queues:
            if not queue.is_empty():
                return queue.dequeue()
        raise QueueEmptyError("queue is empty")


class TwoStackQueue:
    """A queue made of two stacks: one to push onto, one to pop from."""

    def __init__(self) -> None:
        self._inbox: list[Any] = []
        self._outbox: list[Any] = []

    def enqueue(self, value: Any) -> None:
        self._inbox.append(value)

    def dequeue(self) -> Any:
        if not self._outbox:
            if not self._inbox:
                raise QueueEmptyError("queue underflow")
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        return self._outbox.pop()