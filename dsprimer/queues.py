"""Queues backed by a linear array, a circular array and a linked list."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from dsprimer.linked_list import Node


class QueueFullError(Exception):
    """Raised when enqueuing onto a queue with no free slot."""


class QueueEmptyError(Exception):
    """Raised when dequeuing from an empty queue."""


class ArrayQueue:
    """A linear array queue; slots freed by dequeue are never reused."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self.size = size
        self._slots: list[Any] = [None] * size
        self._front = -1
        self._rear = -1

    def is_empty(self) -> bool:
        return self._front == self._rear

    def is_full(self) -> bool:
        return self._rear == self.size - 1

    def enqueue(self, value: Any) -> None:
        if self.is_full():
            raise QueueFullError("queue is full")
        self._rear += 1
        self._slots[self._rear] = value

    def dequeue(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        self._front += 1
        return self._slots[self._front]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[self._front + 1 : self._rear + 1])

    def __len__(self) -> int:
        return self._rear - self._front


class CircularQueue:
    """A circular array queue holding at most ``size - 1`` items."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"size must be at least 1, got {size}")
        self.size = size
        self._slots: list[Any] = [None] * size
        self._front = 0
        self._rear = 0

    def is_empty(self) -> bool:
        return self._front == self._rear

    def is_full(self) -> bool:
        return (self._rear + 1) % self.size == self._front

    def enqueue(self, value: Any) -> None:
        if self.is_full():
            raise QueueFullError("queue is full")
        self._rear = (self._rear + 1) % self.size
        self._slots[self._rear] = value

    def dequeue(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        self._front = (self._front + 1) % self.size
        return self._slots[self._front]

    def __iter__(self) -> Iterator[Any]:
        index = self._front
        while index != self._rear:
            index = (index + 1) % self.size
            yield self._slots[index]

    def __len__(self) -> int:
        return (self._rear - self._front) % self.size


class LinkedQueue:
    """An unbounded queue built from linked nodes."""

    def __init__(self) -> None:
        self._front: Node | None = None
        self._rear: Node | None = None
        self._count = 0

    def is_empty(self) -> bool:
        return self._front is None

    def enqueue(self, value: Any) -> None:
        node = Node(value)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._count += 1

    def dequeue(self) -> Any:
        if self._front is None:
            raise QueueEmptyError("queue is empty")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._count -= 1
        return node.data

    def __iter__(self) -> Iterator[Any]:
        node = self._front
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._count