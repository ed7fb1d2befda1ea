"""Singly linked lists: a plain NULL-terminated list and a circular one."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """A list node holding one value and a link to the next node."""

    data: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list whose last node links to nothing."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        tail: Node | None = None
        for value in values:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _node_at(self, index: int) -> Node:
        if index >= 0:
            for position, node in enumerate(self._nodes()):
                if position == index:
                    return node
        raise IndexError(f"index {index} out of range")

    def find(self, value: Any) -> Node | None:
        """Return the first node holding ``value``, or None."""
        return next((node for node in self._nodes() if node.data == value), None)

    def insert_first(self, data: Any) -> Node:
        """Put ``data`` at the front of the list and return its node."""
        self.head = Node(data, self.head)
        return self.head

    def insert_at(self, index: int, data: Any) -> Node:
        """Insert ``data`` so that it ends up at position ``index``."""
        if index == 0:
            return self.insert_first(data)
        if index < 0:
            raise IndexError(f"index {index} out of range")
        return self.insert_after(self._node_at(index - 1), data)

    def insert_end(self, data: Any) -> Node:
        """Append ``data`` after the last node and return its node."""
        last = None
        for last in self._nodes():
            pass
        if last is None:
            return self.insert_first(data)
        return self.insert_after(last, data)

    def insert_after(self, node: Node, data: Any) -> Node:
        """Insert ``data`` directly after ``node`` and return the new node."""
        new_node = Node(data, node.next)
        node.next = new_node
        return new_node

    def delete_first(self) -> Any:
        """Remove the first node and return its value."""
        if self.head is None:
            raise IndexError("delete from empty list")
        removed = self.head
        self.head = removed.next
        return removed.data

    def delete_at(self, index: int) -> Any:
        """Remove the node at position ``index`` and return its value."""
        if index == 0:
            return self.delete_first()
        if index < 0:
            raise IndexError(f"index {index} out of range")
        previous = self._node_at(index - 1)
        removed = previous.next
        if removed is None:
            raise IndexError(f"index {index} out of range")
        previous.next = removed.next
        return removed.data

    def delete_end(self) -> Any:
        """Remove the last node and return its value."""
        if self.head is None:
            raise IndexError("delete from empty list")
        if self.head.next is None:
            return self.delete_first()
        previous = self.head
        while previous.next is not None and previous.next.next is not None:
            previous = previous.next
        removed = previous.next
        assert removed is not None
        previous.next = None
        return removed.data

    def delete_value(self, value: Any) -> bool:
        """Remove the first node holding ``value``; report whether one was found."""
        if self.head is None:
            return False
        if self.head.data == value:
            self.head = self.head.next
            return True
        previous = self.head
        while previous.next is not None:
            if previous.next.data == value:
                previous.next = previous.next.next
                return True
            previous = previous.next
        return False


class CircularLinkedList:
    """A singly linked list whose last node links back to the head."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for value in reversed(list(values)):
            self.insert_first(value)

    def _last(self) -> Node:
        assert self.head is not None
        node = self.head
        while node.next is not self.head:
            assert node.next is not None
            node = node.next
        return node

    def __iter__(self) -> Iterator[Any]:
        if self.head is None:
            return
        node = self.head
        while True:
            yield node.data
            assert node.next is not None
            node = node.next
            if node is self.head:
                break

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"CircularLinkedList({list(self)!r})"

    def insert_first(self, data: Any) -> Node:
        """Make ``data`` the new head, keeping the ring closed."""
        node = Node(data)
        if self.head is None:
            node.next = node
        else:
            self._last().next = node
            node.next = self.head
        self.head = node
        return node