"""Array and linked stacks, plus the classic stack applications."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from dsprimer.linked_list import Node

_OPERATORS = frozenset("+-*/")
_PAIRS = {")": "(", "}": "{", "]": "["}


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when reading or popping from an empty stack."""


class ArrayStack:
    """A stack stored in an array of fixed size."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self.size = size
        self._items: list[Any] = []

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.size

    def push(self, value: Any) -> None:
        if self.is_full():
            raise StackOverflowError(f"stack overflow, cannot push {value!r}")
        self._items.append(value)

    def pop(self) -> Any:
        if self.is_empty():
            raise StackUnderflowError("cannot pop from empty stack")
        return self._items.pop()

    def peek(self, position: int) -> Any:
        """Return the value ``position`` places from the top, counting from 1."""
        if not 1 <= position <= len(self._items):
            raise IndexError(f"invalid position {position} for peek")
        return self._items[-position]

    def top(self) -> Any:
        if self.is_empty():
            raise StackUnderflowError("stack is empty, no top element")
        return self._items[-1]

    def __iter__(self) -> Iterator[Any]:
        """Yield values from the top of the stack down."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"ArrayStack(size={self.size}, items={self._items!r})"


class LinkedStack:
    """An unbounded stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: Node | None = None

    def is_empty(self) -> bool:
        return self._top is None

    def push(self, value: Any) -> None:
        self._top = Node(value, self._top)

    def pop(self) -> Any:
        if self._top is None:
            raise StackUnderflowError("cannot pop from empty stack")
        node = self._top
        self._top = node.next
        return node.data

    def _nodes(self) -> Iterator[Node]:
        node = self._top
        while node is not None:
            yield node
            node = node.next

    def peek(self, position: int) -> Any:
        """Return the value ``position`` places from the top, counting from 1."""
        if position >= 1:
            for index, node in enumerate(self._nodes(), start=1):
                if index == position:
                    return node.data
        raise IndexError(f"position {position} is out of bounds")

    def top(self) -> Any:
        if self._top is None:
            raise StackUnderflowError("stack is empty, no top element")
        return self._top.data

    def bottom(self) -> Any:
        if self._top is None:
            raise StackUnderflowError("stack is empty, no bottom element")
        last = self._top
        for last in self._nodes():
            pass
        return last.data

    def __iter__(self) -> Iterator[Any]:
        """Yield values from the top of the stack down."""
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedStack({list(self)!r})"


def precedence(op: str) -> int:
    """Binding strength of an arithmetic operator; 0 for anything else."""
    if op in ("*", "/"):
        return 2
    if op in ("+", "-"):
        return 1
    return 0


def infix_to_postfix(infix: str) -> str:
    """Convert an unparenthesised infix expression to postfix notation."""
    operators: list[str] = []
    output: list[str] = []
    for char in infix:
        if char not in _OPERATORS:
            output.append(char)
            continue
        while operators and precedence(char) <= precedence(operators[-1]):
            output.append(operators.pop())
        operators.append(char)
    output.extend(reversed(operators))
    return "".join(output)


def parentheses_balanced(expression: str) -> bool:
    """Report whether the round parentheses in ``expression`` are balanced."""
    depth = 0
    for char in expression:
        if char == "(":
            depth += 1
        elif char == ")":
            if depth == 0:
                return False
            depth -= 1
    return depth == 0


def brackets_balanced(expression: str) -> bool:
    """Report whether (), {} and [] in ``expression`` nest and match."""
    opened: list[str] = []
    for char in expression:
        if char in "({[":
            opened.append(char)
        elif char in _PAIRS:
            if not opened or opened.pop() != _PAIRS[char]:
                return False
    return not opened