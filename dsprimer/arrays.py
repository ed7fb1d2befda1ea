"""A fixed-capacity array and the two classic searches over sequences."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any


class FixedArray:
    """An array with a fixed capacity and a number of slots in use.

    Slots in use start out as zero until values are set.
    """

    def __init__(self, capacity: int, used: int = 0) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        if not 0 <= used <= capacity:
            raise ValueError(
                f"used size {used} must lie between 0 and capacity {capacity}"
            )
        self.capacity = capacity
        self._items: list[int] = [0] * used

    def set_values(self, values: Iterable[int]) -> None:
        """Replace every used slot with ``values``, which must fill them exactly."""
        new_items = list(values)
        if len(new_items) != len(self._items):
            raise ValueError(
                f"expected {len(self._items)} values, got {len(new_items)}"
            )
        self._items = new_items

    def insert(self, index: int, element: int) -> None:
        """Insert ``element`` at ``index``, shifting later elements right."""
        if len(self._items) >= self.capacity:
            raise OverflowError(f"array is full (capacity {self.capacity})")
        if not 0 <= index <= len(self._items):
            raise IndexError(f"insert index {index} out of range")
        self._items.insert(index, element)

    def delete(self, index: int) -> int:
        """Remove and return the element at ``index``, shifting later ones left."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"delete index {index} out of range")
        return self._items.pop(index)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: Any) -> Any:
        return self._items[index]

    def __repr__(self) -> str:
        return f"FixedArray(capacity={self.capacity}, items={self._items!r})"


def linear_search(items: Iterable[Any], element: Any) -> int | None:
    """Return the index of the first occurrence of ``element``, or None."""
    for position, item in enumerate(items):
        if item == element:
            return position
    return None


def binary_search(items: Sequence[Any], element: Any) -> int | None:
    """Return an index of ``element`` in the ascending ``items``, or None."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] == element:
            return mid
        if items[mid] < element:
            low = mid + 1
        else:
            high = mid - 1
    return None