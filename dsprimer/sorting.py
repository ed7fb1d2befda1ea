"""Classic comparison and counting sorts, each returning a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Bubble sort, stopping early after a pass with no swaps."""
    result = list(items)
    n = len(result)
    for pass_number in range(n - 1):
        swapped = False
        for j in range(n - 1 - pass_number):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def count_sort(items: Iterable[int]) -> list[int]:
    """Counting sort for non-negative integers."""
    values = list(items)
    if not values:
        return []
    if min(values) < 0:
        raise ValueError("count_sort only handles non-negative integers")
    counts = [0] * (max(values) + 1)
    for value in values:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Insertion sort: shift larger elements right and drop each key in place."""
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Top-down merge sort."""
    result = list(items)
    if len(result) <= 1:
        return result
    mid = (len(result) - 1) // 2 + 1
    return _merge(merge_sort(result[:mid]), merge_sort(result[mid:]))


def _partition(values: list[Any], low: int, high: int) -> int:
    """Partition ``values[low..high]`` around ``values[low]``; return pivot spot."""
    pivot = values[low]
    i, j = low, high + 1
    while True:
        i += 1
        while i <= high and values[i] <= pivot:
            i += 1
        j -= 1
        while values[j] > pivot:
            j -= 1
        if i >= j:
            break
        values[i], values[j] = values[j], values[i]
    values[low], values[j] = values[j], values[low]
    return j


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Quick sort using the first element of each range as the pivot."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(result, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Selection sort: swap the smallest remaining element into place."""
    result = list(items)
    n = len(result)
    for i in range(n - 1):
        min_index = i
        for j in range(i + 1, n):
            if result[j] < result[min_index]:
                min_index = j
        if min_index != i:
            result[i], result[min_index] = result[min_index], result[i]
    return result